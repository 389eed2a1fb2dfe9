"""
Custom Groups Simulation

In-memory stand-ins for the data-access handler, used to exercise the
backend end-to-end without a database.

Components:
- groups.py: InMemoryGroupsHandler and SimulatedGroup

Usage:
    from tests.simulation import InMemoryGroupsHandler

    handler = InMemoryGroupsHandler()
    handler.add_group("engineering", "Engineering", members=["alice"])
    backend = CustomGroupsBackend(handler)

    assert await backend.in_group("alice", "customgroup_engineering")
"""

from tests.simulation.groups import InMemoryGroupsHandler, SimulatedGroup

__all__ = ["InMemoryGroupsHandler", "SimulatedGroup"]
