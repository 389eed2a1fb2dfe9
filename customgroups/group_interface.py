"""
customgroups.group_interface - Host Group Interface

The contract a group backend exposes to the host's group manager:
- GroupAction: capability bits the host can ask a backend about
- GroupBackend: abstract base class for read-side group backends

The host queries implements_actions() once per backend to decide which
calls are safe to issue.
"""

from abc import ABC, abstractmethod
from enum import IntFlag
from typing import Any


class GroupAction(IntFlag):
    """
    Capability bits understood by the host group manager.

    Values match the host's action mask, so a raw integer mask can be
    passed straight through.
    """

    CREATE_GROUP = 0x00000001
    DELETE_GROUP = 0x00000010
    ADD_TO_GROUP = 0x00000100
    REMOVE_FROM_GROUP = 0x00001000
    COUNT_USERS = 0x00100000
    GROUP_DETAILS = 0x01000000


class GroupBackend(ABC):
    """
    Abstract base class for group backends.

    Subclasses declare what they support in ``supported_actions`` and
    implement the read operations below.
    """

    supported_actions: GroupAction = GroupAction(0)

    def implements_actions(self, actions: int) -> bool:
        """
        Check whether this backend supports the requested actions.

        Args:
            actions: A GroupAction or raw integer mask

        Returns:
            True only if the mask is non-empty and every bit in it is
            supported. Unknown bits are never supported.
        """
        requested = int(actions)
        if requested == 0:
            return False
        return requested & ~int(self.supported_actions) == 0

    @abstractmethod
    async def in_group(self, user_id: str, group_id: Any) -> bool:
        """Check whether a user is a member of a group."""

    @abstractmethod
    async def get_user_groups(self, user_id: str) -> list[str]:
        """List the group ids a user belongs to."""

    @abstractmethod
    async def get_groups(
        self, search: str = "", limit: int | None = None, offset: int = 0
    ) -> list[str]:
        """Search group ids by partial name."""

    @abstractmethod
    async def group_exists(self, group_id: Any) -> bool:
        """Check whether a group exists."""

    @abstractmethod
    async def get_group_details(self, group_id: Any) -> Any:
        """Return the group's id and display name, or None if it does not exist."""

    @abstractmethod
    async def users_in_group(
        self,
        group_id: Any,
        search: str = "",
        limit: int | None = None,
        offset: int = 0,
    ) -> list[str]:
        """List user ids in a group."""
