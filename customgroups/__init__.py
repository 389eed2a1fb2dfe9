"""
customgroups - Custom Groups Backend for the Host Group Manager

Lets users' own named groups show up wherever the host lists groups.

This package provides:
1. A read-only group backend that translates custom group ids to handler lookups
2. The data-access handler contract the backend consumes
3. The host group interface (capability flags and backend base class)

Example:
    >>> from customgroups import GroupAction, create_backend
    >>>
    >>> backend = create_backend(handler)
    >>> backend.implements_actions(GroupAction.GROUP_DETAILS)
    True
    >>> await backend.group_exists("customgroup_engineering")
    True
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from customgroups.backend import (
    GROUP_ID_PREFIX,
    CustomGroupsBackend,
    GroupDetails,
    create_backend,
    format_group_id,
    is_custom_group_id,
    uri_from_group_id,
)
from customgroups.exceptions import CustomGroupsError, InvalidGroupIdError
from customgroups.group_interface import GroupAction, GroupBackend
from customgroups.handler import CustomGroupsHandler, GroupRow, MemberRow
from customgroups.search import Search
from customgroups.settings import CustomGroupsSettings, get_settings

__all__ = [
    "GROUP_ID_PREFIX",
    "CustomGroupsBackend",
    "CustomGroupsError",
    "CustomGroupsHandler",
    "CustomGroupsSettings",
    "GroupAction",
    "GroupBackend",
    "GroupDetails",
    "GroupRow",
    "InvalidGroupIdError",
    "MemberRow",
    "Search",
    "__version__",
    "create_backend",
    "format_group_id",
    "get_settings",
    "is_custom_group_id",
    "uri_from_group_id",
]
