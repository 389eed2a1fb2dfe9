"""
customgroups.backend - Custom Groups Backend

Exposes user-created custom groups to the host group manager.

Custom group ids are the group's uri with GROUP_ID_PREFIX in front of it.
The backend strips the prefix, asks the data-access handler, and reshapes
the rows into the ids and details the host expects. Anything without the
prefix belongs to another backend and is reported as not found without
touching the handler.

Example:
    >>> backend = create_backend(handler)
    >>> await backend.get_user_groups("alice")
    ['customgroup_engineering', 'customgroup_book-club']
    >>> details = await backend.get_group_details("customgroup_engineering")
    >>> details.to_host()
    {'gid': 'customgroup_engineering', 'displayName': 'Engineering'}
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from customgroups.exceptions import InvalidGroupIdError
from customgroups.group_interface import GroupAction, GroupBackend
from customgroups.handler import CustomGroupsHandler, GroupRow
from customgroups.search import Search
from customgroups.settings import CustomGroupsSettings, get_settings

logger = logging.getLogger(__name__)

GROUP_ID_PREFIX = "customgroup_"


# ============================================================================
# Group id helpers
# ============================================================================


def is_custom_group_id(value: Any) -> bool:
    """Return True if value is a string carrying the custom group prefix."""
    return isinstance(value, str) and value.startswith(GROUP_ID_PREFIX)


def format_group_id(uri: str) -> str:
    """Build the host-facing group id for a uri."""
    return GROUP_ID_PREFIX + uri


def uri_from_group_id(group_id: Any) -> str:
    """
    Strip the prefix from a custom group id.

    Raises:
        InvalidGroupIdError: If group_id is not a custom group id
    """
    if not is_custom_group_id(group_id):
        raise InvalidGroupIdError(group_id)
    return group_id[len(GROUP_ID_PREFIX) :]


class GroupDetails(BaseModel):
    """Group id and display name as reported to the host."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    gid: str
    display_name: str | None = Field(default=None, alias="displayName")

    def to_host(self) -> dict[str, Any]:
        """Return the host's {"gid", "displayName"} shape."""
        return self.model_dump(by_alias=True)


# ============================================================================
# Backend
# ============================================================================


class CustomGroupsBackend(GroupBackend):
    """
    Read-only group backend for custom groups.

    Only group details retrieval is supported. Creating, deleting, changing
    membership and counting users go through the custom groups application
    itself, not through the host.
    """

    supported_actions = GroupAction.GROUP_DETAILS

    def __init__(
        self,
        handler: CustomGroupsHandler,
        *,
        max_search_limit: int | None = None,
    ) -> None:
        """
        Initialize the backend.

        Args:
            handler: Data-access handler used for every lookup
            max_search_limit: Optional cap applied to search page sizes
        """
        self._handler = handler
        self._max_search_limit = max_search_limit

    @property
    def handler(self) -> CustomGroupsHandler:
        return self._handler

    async def in_group(self, user_id: str, group_id: Any) -> bool:
        row = await self._find_group(group_id)
        if row is None:
            return False
        return await self._handler.in_group(user_id, row["group_id"])

    async def get_user_groups(self, user_id: str) -> list[str]:
        rows = await self._handler.get_user_memberships(user_id, None)
        return [format_group_id(row["uri"]) for row in rows]

    async def get_groups(
        self, search: str = "", limit: int | None = None, offset: int = 0
    ) -> list[str]:
        rows = await self._handler.search_groups(self._build_search(search, limit, offset))
        return [format_group_id(row["uri"]) for row in rows]

    async def group_exists(self, group_id: Any) -> bool:
        return await self._find_group(group_id) is not None

    async def get_group_details(self, group_id: Any) -> GroupDetails | None:
        """
        Return the group's id and display name.

        The display name is passed through as stored; a row without one
        yields display_name=None.

        Returns:
            GroupDetails, or None if the id is not a custom group or no
            such group exists.
        """
        row = await self._find_group(group_id)
        if row is None:
            return None
        return GroupDetails(
            gid=format_group_id(row["uri"]),
            display_name=row.get("display_name"),
        )

    async def users_in_group(
        self,
        group_id: Any,
        search: str = "",
        limit: int | None = None,
        offset: int = 0,
    ) -> list[str]:
        row = await self._find_group(group_id)
        if row is None:
            return []
        members = await self._handler.get_group_members(
            row["group_id"], self._build_search(search, limit, offset)
        )
        return [member["user_id"] for member in members]

    # ------------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------------

    async def _find_group(self, group_id: Any) -> GroupRow | None:
        """Resolve a host group id to its row, or None when it is not ours or missing."""
        try:
            uri = uri_from_group_id(group_id)
        except InvalidGroupIdError:
            logger.debug("Ignoring non-custom group id", extra={"group_id": repr(group_id)})
            return None

        row = await self._handler.get_group_by("uri", uri)
        if row is None:
            logger.debug(f"Custom group not found: {uri}", extra={"uri": uri})
        return row

    def _build_search(self, pattern: str, limit: int | None, offset: int) -> Search:
        cap = self._max_search_limit
        if cap is not None and (limit is None or limit > cap):
            limit = cap
        return Search(pattern=pattern, limit=limit, offset=offset)


def create_backend(
    handler: CustomGroupsHandler,
    settings: CustomGroupsSettings | None = None,
) -> CustomGroupsBackend:
    """
    Build a backend configured from settings.

    Args:
        handler: Data-access handler for the backend
        settings: Settings to use (defaults to get_settings())

    Returns:
        Configured CustomGroupsBackend
    """
    settings = settings or get_settings()
    settings.apply_log_level()
    return CustomGroupsBackend(handler, max_search_limit=settings.max_search_limit)
