"""
customgroups.handler - Data-Access Handler Contract

Defines the storage-facing interface the custom groups backend consumes.
Concrete handlers live with the application that owns the storage; tests
use an in-memory substitute.
"""

from abc import ABC, abstractmethod
from typing import NotRequired, TypedDict

from customgroups.search import Search


class GroupRow(TypedDict):
    """A custom group as returned by the handler."""

    group_id: int
    uri: str
    display_name: NotRequired[str]


class MemberRow(TypedDict):
    """A group membership as returned by the handler."""

    user_id: str


class CustomGroupsHandler(ABC):
    """
    Abstract base class for custom group data access.

    Implementations run the actual queries. The backend never mutates the
    rows it receives and does not catch errors raised here.
    """

    @abstractmethod
    async def get_group_by(self, column: str, value: str) -> GroupRow | None:
        """
        Fetch a single group by a unique column.

        Args:
            column: Column name to match (the backend uses "uri")
            value: Value the column must equal

        Returns:
            The matching row, or None if no group matches.
        """

    @abstractmethod
    async def get_user_memberships(
        self, user_id: str, search: Search | None
    ) -> list[GroupRow]:
        """
        List the groups a user belongs to.

        Args:
            user_id: User to look up
            search: Optional filter and pagination, None for all memberships

        Returns:
            Group rows in display order.
        """

    @abstractmethod
    async def in_group(self, user_id: str, group_id: int) -> bool:
        """Check whether a user is a member of the group with the given internal id."""

    @abstractmethod
    async def search_groups(self, search: Search) -> list[GroupRow]:
        """
        Search groups by partial name.

        Args:
            search: Pattern and pagination window

        Returns:
            Matching group rows in display order.
        """

    @abstractmethod
    async def get_group_members(self, group_id: int, search: Search) -> list[MemberRow]:
        """
        List members of a group.

        Args:
            group_id: Internal id of the group
            search: Pattern and pagination window applied to members

        Returns:
            Member rows in display order.
        """
