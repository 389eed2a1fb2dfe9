"""
customgroups.exceptions - Custom exceptions for custom group operations

Example:
    >>> from customgroups.exceptions import InvalidGroupIdError
    >>>
    >>> try:
    ...     uri = uri_from_group_id("admin")
    ... except InvalidGroupIdError as e:
    ...     logger.debug(f"Not a custom group: {e}")
"""


class CustomGroupsError(Exception):
    """Base exception for all custom group errors."""


class InvalidGroupIdError(CustomGroupsError, ValueError):
    """
    Raised when a value is not a custom group identifier.

    This can occur when:
    - The value is not a string
    - The string does not start with the custom group prefix
    """

    def __init__(self, group_id: object) -> None:
        super().__init__(f"Not a custom group identifier: {group_id!r}")
        self.group_id = group_id
