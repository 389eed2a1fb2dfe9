"""
customgroups.search - Search Parameters

Value object passed to the data-access handler for paginated lookups.

Example:
    >>> from customgroups.search import Search
    >>>
    >>> Search(pattern="eng", limit=10, offset=20)
    Search(pattern='eng', limit=10, offset=20)
    >>> Search(pattern="eng", limit=10, offset=20) == Search(pattern="eng", limit=10, offset=20)
    True
"""

from pydantic import BaseModel, ConfigDict, Field


class Search(BaseModel):
    """
    Search term plus pagination window.

    Instances are immutable and compare by value, so a handler (or a test
    double) can match on an equal instance built elsewhere.
    """

    model_config = ConfigDict(frozen=True)

    pattern: str = Field(default="", description="Partial name to match, empty for all")
    limit: int | None = Field(
        default=None,
        ge=0,
        description="Maximum number of results, None for unbounded",
    )
    offset: int = Field(default=0, ge=0, description="Number of results to skip")
