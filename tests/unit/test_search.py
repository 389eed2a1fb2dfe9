"""
Unit tests for customgroups.search - Search value object.
"""

import pytest
from pydantic import ValidationError

from customgroups.search import Search


class TestSearch:
    def test_defaults(self):
        search = Search()
        assert search.pattern == ""
        assert search.limit is None
        assert search.offset == 0

    def test_structural_equality(self):
        assert Search(pattern="ser", limit=10, offset=5) == Search(
            pattern="ser", limit=10, offset=5
        )
        assert Search(pattern="ser", limit=10, offset=5) != Search(
            pattern="ser", limit=5, offset=10
        )

    def test_hashable(self):
        searches = {Search(pattern="a", limit=1), Search(pattern="a", limit=1)}
        assert len(searches) == 1

    def test_immutable(self):
        search = Search(pattern="ser")
        with pytest.raises(ValidationError):
            search.pattern = "other"

    def test_keyword_only(self):
        with pytest.raises(TypeError):
            Search("ser", 10, 5)

    def test_zero_limit_allowed(self):
        assert Search(limit=0).limit == 0

    @pytest.mark.parametrize("kwargs", [{"limit": -1}, {"offset": -1}])
    def test_rejects_negative_values(self, kwargs):
        with pytest.raises(ValidationError):
            Search(**kwargs)
