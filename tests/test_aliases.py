"""Tests for alias resolution."""

import pytest

from namegen.aliases import ALIASES, unalias


class TestUnalias:
    def test_alias_is_replaced(self):
        assert unalias(["tree"]) == ["trees"]
        assert unalias(["dog"]) == ["dogs"]

    def test_unmapped_passes_through(self):
        assert unalias(["cat"]) == ["cat"]

    def test_order_and_length_preserved(self):
        assert unalias(["colour", "dog", "tree", "dog"]) == [
            "colour",
            "dogs",
            "trees",
            "dogs",
        ]

    def test_empty(self):
        assert unalias([]) == []

    @pytest.mark.parametrize(
        "categories",
        [["tree"], ["dogs"], ["cat", "dog"], ["tree", "trees", "x"], []],
    )
    def test_idempotent(self, categories):
        once = unalias(categories)
        assert unalias(once) == once

    def test_canonical_names_are_not_aliases(self):
        for canonical in ALIASES.values():
            assert canonical not in ALIASES

    def test_alias_table_is_read_only(self):
        with pytest.raises(TypeError):
            ALIASES["cat"] = "cats"  # type: ignore[index]
