"""Alias table mapping user-facing category names to word-list names."""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

ALIASES = MappingProxyType(
    {
        "tree": "trees",
        "dog": "dogs",
    }
)


def unalias(categories: Iterable[str]) -> list[str]:
    """Replace any aliases with their canonical names, e.g. [tree] -> [trees]."""
    return [ALIASES.get(c, c) for c in categories]
