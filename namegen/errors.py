"""Exceptions raised while resolving categories and loading word lists."""

from __future__ import annotations


class NameGenError(Exception):
    """Base class for every error raised by namegen."""


class InvalidCategory(NameGenError, ValueError):
    """A requested category is not one of the bundled word lists."""

    def __init__(self, category: str, valid_categories: list[str]):
        self.category = category
        self.valid_categories = sorted(valid_categories)
        super().__init__(
            f"type `{category}` is not valid. Possible values are: "
            f"`{'`, `'.join(self.valid_categories)}`"
        )


class CategoryNotFound(NameGenError, LookupError):
    """No word-list resource backs the category."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"no word list found for category `{category}`")


class ResourceReadError(NameGenError, OSError):
    """The bundled word lists could not be listed or read."""
