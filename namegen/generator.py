"""Compose names from one random word per category plus an optional number."""

from __future__ import annotations

import random
import threading
from collections.abc import Sequence

from namegen.aliases import unalias
from namegen.config import settings
from namegen.errors import InvalidCategory
from namegen.models import GeneratedName, NameRequest
from namegen.wordlists import load_word_list, possible_types


def check_type(categories: Sequence[str]) -> None:
    """Raise InvalidCategory if any requested category has no word list.

    Aliases are resolved first, so ``tree`` is valid when ``trees`` exists.
    """
    all_types = possible_types()
    known = set(all_types)
    for category in unalias(categories):
        if category not in known:
            raise InvalidCategory(category, all_types)


class NameGenerator:
    """Draws words and numbers from a single, once-seeded random source.

    Pass ``rng`` for reproducible output. The generator is shared between
    threads, so every draw holds ``_lock``.
    """

    def __init__(self, rng: random.Random | None = None):
        if rng is None:
            rng = random.Random(random.SystemRandom().getrandbits(128))
        self._rng = rng
        self._lock = threading.Lock()

    def choose(self, words: Sequence[str]) -> str:
        with self._lock:
            return self._rng.choice(words)

    def random_number(self) -> int:
        with self._lock:
            return self._rng.randint(
                settings.random_number_min, settings.random_number_max
            )

    def generate(self, request: NameRequest) -> GeneratedName:
        """Build a name for ``request`` without validating its categories.

        An unknown category surfaces as CategoryNotFound from the loader;
        call check_type first for an error listing the valid categories.
        """
        categories = unalias(request.categories)

        word_lists = {c: load_word_list(c) for c in categories}

        words = [
            self.choose(word_lists[c]).replace(" ", request.separator)
            for c in categories
        ]
        number = self.random_number() if request.include_random_number else None

        return GeneratedName(
            words=words, number=number, separator=request.separator
        )

    def get_name(
        self,
        categories: Sequence[str],
        separator: str | None = None,
        include_random_number: bool = False,
    ) -> str:
        request = NameRequest(
            categories=list(categories),
            separator=settings.separator if separator is None else separator,
            include_random_number=include_random_number,
        )
        return self.generate(request).text

    def get_names(
        self,
        categories: Sequence[str],
        separator: str | None = None,
        include_random_number: bool = False,
        count: int = 1,
    ) -> list[str]:
        """Generate ``count`` independent names. Duplicates are possible."""
        return [
            self.get_name(categories, separator, include_random_number)
            for _ in range(count)
        ]


default_generator = NameGenerator()


def generate(request: NameRequest) -> GeneratedName:
    return default_generator.generate(request)


def get_name(
    categories: Sequence[str],
    separator: str | None = None,
    include_random_number: bool = False,
) -> str:
    """Return e.g. ``red-dogs-482931`` for ``(["colour", "dog"], "-", True)``."""
    return default_generator.get_name(categories, separator, include_random_number)


def get_names(
    categories: Sequence[str],
    separator: str | None = None,
    include_random_number: bool = False,
    count: int = 1,
) -> list[str]:
    return default_generator.get_names(
        categories, separator, include_random_number, count
    )
