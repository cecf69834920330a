"""Shared test fixtures — settings reset, temporary word lists."""

from __future__ import annotations

from pathlib import Path

import pytest

from namegen.config import settings
from namegen.wordlists import clear_cache


@pytest.fixture(autouse=True)
def _test_settings():
    """Restore settings and drop cached word lists around every test."""
    original = settings.model_dump()
    clear_cache()
    yield
    for field, value in original.items():
        setattr(settings, field, value)
    clear_cache()


@pytest.fixture
def word_lists(tmp_path):
    """Write word lists into a temp dir and point settings.data_dir at it.

    Usage: word_lists(colour=["red", "blue"], dogs="raw\\nfile\\ntext\\n")
    A list is written one entry per line; a str is written verbatim.
    """

    def _write(**lists: list[str] | str) -> Path:
        for category, content in lists.items():
            if not isinstance(content, str):
                content = "".join(f"{word}\n" for word in content)
            (tmp_path / f"{category}.txt").write_text(
                content, encoding="utf-8", newline=""
            )
        settings.data_dir = tmp_path
        return tmp_path

    return _write
