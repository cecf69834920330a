"""Bundled word lists: enumerate categories and load one list per category.

Word lists ship as package data under ``namegen/data`` as ``<category>.txt``,
one entry per line. ``settings.data_dir`` replaces that directory with a
directory on disk.
"""

from __future__ import annotations

import logging
import threading
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from namegen.config import settings
from namegen.errors import CategoryNotFound, ResourceReadError

logger = logging.getLogger(__name__)

DATA_DIR_NAME = "data"
DATA_FILE_SUFFIX = ".txt"

_cache: dict[tuple[str, str], tuple[str, ...]] = {}
_cache_lock = threading.Lock()


def data_root() -> Traversable:
    """Return the directory holding the word-list files."""
    if settings.data_dir is not None:
        return Path(settings.data_dir)
    return resources.files("namegen") / DATA_DIR_NAME


def possible_types() -> list[str]:
    """List every category that has a word list (ls data/*.txt)."""
    root = data_root()
    try:
        names = [
            entry.name[: -len(DATA_FILE_SUFFIX)]
            for entry in root.iterdir()
            if entry.name.endswith(DATA_FILE_SUFFIX) and entry.is_file()
        ]
    except OSError as e:
        raise ResourceReadError(f"cannot list word lists in {root}: {e}") from e
    return sorted(names)


def split_lines(text: str) -> list[str]:
    """Split file contents into lines, keeping empty lines.

    Only the terminator is removed: ``\\n`` and at most one ``\\r`` before it.
    A final terminator does not start an extra, empty line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _read_word_list(root: Traversable, category: str) -> tuple[str, ...]:
    if "/" in category or "\\" in category:
        raise CategoryNotFound(category)

    resource = root / f"{category}{DATA_FILE_SUFFIX}"
    try:
        exists = resource.is_file()
    except OSError as e:
        # e.g. a name too long for the filesystem
        raise CategoryNotFound(category) from e
    if not exists:
        raise CategoryNotFound(category)

    try:
        with resource.open("r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceReadError(f"cannot read word list `{category}`: {e}") from e

    words = tuple(split_lines(text))
    if not words:
        raise ResourceReadError(f"word list `{category}` is empty")

    logger.debug(f"Loaded {len(words)} words for `{category}` from {root}")
    return words


def load_word_list(category: str) -> tuple[str, ...]:
    """Return the entries of ``<category>.txt`` in file order.

    Raises CategoryNotFound when no file backs the category.
    """
    root = data_root()
    if not settings.cache_word_lists:
        return _read_word_list(root, category)

    key = (str(root), category)
    words = _cache.get(key)
    if words is not None:
        logger.debug(f"Word list cache hit for `{category}`")
        return words

    words = _read_word_list(root, category)
    with _cache_lock:
        return _cache.setdefault(key, words)


def clear_cache() -> None:
    with _cache_lock:
        _cache.clear()
