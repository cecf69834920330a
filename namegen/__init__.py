"""Human-readable random names such as ``red-dogs-482931``."""

from namegen.aliases import ALIASES, unalias
from namegen.errors import (
    CategoryNotFound,
    InvalidCategory,
    NameGenError,
    ResourceReadError,
)
from namegen.generator import (
    NameGenerator,
    check_type,
    generate,
    get_name,
    get_names,
)
from namegen.models import GeneratedName, NameRequest
from namegen.wordlists import clear_cache, load_word_list, possible_types

__all__ = [
    "ALIASES",
    "CategoryNotFound",
    "GeneratedName",
    "InvalidCategory",
    "NameGenError",
    "NameGenerator",
    "NameRequest",
    "ResourceReadError",
    "check_type",
    "clear_cache",
    "generate",
    "get_name",
    "get_names",
    "load_word_list",
    "possible_types",
    "unalias",
]
