"""ISO 639-1 language codes with their ISO 639-2 T/B codes, names and families."""

from isolanguage.core.registry import (
    LANGUAGES,
    CodeIterator,
    FamilyIterator,
    Language,
    LanguageIterator,
    UnrecognizedCode,
    codes,
    codes_b,
    codes_t,
    families,
    format_language,
    languages,
    parse,
)
from isolanguage.core.table import FAMILIES

__version__ = "0.1.0"

__all__ = [
    "FAMILIES",
    "LANGUAGES",
    "CodeIterator",
    "FamilyIterator",
    "Language",
    "LanguageIterator",
    "UnrecognizedCode",
    "codes",
    "codes_b",
    "codes_t",
    "families",
    "format_language",
    "languages",
    "parse",
]
