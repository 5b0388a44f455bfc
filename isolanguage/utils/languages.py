"""Lenient language lookups layered over the strict parser."""

from __future__ import annotations

from isolanguage.core.registry import LANGUAGES, Language, UnrecognizedCode, parse
from isolanguage.core.table import FAMILIES

_FOLDED: dict[str, Language] = {}
# Later keys never override earlier ones: two letter codes win over
# 639-2 codes, which win over names.
for _attr in ("code", "code_t", "code_b", "name"):
    for _lang in LANGUAGES:
        _FOLDED.setdefault(getattr(_lang, _attr).casefold(), _lang)
del _attr, _lang


def resolve_language(value: str) -> Language | None:
    """Resolve a code or English name to a language.

    Tries the exact two letter code first, then a case-insensitive match on
    the two letter code, the 639-2 T and B codes and the English name.
    Returns None when nothing matches.
    """
    try:
        return parse(value)
    except UnrecognizedCode:
        pass
    return _FOLDED.get(value.strip().casefold())


def list_languages() -> dict[str, str]:
    """Return all language codes and English names, in table order."""
    return {lang.code: lang.name for lang in LANGUAGES}


def languages_in_family(family: str) -> list[Language]:
    if family not in FAMILIES:
        raise ValueError(f"Unknown language family: {family}")
    return [lang for lang in LANGUAGES if lang.family == family]
