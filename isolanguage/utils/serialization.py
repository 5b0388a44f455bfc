"""JSON support: a language is written as its two letter code."""

from __future__ import annotations

import json
from typing import Any

from isolanguage.core.registry import Language, parse


def to_json_value(lang: Language) -> str:
    return lang.code


def from_json_value(value: Any) -> Language:
    """Read a language back from its two letter code.

    Raises TypeError for non-string values and UnrecognizedCode for
    unknown codes.
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected a language code string, got {type(value).__name__}")
    return parse(value)


class LanguageJSONEncoder(json.JSONEncoder):
    def default(self, o: Any) -> Any:
        if isinstance(o, Language):
            return to_json_value(o)
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """json.dumps that accepts Language values anywhere in ``obj``."""
    kwargs.setdefault("ensure_ascii", False)
    return json.dumps(obj, cls=LanguageJSONEncoder, **kwargs)
