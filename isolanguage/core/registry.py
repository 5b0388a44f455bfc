"""Language entries, parsing and iteration over the ISO 639-1 table."""

from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Callable

from isolanguage.core.table import FAMILIES, LANGUAGE_TABLE
from isolanguage.utils.logger import get_logger

logger = get_logger(__name__)


class UnrecognizedCode(ValueError):
    """Raised when a string is not an ISO 639-1 two letter code."""

    def __init__(self, language: str):
        super().__init__(f"{language} is not a valid ISO 639-1 2 letter language code")
        self.language = language


@dataclass(frozen=True, order=True)
class Language:
    """One ISO 639-1 language.

    Equality, hashing and ordering use the position in the table, so entries
    sort in the standard's listing order.
    """

    position: int = field(repr=False)
    code: str = field(compare=False)
    code_t: str = field(compare=False)  # ISO 639-2/T, preferred
    code_b: str = field(compare=False)  # ISO 639-2/B
    name: str = field(compare=False)
    family: str = field(compare=False)

    def __post_init__(self) -> None:
        # Only the rows of the table are valid languages.
        if not isinstance(self.position, int) or not 0 <= self.position < len(LANGUAGE_TABLE):
            raise ValueError(f"No language at table position {self.position!r}")
        row = (self.code, self.code_t, self.code_b, self.name, self.family)
        if row != LANGUAGE_TABLE[self.position]:
            raise ValueError(f"{row} does not match table position {self.position}")

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, value: str) -> Language:
        return parse(value)


LANGUAGES: tuple[Language, ...] = tuple(
    Language(i, code, code_t, code_b, name, family)
    for i, (code, code_t, code_b, name, family) in enumerate(LANGUAGE_TABLE)
)

_BY_CODE: dict[str, Language] = {lang.code: lang for lang in LANGUAGES}

logger.debug("Loaded %d languages in %d families", len(LANGUAGES), len(FAMILIES))


def parse(value: str) -> Language:
    """Return the language whose two letter code is exactly ``value``.

    Matching is case-sensitive with no trimming, so "EN", "en " and "eng"
    are all rejected.
    """
    try:
        return _BY_CODE[value]
    except (KeyError, TypeError):
        raise UnrecognizedCode(value) from None


def format_language(lang: Language) -> str:
    return str(lang)


class LanguageIterator:
    """Cursor over the language table.

    Holds only a position, so copies advance independently.
    """

    __slots__ = ("_position",)

    def __init__(self, position: int = 0):
        self._position = position

    def __iter__(self) -> LanguageIterator:
        return self

    def __next__(self) -> Language:
        if self._position >= len(LANGUAGES):
            raise StopIteration
        lang = LANGUAGES[self._position]
        self._position += 1
        return lang

    def __length_hint__(self) -> int:
        return len(LANGUAGES) - self._position

    def __copy__(self) -> LanguageIterator:
        return LanguageIterator(self._position)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self._position})"

    def codes(self) -> CodeIterator:
        """Continue from the current position, yielding two letter codes."""
        return CodeIterator(self.__copy__(), attrgetter("code"))

    def codes_t(self) -> CodeIterator:
        """Continue from the current position, yielding ISO 639-2/T codes."""
        return CodeIterator(self.__copy__(), attrgetter("code_t"))

    def codes_b(self) -> CodeIterator:
        """Continue from the current position, yielding ISO 639-2/B codes."""
        return CodeIterator(self.__copy__(), attrgetter("code_b"))


class CodeIterator:
    """Projects a LanguageIterator through one of the code fields."""

    __slots__ = ("_inner", "_getter")

    def __init__(self, inner: LanguageIterator, getter: Callable[[Language], str]):
        self._inner = inner
        self._getter = getter

    def __iter__(self) -> CodeIterator:
        return self

    def __next__(self) -> str:
        return self._getter(next(self._inner))

    def __length_hint__(self) -> int:
        return self._inner.__length_hint__()

    def __copy__(self) -> CodeIterator:
        return CodeIterator(self._inner.__copy__(), self._getter)


class FamilyIterator:
    """Cursor over the alphabetical family names."""

    __slots__ = ("_position",)

    def __init__(self, position: int = 0):
        self._position = position

    def __iter__(self) -> FamilyIterator:
        return self

    def __next__(self) -> str:
        if self._position >= len(FAMILIES):
            raise StopIteration
        family = FAMILIES[self._position]
        self._position += 1
        return family

    def __length_hint__(self) -> int:
        return len(FAMILIES) - self._position

    def __copy__(self) -> FamilyIterator:
        return FamilyIterator(self._position)


def languages() -> LanguageIterator:
    """Iterate over every language in table order."""
    return LanguageIterator()


def codes() -> CodeIterator:
    return languages().codes()


def codes_t() -> CodeIterator:
    return languages().codes_t()


def codes_b() -> CodeIterator:
    return languages().codes_b()


def families() -> FamilyIterator:
    """Iterate over the distinct families, alphabetically."""
    return FamilyIterator()

