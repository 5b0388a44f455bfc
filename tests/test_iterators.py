"""Tests for the language, code and family cursors."""

import copy
import itertools
from concurrent.futures import ThreadPoolExecutor

from isolanguage import LANGUAGES, codes, codes_b, codes_t, families, languages


def test_languages_order():
    items = list(languages())
    assert len(items) == 184
    assert items[0].code == "ab"
    assert items[1].code == "aa"
    assert items[-1].code == "zu"
    assert items == list(LANGUAGES)


def test_code_sequences_aligned():
    langs = list(languages())
    assert list(codes()) == [lang.code for lang in langs]
    assert list(codes_t()) == [lang.code_t for lang in langs]
    assert list(codes_b()) == [lang.code_b for lang in langs]


def test_code_sequences_lengths():
    assert len(list(codes())) == 184
    assert len(list(codes_t())) == 184
    assert len(list(codes_b())) == 184


def test_code_lookups():
    assert "en" in codes()
    assert "ave" in codes_t()
    assert "chi" in codes_b()
    assert "chi" not in codes_t()


def test_families():
    names = list(families())
    assert len(names) == 26
    assert len(set(names)) == 26
    assert names == sorted(names)
    assert names[:2] == ["Afro-Asiatic", "Algonquian"]
    assert "Algonquian" in families()


def test_factories_are_independent():
    first = languages()
    next(first)
    next(first)
    second = languages()
    assert next(second).code == "ab"
    assert next(first).code == "af"


def test_exhausted_cursor_stays_exhausted():
    it = families()
    assert len(list(it)) == 26
    assert list(it) == []
    assert next(it, None) is None


def test_copy_keeps_position():
    it = languages()
    next(it)
    clone = copy.copy(it)
    assert next(clone).code == "aa"
    assert next(clone).code == "af"
    assert next(it).code == "aa"


def test_copy_code_and_family_cursors():
    it = codes_b()
    list(itertools.islice(it, 4))
    clone = copy.copy(it)
    assert list(clone) == list(it)

    fam = families()
    next(fam)
    assert next(copy.copy(fam)) == "Algonquian"


def test_convert_cursor_mid_way():
    it = languages()
    list(itertools.islice(it, 29))
    assert next(it.codes()) == "zh"
    assert next(it.codes_t()) == "zho"
    assert next(it.codes_b()) == "chi"
    # Converting does not move the original cursor.
    assert next(it).code == "zh"


def test_length_hint():
    it = languages()
    assert it.__length_hint__() == 184
    next(it)
    assert it.__length_hint__() == 183
    assert codes().__length_hint__() == 184
    assert families().__length_hint__() == 26


def test_cursors_per_thread():
    def collect(_):
        return list(codes()), list(families())

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(collect, range(32)))

    expected = (list(codes()), list(families()))
    assert len(expected[0]) == 184
    assert all(result == expected for result in results)
