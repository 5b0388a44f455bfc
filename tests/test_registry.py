"""Tests for the language table, parsing and formatting."""

import dataclasses

import pytest

from isolanguage import (
    FAMILIES,
    LANGUAGES,
    Language,
    UnrecognizedCode,
    format_language,
    languages,
    parse,
)


def test_table_size():
    assert len(LANGUAGES) == 184


def test_codes_unique():
    assert len({lang.code for lang in LANGUAGES}) == 184


def test_code_shapes():
    for lang in LANGUAGES:
        assert len(lang.code) == 2 and lang.code.isascii() and lang.code.islower()
        assert len(lang.code_t) == 3 and lang.code_t.isascii() and lang.code_t.islower()
        assert len(lang.code_b) == 3 and lang.code_b.isascii() and lang.code_b.islower()
        assert lang.name


def test_families_cover_table_exactly():
    assert len(FAMILIES) == 26
    assert len(set(FAMILIES)) == 26
    assert {lang.family for lang in LANGUAGES} == set(FAMILIES)


class TestAccessors:
    def test_avestan(self):
        lang = parse("ae")
        assert lang.code == "ae"
        assert lang.code_t == "ave"
        assert lang.code_b == "ave"
        assert lang.name == "Avestan"
        assert lang.family == "Indo-European"

    def test_chinese_t_b_differ(self):
        lang = parse("zh")
        assert lang.code_t == "zho"
        assert lang.code_b == "chi"
        assert lang.name == "Chinese"
        assert lang.family == "Sino-Tibetan"

    def test_sango(self):
        lang = parse("sg")
        assert lang.code_t == "sag"
        assert lang.family == "Creole"

    def test_german_and_dutch(self):
        assert (parse("de").code_t, parse("de").code_b) == ("deu", "ger")
        assert (parse("nl").code_t, parse("nl").code_b) == ("nld", "dut")

    def test_family_with_en_dash(self):
        assert parse("sw").family == "Niger–Congo"


class TestParse:
    def test_round_trip_all(self):
        for lang in LANGUAGES:
            assert parse(lang.code) is lang

    def test_classmethod(self):
        assert Language.parse("en") is parse("en")

    @pytest.mark.parametrize("value", ["EN", "en ", " en", "eng", "Zh", "zho", "aE", "sag", "", "xx"])
    def test_rejects(self, value):
        with pytest.raises(UnrecognizedCode) as exc_info:
            parse(value)
        assert exc_info.value.language == value

    def test_error_message(self):
        with pytest.raises(UnrecognizedCode, match="xx is not a valid ISO 639-1 2 letter language code"):
            parse("xx")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse("qq")


class TestFormat:
    def test_format_is_name(self):
        for lang in LANGUAGES:
            assert format_language(lang) == lang.name
            assert str(lang) == lang.name

    def test_examples(self):
        assert str(parse("ae")) == "Avestan"
        assert f"{parse('zh')}" == "Chinese"


class TestIdentity:
    def test_equality_and_hash(self):
        assert parse("en") == parse("en")
        assert parse("en") != parse("fr")
        assert len({parse("en"), parse("en"), parse("fr")}) == 2

    def test_order_follows_table(self):
        assert parse("ab") < parse("aa")
        assert sorted([parse("zu"), parse("aa"), parse("ab")]) == [
            parse("ab"),
            parse("aa"),
            parse("zu"),
        ]
        assert sorted(LANGUAGES, reverse=True)[::-1] == list(languages())

    def test_immutable(self):
        lang = parse("en")
        with pytest.raises(AttributeError):
            lang.name = "Anglais"

    def test_forged_entry_rejected(self):
        with pytest.raises(ValueError, match="does not match table position 40"):
            Language(40, "xx", "xxx", "xxx", "Fake", "Klingonic")

    def test_position_out_of_range(self):
        with pytest.raises(ValueError, match="No language at table position"):
            Language(184, "xx", "xxx", "xxx", "Fake", "Klingonic")

    def test_replace_rejected(self):
        with pytest.raises(ValueError):
            dataclasses.replace(parse("en"), name="Anglais")

    def test_rebuilding_a_real_row_is_equal(self):
        lang = parse("de")
        assert dataclasses.replace(lang) == lang
