"""Tests for the office name table and its two lookups."""

import pytest

from office_names import (
    OFFICE_NAMES_EN,
    has_english_translation,
    list_offices,
    translate_office_name,
)

UNKNOWN = "غير معروف"


class TestTable:
    def test_has_all_cairo_and_giza_offices(self):
        assert len(OFFICE_NAMES_EN) == 68
        assert OFFICE_NAMES_EN["القاهره الرئيسي"] == "Cairo Main Office"
        assert OFFICE_NAMES_EN["6 اكتوبر"] == "6th of October City"

    def test_keys_trimmed_and_values_present(self):
        for key, value in OFFICE_NAMES_EN.items():
            assert key and key == key.strip()
            assert isinstance(value, str) and value.strip()

    def test_read_only(self):
        with pytest.raises(TypeError):
            OFFICE_NAMES_EN["جديد"] = "New"
        assert "جديد" not in OFFICE_NAMES_EN


class TestHasEnglishTranslation:
    @pytest.mark.parametrize("name", list(OFFICE_NAMES_EN))
    def test_every_known_name(self, name):
        assert has_english_translation(name) is True
        assert has_english_translation(name + " ") is True

    def test_surrounding_whitespace_is_trimmed(self):
        assert has_english_translation("\t الجيزة \n") is True

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_input(self, value):
        assert has_english_translation(value) is False

    @pytest.mark.parametrize("name", [UNKNOWN, "   ", "Giza", "الجيزه"])
    def test_unknown_names(self, name):
        assert has_english_translation(name) is False


class TestTranslateOfficeName:
    def test_known_name(self):
        assert translate_office_name("الجيزة", "en") == "Giza"

    def test_known_name_is_trimmed_before_lookup(self):
        assert translate_office_name("  الجيزة  ", "en") == "Giza"

    def test_unknown_name_returns_original(self):
        assert translate_office_name(UNKNOWN, "en") == UNKNOWN

    def test_unknown_name_keeps_whitespace(self):
        padded = "  " + UNKNOWN + "  "
        assert translate_office_name(padded, "en") == padded
        assert has_english_translation(padded) is False

    @pytest.mark.parametrize("name", ["الجيزة", "  الجيزة  ", UNKNOWN, "anything"])
    def test_arabic_locale_is_passthrough(self, name):
        assert translate_office_name(name, "ar") == name

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_input_returned_as_is(self, value):
        assert translate_office_name(value, "en") is value

    @pytest.mark.parametrize("locale", ["fr", "EN", "", None])
    def test_other_locales_translate(self, locale):
        assert translate_office_name("الهرم", locale) == "Haram"


class TestListOffices:
    def test_english_listing_in_table_order(self):
        rows = list_offices("en")
        assert [r["name"] for r in rows] == list(OFFICE_NAMES_EN)
        assert rows[0] == {"name": "شبرا فرعي", "display_name": "Shubra Branch"}
        assert rows[-1] == {"name": "الفرافرة", "display_name": "El-Farafra"}

    def test_arabic_listing_uses_arabic_names(self):
        for row in list_offices("ar"):
            assert row["display_name"] == row["name"]
