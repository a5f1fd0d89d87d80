"""Tests for slug normalization and front-matter value helpers."""

import re
from datetime import date, datetime

import pytest

from pubmeta.utils import slugify, split_list, unquote, value_to_string

SAMPLES = [
    "",
    "Simple Text",
    "Text with Special Characters!@#",
    "Téxt wíth Áccénts",
    "  --leading and trailing--  ",
    "Ünïcödé ÇÅFÉ",
    "日本語のタイトル",
    "Text_with_underscores",
    "2024-01-01 Release Notes v1.2",
    "ß straße",
]


class TestSlugify:
    def test_simple_text(self):
        assert slugify("Simple Text") == "simple-text"

    def test_special_characters(self):
        assert slugify("Text with Special Characters!@#") == "text-with-special-characters"

    def test_accents_split_on_combining_marks(self):
        assert slugify("Téxt wíth Áccénts") == "te-xt-wi-th-a-cce-nts"

    def test_multiple_spaces(self):
        assert slugify("Text    with    multiple    spaces") == "text-with-multiple-spaces"

    def test_underscores(self):
        assert slugify("Text_with_underscores") == "text-with-underscores"

    def test_numbers(self):
        assert slugify("Text with numbers 123") == "text-with-numbers-123"

    def test_empty_string(self):
        assert slugify("") == ""

    def test_only_symbols(self):
        assert slugify("!!! ???") == ""

    def test_quoted_value(self):
        assert slugify('"Hello World"') == "hello-world"

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        assert slugify(slugify(text)) == slugify(text)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_alphabet(self, text):
        slug = slugify(text)
        assert re.fullmatch(r"[a-z0-9-]*", slug)
        assert not slug.startswith("-")
        assert not slug.endswith("-")


class TestValueToString:
    def test_string_is_quoted(self):
        assert value_to_string("Test Description") == '"Test Description"'

    def test_numbers_and_bools(self):
        assert value_to_string(42) == "42"
        assert value_to_string(1.5) == "1.5"
        assert value_to_string(True) == "true"
        assert value_to_string(None) == "null"

    def test_dates(self):
        assert value_to_string(date(2024, 1, 1)) == '"2024-01-01"'
        assert value_to_string(datetime(2024, 1, 1, 15, 40)) == '"2024-01-01 15:40:00"'

    def test_list(self):
        assert value_to_string(["a", 1]) == '["a", 1]'

    def test_unicode_kept(self):
        assert value_to_string("café") == '"café"'


class TestUnquote:
    def test_strips_double_quotes(self):
        assert unquote('"notes"') == "notes"

    def test_plain(self):
        assert unquote("notes") == "notes"


class TestSplitList:
    def test_sequence(self):
        assert split_list(["tag1", "tag2"]) == ["tag1", "tag2"]

    def test_sequence_of_mixed_values(self):
        assert split_list(["python", 2024, True]) == ["python", "2024", "true"]

    def test_comma_separated_string(self):
        assert split_list("tag1, tag2 ,tag3") == ["tag1", "tag2", "tag3"]

    def test_single_string(self):
        assert split_list("solo") == ["solo"]

    @pytest.mark.parametrize("value", [None, 3, {"a": 1}])
    def test_other_types(self, value):
        assert split_list(value) == []
