# -*- coding: utf-8 -*-
"""Location: ./tests/unit/configalchemy/formats/test_json_format.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Tests for the JSON adapter.
"""

# Third-Party
import orjson
import pytest

# First-Party
from configalchemy.formats.json_format import JsonFormat, render_number


@pytest.fixture
def adapter():
    return JsonFormat()


class TestJsonDecode:
    def test_object(self, adapter):
        assert adapter.decode('{"name": "test", "version": "1.0.0"}') == {"name": "test", "version": "1.0.0"}

    def test_scalar_top_level(self, adapter):
        assert adapter.decode("42") == 42
        assert adapter.decode('"text"') == "text"
        assert adapter.decode("null") is None

    def test_key_order_preserved(self, adapter):
        assert list(adapter.decode('{"b": 1, "a": 2, "c": 3}')) == ["b", "a", "c"]

    def test_duplicate_keys_last_wins(self, adapter):
        assert adapter.decode('{"a": 1, "a": 2}') == {"a": 2}

    @pytest.mark.parametrize("text", ["{invalid}", '{"a": 1,}', "", "[1, 2", "{'a': 1}", "True"])
    def test_invalid_documents_raise(self, adapter, text):
        with pytest.raises(orjson.JSONDecodeError):
            adapter.decode(text)

    def test_unicode(self, adapter):
        assert adapter.decode('{"greeting": "こんにちは"}') == {"greeting": "こんにちは"}


class TestJsonEncode:
    def test_two_space_indent(self, adapter):
        assert adapter.encode({"a": {"b": 1}}) == '{\n  "a": {\n    "b": 1\n  }\n}'

    def test_key_order_kept(self, adapter):
        text = adapter.encode({"z": 1, "a": 2})
        assert text.index('"z"') < text.index('"a"')

    def test_scalars(self, adapter):
        assert adapter.encode(None) == "null"
        assert adapter.encode(True) == "true"
        assert adapter.encode("x") == '"x"'

    def test_unicode_not_escaped(self, adapter):
        assert "é" in adapter.encode({"name": "café"})

    def test_integer_beyond_64_bits_fails(self, adapter):
        with pytest.raises(orjson.JSONEncodeError):
            adapter.encode({"big": 2**70})

    def test_deterministic(self, adapter):
        value = {"list": [1, 2.5, None], "nested": {"k": "v"}}
        assert adapter.encode(value) == adapter.encode(value)


class TestRenderNumber:
    def test_integers(self):
        assert render_number(0) == "0"
        assert render_number(-17) == "-17"
        assert render_number(2**70) == str(2**70)

    def test_floats(self):
        assert render_number(3.14) == "3.14"
        assert render_number(1.0) == "1.0"

    def test_non_finite(self):
        assert render_number(float("inf")) == "null"


class TestJsonIntegerRange:
    """Integers keep their kind or the document is refused."""

    @pytest.mark.parametrize("literal", ["9223372036854775807", "18446744073709551615", "-9223372036854775807", "9007199254740993"])
    def test_in_range_integers_stay_integers(self, adapter, literal):
        value = adapter.decode(f'{{"n": {literal}}}')["n"]
        assert isinstance(value, int)
        assert value == int(literal)

    @pytest.mark.parametrize("literal", ["123456789012345678901234567890", "-9223372036854775809", "18446744073709551616"])
    def test_out_of_range_integers_rejected(self, adapter, literal):
        with pytest.raises(ValueError, match="outside the 64-bit range"):
            adapter.decode(f'{{"a": [1, {literal}]}}')

    def test_long_digit_strings_are_not_numbers(self, adapter):
        text = '{"id": "123456789012345678901234567890", "escaped": "\\" 99999999999999999999999"}'
        assert adapter.decode(text)["id"] == "123456789012345678901234567890"

    def test_large_float_literals_allowed(self, adapter):
        assert adapter.decode("[1.5e300, 12345678901234567890123.0]") == [1.5e300, 12345678901234567890123.0]

    def test_precision_of_53_bit_integers(self, adapter):
        assert adapter.encode(adapter.decode("9007199254740993")) == "9007199254740993"

    def test_float_keeps_fraction(self, adapter):
        assert adapter.decode("1.0") == 1.0
        assert isinstance(adapter.decode("1.0"), float)
        assert adapter.encode(adapter.decode("0.1")) == "0.1"
