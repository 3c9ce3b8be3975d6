# -*- coding: utf-8 -*-
"""Location: ./tests/unit/configalchemy/formats/test_toml_format.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Tests for the TOML adapter.
"""

# Standard
import tomllib

# Third-Party
import pytest

# First-Party
from configalchemy.formats.toml_format import TomlFormat


@pytest.fixture
def adapter():
    return TomlFormat()


class TestTomlDecode:
    def test_tables(self, adapter):
        text = '[database]\nhost = "localhost"\nport = 5432\n'
        assert adapter.decode(text) == {"database": {"host": "localhost", "port": 5432}}

    def test_array_of_tables(self, adapter):
        text = '[[server]]\nname = "a"\n\n[[server]]\nname = "b"\n'
        assert adapter.decode(text) == {"server": [{"name": "a"}, {"name": "b"}]}

    def test_datetimes_become_strings(self, adapter):
        assert adapter.decode("dob = 1979-05-27T07:32:00Z") == {"dob": "1979-05-27T07:32:00+00:00"}
        assert adapter.decode("day = 1979-05-27") == {"day": "1979-05-27"}

    def test_empty_document(self, adapter):
        assert adapter.decode("") == {}

    def test_missing_value_fails(self, adapter):
        with pytest.raises(tomllib.TOMLDecodeError, match="(?i)invalid value"):
            adapter.decode("invalid = ")

    def test_duplicate_keys_rejected(self, adapter):
        with pytest.raises(tomllib.TOMLDecodeError):
            adapter.decode("a = 1\na = 2")


class TestTomlEncode:
    def test_nested_mapping_becomes_table(self, adapter):
        text = adapter.encode({"database": {"host": "localhost", "port": 5432}})
        assert text.startswith("[database]\n")
        assert 'host = "localhost"' in text
        assert "port = 5432" in text

    def test_round_trip(self, adapter):
        value = {"title": "demo", "owner": {"name": "x", "tags": ["a", "b"]}, "ratio": 0.25, "enabled": False}
        assert adapter.decode(adapter.encode(value)) == value

    @pytest.mark.parametrize("value,kind", [([1, 2], "sequence"), ("text", "string"), (3, "number"), (None, "null")])
    def test_top_level_must_be_mapping(self, adapter, value, kind):
        with pytest.raises(TypeError, match=f"got {kind}"):
            adapter.encode(value)

    def test_null_value_rejected_with_path(self, adapter):
        with pytest.raises(TypeError, match=r"found at 'server\.backup'"):
            adapter.encode({"server": {"host": "h", "backup": None}})

    def test_null_inside_array_rejected_with_index(self, adapter):
        with pytest.raises(TypeError, match=r"found at 'ports\[1\]'"):
            adapter.encode({"ports": [80, None]})
