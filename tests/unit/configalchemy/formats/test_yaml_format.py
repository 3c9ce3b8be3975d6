# -*- coding: utf-8 -*-
"""Location: ./tests/unit/configalchemy/formats/test_yaml_format.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Tests for the YAML adapter.
"""

# Third-Party
import pytest
import yaml

# First-Party
from configalchemy.formats.yaml_format import YamlFormat
from configalchemy.values import ExpansionLimitError


@pytest.fixture
def adapter():
    return YamlFormat()


class TestYamlDecode:
    def test_nested_mapping(self, adapter):
        assert adapter.decode("database:\n  host: localhost\n  port: 5432") == {"database": {"host": "localhost", "port": 5432}}

    def test_key_order_preserved(self, adapter):
        assert list(adapter.decode("b: 1\na: 2\nc: 3")) == ["b", "a", "c"]

    def test_anchors_are_expanded(self, adapter):
        text = "base: &base\n  retries: 3\nservice:\n  <<: *base\n  name: api"
        assert adapter.decode(text)["service"] == {"retries": 3, "name": "api"}

    def test_timestamps_become_strings(self, adapter):
        assert adapter.decode("released: 2024-01-02") == {"released": "2024-01-02"}

    def test_non_string_keys_stringified(self, adapter):
        assert adapter.decode("1: one\ntrue: yes") == {"1": "one", "true": True}

    def test_tab_indentation_fails(self, adapter):
        with pytest.raises(yaml.YAMLError):
            adapter.decode("key1: value\n\t key2: value")

    def test_python_tags_refused(self, adapter):
        with pytest.raises(yaml.YAMLError):
            adapter.decode("!!python/object/apply:os.system ['true']")

    def test_multiple_documents_refused(self, adapter):
        with pytest.raises(yaml.YAMLError):
            adapter.decode("a: 1\n---\nb: 2")


class TestYamlEncode:
    def test_block_style(self, adapter):
        assert adapter.encode({"name": "test", "items": [1, 2]}) == "name: test\nitems:\n- 1\n- 2\n"

    def test_key_order_kept(self, adapter):
        assert adapter.encode({"z": 1, "a": 2}) == "z: 1\na: 2\n"

    def test_null_and_bool(self, adapter):
        assert adapter.encode({"v": None, "on": True}) == "v: null\n'on': true\n"

    def test_unicode_kept(self, adapter):
        assert "café" in adapter.encode({"name": "café"})

    def test_round_trip(self, adapter):
        value = {"service": {"ports": [80, 443], "ratio": 0.5, "tags": {"env": "prod"}}}
        assert adapter.decode(adapter.encode(value)) == value


def _alias_bomb(levels):
    lines = ['l0: &l0 ["x", "x", "x", "x", "x", "x", "x", "x", "x", "x"]']
    for level in range(1, levels):
        refs = ", ".join([f"*l{level - 1}"] * 10)
        lines.append(f"l{level}: &l{level} [{refs}]")
    return "\n".join(lines)


class TestYamlAliasExpansion:
    def test_small_alias_use_is_expanded(self, adapter):
        assert adapter.decode("base: &b [1, 2]\ncopy: *b") == {"base": [1, 2], "copy": [1, 2]}

    def test_expansion_capped_by_content_ceiling(self, adapter, app_settings, monkeypatch):
        monkeypatch.setattr(app_settings, "max_content_bytes", 2048)
        text = _alias_bomb(5)
        assert len(text.encode("utf-8")) < 2048
        with pytest.raises(ExpansionLimitError, match="more than 2048 values"):
            adapter.decode(text)

    def test_default_ceiling_stops_deep_alias_chain(self, adapter):
        # ten levels would expand to ten billion values
        with pytest.raises(ExpansionLimitError):
            adapter.decode(_alias_bomb(10))

    def test_self_referencing_alias(self, adapter):
        with pytest.raises(ExpansionLimitError):
            adapter.decode("a: &a [*a]")
