# -*- coding: utf-8 -*-
"""Location: ./tests/unit/configalchemy/formats/test_registry.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Tests for the format registry.
"""

# Third-Party
import pytest

# First-Party
from configalchemy.formats import FORMATS, FormatAdapter, get_adapter, source_formats, target_formats


def test_registry_order():
    assert list(FORMATS) == ["json", "yaml", "toml", "lua"]


def test_every_adapter_is_named_consistently():
    for name, adapter in FORMATS.items():
        assert isinstance(adapter, FormatAdapter)
        assert adapter.name == name
        assert adapter.label == name.upper()
        assert name in repr(adapter)


def test_sources_exclude_lua():
    assert source_formats() == ["json", "yaml", "toml"]


def test_targets_include_lua():
    assert target_formats() == ["json", "yaml", "toml", "lua"]


def test_unknown_format():
    with pytest.raises(KeyError):
        get_adapter("xml")
