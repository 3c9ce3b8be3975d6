# -*- coding: utf-8 -*-
"""Location: ./configalchemy/formats/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Format adapter registry.

Examples:
    >>> sorted(FORMATS)
    ['json', 'lua', 'toml', 'yaml']
    >>> get_adapter("yaml").label
    'YAML'
    >>> source_formats()
    ['json', 'yaml', 'toml']
"""

# Standard
from typing import Dict, List

# First-Party
from configalchemy.formats.base import FormatAdapter
from configalchemy.formats.json_format import JsonFormat
from configalchemy.formats.lua_format import LuaFormat
from configalchemy.formats.toml_format import TomlFormat
from configalchemy.formats.yaml_format import YamlFormat

FORMATS: Dict[str, FormatAdapter] = {adapter.name: adapter for adapter in (JsonFormat(), YamlFormat(), TomlFormat(), LuaFormat())}


def get_adapter(name: str) -> FormatAdapter:
    """Look up the adapter for a format tag.

    Args:
        name: Format tag such as ``"json"``.

    Returns:
        FormatAdapter: The registered adapter.

    Raises:
        KeyError: If the format is not registered.
    """
    return FORMATS[name]


def source_formats() -> List[str]:
    """Formats accepted as conversion input.

    Returns:
        List[str]: Tags in registry order.
    """
    return [name for name, adapter in FORMATS.items() if adapter.can_decode]


def target_formats() -> List[str]:
    """Formats accepted as conversion output.

    Returns:
        List[str]: Tags in registry order.
    """
    return list(FORMATS)


__all__ = ["FORMATS", "FormatAdapter", "get_adapter", "source_formats", "target_formats"]
