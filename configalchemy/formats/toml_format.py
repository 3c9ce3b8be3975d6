# -*- coding: utf-8 -*-
"""Location: ./configalchemy/formats/toml_format.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

TOML adapter: ``tomllib`` for reading, ``tomli-w`` for writing.

TOML cannot hold every tree the other formats can. Encoding fails with a
``TypeError`` instead of producing something lossy when:

- the top-level value is not a mapping
- a null appears anywhere (TOML has no null)

Date and time values decode to ISO-8601 strings.

Examples:
    >>> adapter = TomlFormat()
    >>> adapter.decode('[section]\\nkey = "value"')
    {'section': {'key': 'value'}}
    >>> print(adapter.encode({"database": {"host": "localhost", "port": 5432}}), end="")
    [database]
    host = "localhost"
    port = 5432
    >>> adapter.encode([1, 2])
    Traceback (most recent call last):
        ...
    TypeError: TOML documents must be a table at the top level, got sequence
    >>> adapter.encode({"a": {"b": [1, None]}})
    Traceback (most recent call last):
        ...
    TypeError: TOML has no null value (found at 'a.b[1]')
"""

# Standard
import tomllib

# Third-Party
import tomli_w

# First-Party
from configalchemy.formats.base import FormatAdapter
from configalchemy.values import kind_of, normalize, Value, ValueKind


def _reject_nulls(value: Value, path: str = "") -> None:
    """Raise if the tree contains a null anywhere.

    Args:
        value: Subtree to inspect.
        path: Dotted path of ``value`` for the error message.

    Raises:
        TypeError: On the first null found.
    """
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        raise TypeError(f"TOML has no null value (found at '{path or '<root>'}')")
    if kind is ValueKind.MAPPING:
        for key, item in value.items():
            _reject_nulls(item, f"{path}.{key}" if path else key)
    elif kind is ValueKind.SEQUENCE:
        for index, item in enumerate(value):
            _reject_nulls(item, f"{path}[{index}]")


class TomlFormat(FormatAdapter):
    """TOML v1.0."""

    name = "toml"
    label = "TOML"

    def decode(self, text: str) -> Value:
        """Parse a TOML document.

        Args:
            text: TOML text.

        Returns:
            Value: Decoded mapping.
        """
        return normalize(tomllib.loads(text))

    def encode(self, value: Value) -> str:
        """Render a mapping as TOML, nested mappings becoming tables.

        Args:
            value: Tree to render.

        Returns:
            str: TOML text.

        Raises:
            TypeError: If the tree has a shape TOML cannot represent.
        """
        kind = kind_of(value)
        if kind is not ValueKind.MAPPING:
            raise TypeError(f"TOML documents must be a table at the top level, got {kind.value}")
        _reject_nulls(value)
        return tomli_w.dumps(value)
