# -*- coding: utf-8 -*-
"""Location: ./configalchemy/formats/lua_format.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Lua table literal encoder.

Renders a value tree as a loadable Lua chunk, ``return <table>``. There is no
general purpose Lua library underneath; the rules are:

1. ``None`` renders as ``nil``, booleans as ``true`` / ``false``
2. Numbers use the same text as the JSON encoder (non-finite floats become ``nil``)
3. Strings are double-quoted; each ``"`` is escaped with a backslash and
   nothing else is escaped
4. Sequences render positionally: ``{ 1, 2, 3 }``
5. Mappings always use bracketed string keys in insertion order:
   ``{ ["key"] = value }``
6. Empty sequences and empty mappings both render as ``{  }``

Lua is accepted only as a target; decoding is not available.

Examples:
    >>> from configalchemy.formats.lua_format import encode
    >>> encode({"database": {"host": "localhost", "port": 5432}})
    'return { ["database"] = { ["host"] = "localhost", ["port"] = 5432 } }'
    >>> encode({"items": [1, 2, 3], "active": True, "value": None})
    'return { ["items"] = { 1, 2, 3 }, ["active"] = true, ["value"] = nil }'
    >>> encode([])
    'return {  }'
"""

# Standard
import math
from typing import List

# First-Party
from configalchemy.formats.base import FormatAdapter
from configalchemy.formats.json_format import render_number
from configalchemy.values import kind_of, Value, ValueKind

# Prefix that turns a table literal into a loadable chunk
_CHUNK_PREFIX = "return "


def encode(value: Value) -> str:
    """Encode a value tree as a Lua chunk.

    Args:
        value: Tree to render.

    Returns:
        str: ``return`` followed by the rendered literal.

    Examples:
        >>> encode("plain")
        'return "plain"'
        >>> encode({})
        'return {  }'
    """
    return _CHUNK_PREFIX + encode_value(value)


def encode_value(value: Value) -> str:
    """Render one node and its children as a Lua expression.

    Args:
        value: Node to render.

    Returns:
        str: Lua literal text.

    Raises:
        TypeError: If a node is outside the value model.

    Examples:
        >>> encode_value(None)
        'nil'
        >>> encode_value(False)
        'false'
        >>> encode_value(3.5)
        '3.5'
        >>> encode_value(float("inf"))
        'nil'
        >>> encode_value(["a", {"k": 1}])
        '{ "a", { ["k"] = 1 } }'
    """
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return "nil"
    if kind is ValueKind.BOOL:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        return _encode_number(value)
    if kind is ValueKind.STRING:
        return quote_string(value)
    if kind is ValueKind.SEQUENCE:
        return _encode_table([encode_value(item) for item in value])
    if kind is ValueKind.MAPPING:
        return _encode_table([f"[{quote_string(key)}] = {encode_value(item)}" for key, item in value.items()])
    raise TypeError(f"Unhandled value kind: {kind}")


def _encode_number(number: float) -> str:
    """Render a number.

    Args:
        number: Integer or float.

    Returns:
        str: Numeric literal, or ``nil`` for NaN and infinities.
    """
    if isinstance(number, float) and not math.isfinite(number):
        return "nil"
    return render_number(number)


def quote_string(text: str) -> str:
    """Double-quote a string, escaping embedded double quotes only.

    Backslashes and control characters pass through unchanged.

    Args:
        text: String to quote.

    Returns:
        str: Quoted literal.

    Examples:
        >>> quote_string('Hello "World"')
        '"Hello \\\\"World\\\\""'
        >>> quote_string("line\\nbreak") == '"line\\nbreak"'
        True
    """
    return '"' + text.replace('"', '\\"') + '"'


def _encode_table(parts: List[str]) -> str:
    """Join rendered entries into a table constructor.

    Args:
        parts: Rendered entries.

    Returns:
        str: ``{ a, b }``; ``{  }`` when there are no entries.
    """
    return "{ " + ", ".join(parts) + " }"


class LuaFormat(FormatAdapter):
    """Lua table literal, encode only."""

    name = "lua"
    label = "LUA"
    can_decode = False

    def decode(self, text: str) -> Value:
        """Lua input is not supported.

        Args:
            text: Ignored.

        Raises:
            NotImplementedError: Always.
        """
        raise NotImplementedError("Lua input is not supported yet")

    def encode(self, value: Value) -> str:
        """Render a tree as a ``return { ... }`` chunk.

        Args:
            value: Tree to render.

        Returns:
            str: Lua source.
        """
        return encode(value)
