# -*- coding: utf-8 -*-
"""Location: ./configalchemy/formats/json_format.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

JSON adapter backed by orjson.

Decoding is strict RFC 8259: comments, trailing commas and unquoted keys are
rejected. Encoding pretty-prints with two-space indentation and keeps key
order, so output is stable and diff-friendly.

orjson reads integer literals outside the 64-bit range as floats, which would
change both their value and their kind. Such documents are rejected instead,
matching the encoder, which cannot write those integers either.

Examples:
    >>> adapter = JsonFormat()
    >>> adapter.decode('{"b": 1, "a": [true, null]}')
    {'b': 1, 'a': [True, None]}
    >>> print(adapter.encode({"b": 1, "a": [True, None]}))
    {
      "b": 1,
      "a": [
        true,
        null
      ]
    }
    >>> adapter.decode("[18446744073709551615, -9223372036854775807]")
    [18446744073709551615, -9223372036854775807]
    >>> adapter.decode('{"big": 123456789012345678901234567890}')
    Traceback (most recent call last):
        ...
    ValueError: Integer 12345678901234567890... is outside the 64-bit range
    >>> render_number(2.5), render_number(7), render_number(float("nan"))
    ('2.5', '7', 'null')
"""

# Standard
import re

# Third-Party
import orjson

# First-Party
from configalchemy.formats.base import FormatAdapter
from configalchemy.values import normalize, Value

# Integer range orjson documents for reading and writing
INT_MIN = -(2**63 - 1)
INT_MAX = 2**64 - 1

# Any integer outside the range has at least 19 digits
_LONG_DIGITS = re.compile(r"\d{19,}")
# String literals are matched whole so digits inside them are skipped
_TOKEN = re.compile(r'"(?:[^"\\]|\\.)*"|-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?', re.DOTALL)


def render_number(number: float) -> str:
    """Render a number exactly as the JSON encoder would.

    Integers are rendered with ``str`` so values beyond 64 bits survive.

    Args:
        number: Integer or float.

    Returns:
        str: JSON numeric text (``null`` for NaN and infinities).
    """
    if isinstance(number, int):
        return str(number)
    return orjson.dumps(number).decode("utf-8")


def check_integer_range(text: str) -> None:
    """Reject integer literals that orjson would read as floats.

    Args:
        text: A JSON document orjson has already accepted.

    Raises:
        ValueError: On the first integer literal outside ``INT_MIN``..``INT_MAX``.

    Examples:
        >>> check_integer_range('{"id": "12345678901234567890123", "n": 1.5e300}')
        >>> check_integer_range("[-9223372036854775809]")
        Traceback (most recent call last):
            ...
        ValueError: Integer -9223372036854775809 is outside the 64-bit range
    """
    if not _LONG_DIGITS.search(text):
        return
    for match in _TOKEN.finditer(text):
        token = match.group()
        if token.startswith('"') or any(marker in token for marker in ".eE"):
            continue
        # JSON integers have no leading zeros, so more than 20 digits is out of range
        if len(token.lstrip("-")) > 20 or not INT_MIN <= int(token) <= INT_MAX:
            shown = token if len(token) <= 24 else token[:20] + "..."
            raise ValueError(f"Integer {shown} is outside the 64-bit range")


class JsonFormat(FormatAdapter):
    """Strict JSON."""

    name = "json"
    label = "JSON"

    def decode(self, text: str) -> Value:
        """Parse a JSON document.

        Args:
            text: JSON text.

        Returns:
            Value: Decoded tree.

        Raises:
            ValueError: If an integer literal is outside the 64-bit range.
        """
        native = orjson.loads(text)
        check_integer_range(text)
        return normalize(native)

    def encode(self, value: Value) -> str:
        """Pretty-print a tree as JSON.

        Args:
            value: Tree to render.

        Returns:
            str: JSON text with two-space indentation.
        """
        return orjson.dumps(value, option=orjson.OPT_INDENT_2).decode("utf-8")
