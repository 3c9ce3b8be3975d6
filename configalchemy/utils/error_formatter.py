# -*- coding: utf-8 -*-
"""Location: ./configalchemy/utils/error_formatter.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Centralized error classification for conversions.
This module turns raw parser and serializer exceptions into the stable
``PARSE_<FORMAT>_FAILED`` / ``STRINGIFY_<FORMAT>_FAILED`` taxonomy and
renders every :class:`~configalchemy.exceptions.ConversionError` into the
error response shape.

The ErrorFormatter class handles:
- Wrapping decode failures into ParseError and encode failures into StringifyError
- Picking a one-sentence hint from a per-format substring table
- Rendering errors as response bodies
- Hiding the detail of unclassified internal faults

Hints come from :data:`HINTS`, an ordered ``(substring, hint)`` table per
format, matched case-insensitively against the library's message. The first
match wins and an unmatched message gets no hint at all.

Examples:
    >>> get_hint("json", "Unexpected token } in JSON at position 10")
    'Check for trailing commas or unquoted keys; JSON requires double-quoted keys and strings.'
    >>> get_hint("yaml", "bad indentation of a mapping entry")
    'YAML indentation must use spaces, not tabs; check that nested keys line up.'
    >>> get_hint("toml", "Expected '=' after a key in a key/value pair")
    'Check for missing quotes around string values or a missing "=" between key and value.'
    >>> get_hint("json", "something nobody has seen before")
    ''
"""

# Standard
from typing import Any, Dict, List, Tuple

# First-Party
from configalchemy.exceptions import ConversionError, ParseError, StringifyError
from configalchemy.schemas import ErrorResponse
from configalchemy.services.logging_service import LoggingService

# Initialize logging service first
logging_service = LoggingService()
logger = logging_service.get_logger(__name__)

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"
INTERNAL_ERROR_MESSAGE = "Internal server error"

_TABS_HINT = "YAML indentation must use spaces, not tabs; check that nested keys line up."
_JSON_SYNTAX_HINT = "Check for trailing commas or unquoted keys; JSON requires double-quoted keys and strings."
_JSON_EOF_HINT = "The document ends early; check for a missing closing brace, bracket or quote."
_TOML_NULL_HINT = "TOML has no null value; remove null entries or give them a value before converting."
_DEPTH_HINT = "Flatten the document; structures nested this deeply cannot be converted."
_ALIAS_HINT = "Anchors and aliases (&name / *name) expand to too many values; reduce repeated alias references."

# Caller-facing text for interpreter recursion failures
DEPTH_MESSAGE = "document is nested too deeply"

HINTS: Dict[str, List[Tuple[str, str]]] = {
    "json": [
        ("unexpected token", _JSON_SYNTAX_HINT),
        ("trailing comma", "Remove the trailing comma after the last item of the object or array."),
        ("key must be a string", "Object keys must be wrapped in double quotes."),
        ("unexpected character", _JSON_SYNTAX_HINT),
        ("unexpected end of", _JSON_EOF_HINT),
        ("eof while parsing", _JSON_EOF_HINT),
        ("unexpected content after document", "Only one top-level JSON value is allowed; remove anything after it."),
        ("invalid literal", "Literals must be lowercase true, false or null."),
        ("64-bit", "JSON numbers here are limited to 64-bit integers; store larger values as strings."),
        ("nested too deeply", _DEPTH_HINT),
        ("recursion", _DEPTH_HINT),
    ],
    "yaml": [
        ("bad indentation", _TABS_HINT),
        ("found character '\\t'", _TABS_HINT),
        ("cannot start any token", "A value starts with a reserved character such as '@' or '`'; wrap it in quotes."),
        ("mapping values are not allowed", "A value contains an unquoted ': '; wrap it in quotes or fix the indentation."),
        ("could not find expected ':'", "A key is missing its ':' separator, or a continuation line is not indented."),
        ("expands to more than", _ALIAS_HINT),
        ("found undefined alias", "An alias (*name) refers to an anchor (&name) that is not defined."),
        ("expected a single document", "Only one YAML document per request is supported; remove extra '---' separators."),
        ("found unhashable key", "Mapping keys must be scalars; lists and mappings cannot be used as keys."),
        ("could not determine a constructor", "Custom YAML tags such as !include are not supported."),
        ("found unknown escape character", "Escape backslashes in double-quoted strings, or use single quotes."),
        ("while parsing a flow", "Check that every '[' and '{' has a matching closing bracket."),
        ("nested too deeply", _DEPTH_HINT),
        ("recursion", _DEPTH_HINT),
    ],
    "toml": [
        ("expected", 'Check for missing quotes around string values or a missing "=" between key and value.'),
        ("invalid value", "A value is missing or malformed; strings must be quoted and every key needs a value."),
        ("cannot overwrite a value", "A key or table is defined more than once."),
        ("cannot declare", "A table is declared more than once."),
        ("unclosed", "A string, array or inline table is not closed."),
        ("invalid statement", "Each line must be a key = value pair, a [table] header or an [[array]] header."),
        ("top level", "TOML documents must be a table; wrap the data in an object with named keys."),
        ("no null", _TOML_NULL_HINT),
        ("not toml serializable", _TOML_NULL_HINT),
        ("nested too deeply", _DEPTH_HINT),
        ("recursion", _DEPTH_HINT),
    ],
    "lua": [
        ("nested too deeply", _DEPTH_HINT),
        ("recursion", _DEPTH_HINT),
    ],
}


def get_hint(format_name: str, raw_message: str) -> str:
    """Pick a hint for a raw library error message.

    Args:
        format_name: Format tag the message came from.
        raw_message: The library's error text.

    Returns:
        str: The first matching hint, or an empty string.

    Examples:
        >>> get_hint("yaml", "found character '\\\\t' that cannot start any token")
        'YAML indentation must use spaces, not tabs; check that nested keys line up.'
        >>> get_hint("toml", "Invalid value (at line 1, column 11)")
        'A value is missing or malformed; strings must be quoted and every key needs a value.'
        >>> get_hint("xml", "expected")
        ''
    """
    lowered = raw_message.lower()
    for pattern, hint in HINTS.get(format_name, []):
        if pattern in lowered:
            return hint
    return ""


def describe_exception(exc: BaseException) -> str:
    """Extract the message text of a library exception.

    Recursion failures carry interpreter detail, so they are reported with
    :data:`DEPTH_MESSAGE` instead.

    Args:
        exc: The exception.

    Returns:
        str: ``str(exc)`` stripped, or the exception type name when empty.

    Examples:
        >>> describe_exception(ValueError("  boom \\n"))
        'boom'
        >>> describe_exception(KeyError())
        'KeyError'
        >>> describe_exception(RecursionError("maximum recursion depth exceeded in __instancecheck__"))
        'document is nested too deeply'
    """
    if isinstance(exc, RecursionError):
        return DEPTH_MESSAGE
    text = str(exc).strip()
    return text or type(exc).__name__


class ErrorFormatter:
    """Classify conversion failures and render error bodies.

    Examples:
        >>> formatter = ErrorFormatter()
        >>> isinstance(formatter, ErrorFormatter)
        True
    """

    @staticmethod
    def classify_parse_error(format_name: str, label: str, exc: BaseException) -> ParseError:
        """Wrap a decode failure.

        Args:
            format_name: Source format tag.
            label: Upper-case format label used in the message.
            exc: Exception raised by the decoder.

        Returns:
            ParseError: Error with code, message and hint filled in.

        Examples:
            >>> err = ErrorFormatter.classify_parse_error("json", "JSON", ValueError("unexpected character: line 1 column 2 (char 1)"))
            >>> err.code
            'PARSE_JSON_FAILED'
            >>> err.message
            'Failed to parse JSON: unexpected character: line 1 column 2 (char 1)'
            >>> err.hint != ""
            True
        """
        raw = describe_exception(exc)
        return ParseError(f"Failed to parse {label}: {raw}", format_name=format_name, hint=get_hint(format_name, raw))

    @staticmethod
    def classify_stringify_error(format_name: str, label: str, exc: BaseException) -> StringifyError:
        """Wrap an encode failure.

        Args:
            format_name: Target format tag.
            label: Upper-case format label used in the message.
            exc: Exception raised by the encoder.

        Returns:
            StringifyError: Error with code, message and hint filled in.

        Examples:
            >>> err = ErrorFormatter.classify_stringify_error("toml", "TOML", TypeError("TOML has no null value (found at 'a')"))
            >>> err.code, err.status_code
            ('STRINGIFY_TOML_FAILED', 422)
            >>> err.message
            "Failed to stringify TOML: TOML has no null value (found at 'a')"
        """
        raw = describe_exception(exc)
        return StringifyError(f"Failed to stringify {label}: {raw}", format_name=format_name, hint=get_hint(format_name, raw))

    @staticmethod
    def format_conversion_error(error: ConversionError) -> Dict[str, Any]:
        """Render a conversion error as a response body.

        Args:
            error: The error to render.

        Returns:
            Dict[str, Any]: Body with ``success``, ``error``, ``code`` and,
            when set, ``format`` and ``hint``.

        Examples:
            >>> from configalchemy.exceptions import InvalidRequestError
            >>> ErrorFormatter.format_conversion_error(InvalidRequestError("Missing 'to'", code="INVALID_TO"))
            {'success': False, 'error': "Missing 'to'", 'code': 'INVALID_TO'}
            >>> body = ErrorFormatter.format_conversion_error(ParseError("Failed to parse TOML: x", format_name="toml"))
            >>> body["format"], "hint" in body
            ('toml', False)
        """
        response = ErrorResponse(error=error.message, code=error.code, format=error.format_name, hint=error.hint or None)
        return response.model_dump(exclude_none=True)

    @staticmethod
    def format_internal_error() -> Dict[str, Any]:
        """Render an unclassified fault without leaking any detail.

        Returns:
            Dict[str, Any]: Generic ``INTERNAL_ERROR`` body.

        Examples:
            >>> ErrorFormatter.format_internal_error()
            {'success': False, 'error': 'Internal server error', 'code': 'INTERNAL_ERROR'}
        """
        return ErrorResponse(error=INTERNAL_ERROR_MESSAGE, code=INTERNAL_ERROR_CODE).model_dump(exclude_none=True)
