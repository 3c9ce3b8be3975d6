# -*- coding: utf-8 -*-
"""Location: ./configalchemy/exceptions.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Conversion error hierarchy.

Every failure a caller can trigger is a :class:`ConversionError` carrying a
stable machine-readable ``code``, the HTTP status it maps to, and optionally
the format involved plus a one-sentence hint. The API layer renders these
directly into the error response shape.

Examples:
    >>> err = ParseError("Failed to parse JSON: boom", format_name="json")
    >>> err.code, err.status_code, err.format_name
    ('PARSE_JSON_FAILED', 422, 'json')
    >>> ContentTooLargeError("too big").status_code
    413
    >>> isinstance(StringifyError("x", format_name="toml"), ConversionError)
    True
"""

# Standard
from typing import Optional


class ConversionError(Exception):
    """Base class for all caller-visible conversion failures.

    Attributes:
        code: Stable error code, e.g. ``INVALID_FROM``.
        status_code: HTTP status returned to the caller.
        message: Human readable message.
        format_name: Format tag the failure relates to, if any.
        hint: Optional one-sentence hint; empty when none applies.
    """

    code: str = "CONVERSION_FAILED"
    status_code: int = 400

    def __init__(self, message: str, code: Optional[str] = None, format_name: Optional[str] = None, hint: str = "") -> None:
        """Initialize the error.

        Args:
            message: Human readable message.
            code: Overrides the class-level code when given.
            format_name: Format tag the failure relates to.
            hint: Optional hint text.
        """
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.format_name = format_name
        self.hint = hint


class InvalidRequestError(ConversionError):
    """Raised when the request shape is wrong (400)."""

    code = "INVALID_BODY"


class FeatureNotAvailableError(ConversionError):
    """Raised for conversion paths that are deliberately disabled (400)."""

    code = "UNSUPPORTED_FROM_LUA"


class ContentTooLargeError(ConversionError):
    """Raised when content exceeds the configured size ceiling (413)."""

    code = "CONTENT_TOO_LARGE"
    status_code = 413


class ParseError(ConversionError):
    """Raised when source content cannot be decoded (422)."""

    status_code = 422

    def __init__(self, message: str, format_name: str, hint: str = "") -> None:
        """Initialize with a code derived from the format.

        Args:
            message: Human readable message.
            format_name: Source format tag.
            hint: Optional hint text.
        """
        super().__init__(message, code=f"PARSE_{format_name.upper()}_FAILED", format_name=format_name, hint=hint)


class StringifyError(ConversionError):
    """Raised when a decoded value cannot be encoded in the target format (422)."""

    status_code = 422

    def __init__(self, message: str, format_name: str, hint: str = "") -> None:
        """Initialize with a code derived from the format.

        Args:
            message: Human readable message.
            format_name: Target format tag.
            hint: Optional hint text.
        """
        super().__init__(message, code=f"STRINGIFY_{format_name.upper()}_FAILED", format_name=format_name, hint=hint)


class AuthenticationError(ConversionError):
    """Raised when the caller identity check fails (401)."""

    code = "UNAUTHORIZED"
    status_code = 401
