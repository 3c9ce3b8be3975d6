# -*- coding: utf-8 -*-
"""Location: ./configalchemy/services/validation_service.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Request validation gate.

Runs before any content is parsed. Checks happen in a fixed order and the
first failure wins:

1. the body is a JSON object                      -> INVALID_BODY
2. ``from`` is a string naming a known format     -> INVALID_FROM / UNSUPPORTED_FROM
3. ``to`` is a string naming a known format       -> INVALID_TO / UNSUPPORTED_TO
4. ``content`` is a non-empty string              -> INVALID_CONTENT
5. ``content`` fits the size ceiling              -> CONTENT_TOO_LARGE
6. the source format can be decoded               -> UNSUPPORTED_FROM_LUA

Examples:
    >>> req = validate_convert_payload({"from": "json", "to": "lua", "content": "[1]"})
    >>> req.source, req.target
    ('json', 'lua')
    >>> try:
    ...     validate_convert_payload({"from": "json", "content": "{}"})
    ... except InvalidRequestError as e:
    ...     print(e.code)
    INVALID_TO
    >>> try:
    ...     validate_convert_payload({"from": "lua", "to": "json", "content": "{name='x'}"})
    ... except FeatureNotAvailableError as e:
    ...     print(e.code, e.status_code)
    UNSUPPORTED_FROM_LUA 400
"""

# Standard
from typing import Any, Dict, Optional

# Third-Party
import orjson

# First-Party
from configalchemy.config import settings
from configalchemy.exceptions import ContentTooLargeError, FeatureNotAvailableError, InvalidRequestError
from configalchemy.formats import FORMATS, get_adapter
from configalchemy.schemas import ConvertRequest

_SUPPORTED_LIST = ", ".join(FORMATS)


def parse_request_body(body: bytes) -> Dict[str, Any]:
    """Parse the raw request body.

    Args:
        body: Raw bytes of the HTTP body.

    Returns:
        Dict[str, Any]: The decoded JSON object.

    Raises:
        InvalidRequestError: If the body is empty, not JSON, or not a JSON object.

    Examples:
        >>> parse_request_body(b'{"from": "json"}')
        {'from': 'json'}
        >>> try:
        ...     parse_request_body(b"not valid json")
        ... except InvalidRequestError as e:
        ...     print(e.code)
        INVALID_BODY
        >>> try:
        ...     parse_request_body(b"[1, 2]")
        ... except InvalidRequestError as e:
        ...     print(e.message)
        Request body must be a JSON object
    """
    try:
        payload = orjson.loads(body)
    except orjson.JSONDecodeError as exc:
        raise InvalidRequestError("Invalid JSON in request body", code="INVALID_BODY") from exc
    if not isinstance(payload, dict):
        raise InvalidRequestError("Request body must be a JSON object", code="INVALID_BODY")
    return payload


def _validate_format_field(payload: Dict[str, Any], field: str) -> str:
    """Check one of the ``from`` / ``to`` fields.

    Args:
        payload: Decoded request body.
        field: ``"from"`` or ``"to"``.

    Returns:
        str: The format tag.

    Raises:
        InvalidRequestError: If the field is missing, not a string, or not a known format.
    """
    suffix = field.upper()
    value = payload.get(field)
    if not isinstance(value, str):
        raise InvalidRequestError(f"Missing or invalid '{field}' field; expected one of: {_SUPPORTED_LIST}", code=f"INVALID_{suffix}")
    if value not in FORMATS:
        raise InvalidRequestError(f"Unsupported '{field}' format '{value}'; expected one of: {_SUPPORTED_LIST}", code=f"UNSUPPORTED_{suffix}")
    return value


def describe_size(limit: int) -> str:
    """Render a byte count for error messages.

    Args:
        limit: Size in bytes.

    Returns:
        str: ``"<n>MB"`` for whole mebibytes, otherwise ``"<n> bytes"``.

    Examples:
        >>> describe_size(1048576)
        '1MB'
        >>> describe_size(1000)
        '1000 bytes'
    """
    mebibyte = 1024 * 1024
    if limit % mebibyte == 0:
        return f"{limit // mebibyte}MB"
    return f"{limit} bytes"


def validate_convert_payload(payload: Dict[str, Any], max_content_bytes: Optional[int] = None) -> ConvertRequest:
    """Validate a decoded request body.

    Args:
        payload: Decoded request body.
        max_content_bytes: Size ceiling; defaults to ``settings.max_content_bytes``.

    Returns:
        ConvertRequest: The validated request.

    Raises:
        InvalidRequestError: On a request-shape failure.
        ContentTooLargeError: If content exceeds the ceiling.
        FeatureNotAvailableError: If the source format cannot be decoded.

    Examples:
        >>> try:
        ...     validate_convert_payload({"from": "json", "to": "yaml", "content": "{}"}, max_content_bytes=1)
        ... except ContentTooLargeError as e:
        ...     print(e.status_code, e.message)
        413 Content exceeds maximum size of 1 bytes
    """
    source = _validate_format_field(payload, "from")
    target = _validate_format_field(payload, "to")

    content = payload.get("content")
    if not isinstance(content, str) or not content:
        raise InvalidRequestError("Missing or empty 'content' field; expected a non-empty string", code="INVALID_CONTENT")

    limit = max_content_bytes or settings.max_content_bytes
    if len(content.encode("utf-8")) > limit:
        raise ContentTooLargeError(f"Content exceeds maximum size of {describe_size(limit)}")

    if not get_adapter(source).can_decode:
        raise FeatureNotAvailableError(
            f"Converting from {get_adapter(source).label} is not supported yet; convert from one of the other formats instead",
            code=f"UNSUPPORTED_FROM_{get_adapter(source).label}",
        )

    return ConvertRequest(source=source, target=target, content=content)
