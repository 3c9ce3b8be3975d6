# -*- coding: utf-8 -*-
"""Location: ./configalchemy/utils/verify_credentials.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Optional caller identity check.

Caller authentication normally lives in the API gateway in front of the
service. For deployments without one, setting ``API_KEY`` makes
``POST /convert`` require that value in the ``API_KEY_HEADER`` header.

Examples:
    >>> keys_match("secret", "secret")
    True
    >>> keys_match("secret", "Secret")
    False
    >>> keys_match(None, "secret")
    False
"""

# Standard
import secrets
from typing import Optional

# Third-Party
from fastapi import Request

# First-Party
from configalchemy.config import settings
from configalchemy.exceptions import AuthenticationError
from configalchemy.services.logging_service import LoggingService

# Initialize logging service first
logging_service = LoggingService()
logger = logging_service.get_logger(__name__)


def keys_match(provided: Optional[str], expected: str) -> bool:
    """Compare an API key in constant time.

    Args:
        provided: Value sent by the caller, if any.
        expected: Configured key.

    Returns:
        bool: True when both are equal.
    """
    if not provided:
        return False
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


async def require_api_key(request: Request) -> None:
    """FastAPI dependency enforcing the API key when one is configured.

    Args:
        request: Incoming request.

    Raises:
        AuthenticationError: If a key is configured and the header is missing or wrong.
    """
    if not settings.auth_enabled:
        return
    provided = request.headers.get(settings.api_key_header)
    if not keys_match(provided, settings.api_key.get_secret_value()):
        client = request.client.host if request.client else "unknown"
        logger.warning(f"Rejected request from {client}: missing or invalid API key")
        raise AuthenticationError("Missing or invalid API key")
