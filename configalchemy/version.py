# -*- coding: utf-8 -*-
"""Location: ./configalchemy/version.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

version.py - metadata endpoints (JSON)
A FastAPI router exposing:
- GET /health  -> liveness check with the service version
- GET /formats -> formats accepted as conversion source and target
- GET /version -> diagnostics: app, platform, uptime and limits

None of these touch submitted content, and none require the API key.

Examples:
    >>> from configalchemy.version import START_TIME, HOSTNAME
    >>> isinstance(START_TIME, float)
    True
    >>> isinstance(HOSTNAME, str) and len(HOSTNAME) > 0
    True
"""

# Future
from __future__ import annotations

# Standard
import platform
import socket
import time
from typing import Any, Dict

# Third-Party
from fastapi import APIRouter

# First-Party
from configalchemy import __version__
from configalchemy.config import settings
from configalchemy.formats import source_formats, target_formats
from configalchemy.schemas import FormatsResponse, HealthResponse, VersionResponse
from configalchemy.utils.orjson_response import ORJSONResponse

# Globals

START_TIME = time.time()
HOSTNAME = socket.gethostname()
router = APIRouter(tags=["meta"])


def _build_payload() -> Dict[str, Any]:
    """Build the diagnostics payload.

    Returns:
        Dict[str, Any]: Application, platform, uptime and limit details.

    Examples:
        >>> payload = _build_payload()
        >>> payload["app"]["version"] == __version__
        True
        >>> payload["limits"]["max_content_bytes"] > 0
        True
    """
    return {
        "app": {
            "name": settings.app_name,
            "version": __version__,
            "host": HOSTNAME,
        },
        "platform": {
            "python": platform.python_version(),
            "fastapi": __import__("fastapi").__version__,
            "os": f"{platform.system()} {platform.release()} ({platform.machine()})",
        },
        "uptime_seconds": int(time.time() - START_TIME),
        "limits": {
            "max_content_bytes": settings.max_content_bytes,
        },
    }


@router.get("/health", response_model=HealthResponse, summary="Liveness check")
async def health() -> ORJSONResponse:
    """Report that the service is up.

    Returns:
        ORJSONResponse: ``{"status": "healthy", "version": ...}``.
    """
    return ORJSONResponse(HealthResponse(version=__version__).model_dump())


@router.get("/formats", response_model=FormatsResponse, summary="Supported formats")
async def formats() -> ORJSONResponse:
    """List the formats accepted on each side of a conversion.

    Returns:
        ORJSONResponse: ``{"from": [...], "to": [...]}``.
    """
    body = FormatsResponse(sources=source_formats(), targets=target_formats())
    return ORJSONResponse(body.model_dump(by_alias=True))


@router.get("/version", response_model=VersionResponse, summary="Diagnostics")
async def version_endpoint() -> ORJSONResponse:
    """Serve diagnostics as JSON.

    Returns:
        ORJSONResponse: The payload from :func:`_build_payload`.
    """
    return ORJSONResponse(_build_payload())
