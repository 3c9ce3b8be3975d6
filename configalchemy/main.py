# -*- coding: utf-8 -*-
"""Location: ./configalchemy/main.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

ConfigAlchemy - Main FastAPI Application.

This module defines the FastAPI application converting configuration text
between JSON, YAML, TOML and Lua.

Features and Responsibilities:
- Mounts the conversion router (POST /convert) and the metadata router
  (GET /health, /formats, /version).
- Renders every ConversionError in the shared error shape.
- Applies optional CORS middleware.
- Initializes logging on startup and detaches it on shutdown.

The service keeps no state between requests: nothing is cached, persisted or
logged from the submitted content.
"""

# Standard
from contextlib import asynccontextmanager
from typing import AsyncIterator

# Third-Party
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

# First-Party
from configalchemy import __version__
from configalchemy.config import settings
from configalchemy.exceptions import ConversionError
from configalchemy.routers.convert import router as convert_router
from configalchemy.services.logging_service import LoggingService
from configalchemy.utils.error_formatter import ErrorFormatter
from configalchemy.utils.orjson_response import ORJSONResponse
from configalchemy.version import router as version_router

# Initialize logging service first
logging_service = LoggingService()
logger = logging_service.get_logger("configalchemy")


####################
# Startup/Shutdown #
####################
@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """
    Manage the application's startup and shutdown lifecycle.

    Args:
        _app (FastAPI): FastAPI app

    Yields:
        None
    """
    await logging_service.initialize()
    logger.info(f"Starting {settings.app_name} {__version__}")
    settings.log_summary()
    try:
        yield
    finally:
        logger.info(f"Shutting down {settings.app_name}")
        await logging_service.shutdown()


app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description="Stateless conversion of configuration text between JSON, YAML, TOML and Lua",
    root_path=settings.app_root_path,
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
)


# Global exceptions handlers
@app.exception_handler(ConversionError)
async def conversion_exception_handler(_request: Request, exc: ConversionError):
    """Handle conversion errors globally.

    Args:
        _request: The FastAPI request object that triggered the error.
                  (Unused but required by FastAPI's exception handler interface)
        exc: The ConversionError carrying code, status and message.

    Returns:
        ORJSONResponse: The error shape with the error's HTTP status.

    Examples:
        >>> import asyncio
        >>> import orjson
        >>> from configalchemy.exceptions import ContentTooLargeError
        >>> result = asyncio.run(conversion_exception_handler(None, ContentTooLargeError("Content exceeds maximum size of 1MB")))
        >>> result.status_code
        413
        >>> orjson.loads(result.body)["code"]
        'CONTENT_TOO_LARGE'
    """
    return ORJSONResponse(status_code=exc.status_code, content=ErrorFormatter.format_conversion_error(exc))


if settings.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(settings.allowed_origins),
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", settings.api_key_header],
    )

app.include_router(convert_router)
app.include_router(version_router)
