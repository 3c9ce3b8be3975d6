# -*- coding: utf-8 -*-
# configalchemy/routers/convert.py
"""Location: ./configalchemy/routers/convert.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Conversion router.

Endpoints:
- POST /convert -> Convert content between json, yaml, toml and lua

The body is read raw rather than through a Pydantic body parameter so that
every malformed request maps to the documented error codes instead of
FastAPI's generic 422.
"""

# Third-Party
from fastapi import APIRouter, Depends, Request, status
from starlette.concurrency import run_in_threadpool

# First-Party
from configalchemy.exceptions import ConversionError
from configalchemy.formats import FORMATS
from configalchemy.schemas import ConvertResponse, ErrorResponse
from configalchemy.services.conversion_service import conversion_service
from configalchemy.services.logging_service import LoggingService
from configalchemy.utils.error_formatter import ErrorFormatter
from configalchemy.utils.orjson_response import ORJSONResponse
from configalchemy.utils.verify_credentials import require_api_key

# Initialize logging
logging_service = LoggingService()
logger = logging_service.get_logger(__name__)

router = APIRouter(tags=["Conversion"])

_REQUEST_SCHEMA = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {
                "schema": {
                    "type": "object",
                    "required": ["from", "to", "content"],
                    "properties": {
                        "from": {"type": "string", "enum": list(FORMATS)},
                        "to": {"type": "string", "enum": list(FORMATS)},
                        "content": {"type": "string", "minLength": 1},
                    },
                },
                "example": {"from": "json", "to": "yaml", "content": '{"name": "test", "version": "1.0.0"}'},
            }
        },
    }
}


@router.post(
    "/convert",
    response_model=ConvertResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed request or unsupported format"},
        401: {"model": ErrorResponse, "description": "Missing or invalid API key"},
        413: {"model": ErrorResponse, "description": "Content too large"},
        422: {"model": ErrorResponse, "description": "Content could not be parsed or stringified"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
    openapi_extra=_REQUEST_SCHEMA,
)
async def convert(request: Request, _caller: None = Depends(require_api_key)) -> ORJSONResponse:
    """
    Convert content from one configuration format to another.

    Args:
        request: The incoming request; its JSON body carries ``from``, ``to`` and ``content``.
        _caller: Result of the API key check (dependency injection).

    Returns:
        ORJSONResponse: ``{"success": true, "result": ...}`` on success, or the
        error shape for internal faults.

    Raises:
        ConversionError: For every caller-actionable failure; rendered by the
            application's exception handler.
    """
    body = await request.body()
    try:
        outcome = await run_in_threadpool(conversion_service.convert_body, body)
    except ConversionError:
        raise
    except Exception:
        logger.exception("Unexpected failure while converting content")
        return ORJSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=ErrorFormatter.format_internal_error())

    return ORJSONResponse(status_code=status.HTTP_200_OK, content=ConvertResponse(result=outcome.result).model_dump())
