# -*- coding: utf-8 -*-
"""Location: ./configalchemy/schemas.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

ConfigAlchemy Schema Definitions.
Pydantic models for the conversion request, the success and error response
shapes, and the metadata endpoints.

Examples:
    >>> req = ConvertRequest.model_validate({"from": "json", "to": "yaml", "content": "{}"})
    >>> req.source, req.target
    ('json', 'yaml')
    >>> req.model_dump(by_alias=True)
    {'from': 'json', 'to': 'yaml', 'content': '{}'}
    >>> ErrorResponse(error="bad", code="INVALID_BODY").model_dump(exclude_none=True)
    {'success': False, 'error': 'bad', 'code': 'INVALID_BODY'}
"""

# Standard
from typing import Dict, List, Optional

# Third-Party
from pydantic import BaseModel, ConfigDict, Field


class ConvertRequest(BaseModel):
    """A validated conversion request.

    Attributes:
        source: Format tag of ``content`` (wire name ``from``).
        target: Format tag to produce (wire name ``to``).
        content: Text to convert.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    source: str = Field(..., alias="from", description="Format of the submitted content")
    target: str = Field(..., alias="to", description="Format to convert into")
    content: str = Field(..., description="Text to convert")


class ConversionResult(BaseModel):
    """Outcome of one successful conversion."""

    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    result: str
    input_size: int = Field(..., description="Size of the submitted content in UTF-8 bytes")
    output_size: int = Field(..., description="Size of the result in UTF-8 bytes")


class ConvertResponse(BaseModel):
    """Success body of POST /convert."""

    success: bool = True
    result: str


class ErrorResponse(BaseModel):
    """Error body shared by every endpoint.

    ``format`` is present for parse and stringify failures; ``hint`` only when
    a hint applies.
    """

    success: bool = False
    error: str
    code: str
    format: Optional[str] = None
    hint: Optional[str] = None


class HealthResponse(BaseModel):
    """Body of GET /health."""

    status: str = "healthy"
    version: str


class FormatsResponse(BaseModel):
    """Body of GET /formats."""

    model_config = ConfigDict(populate_by_name=True)

    sources: List[str] = Field(..., alias="from")
    targets: List[str] = Field(..., alias="to")


class VersionResponse(BaseModel):
    """Body of GET /version."""

    app: Dict[str, str]
    platform: Dict[str, str]
    uptime_seconds: int
    limits: Dict[str, int]
