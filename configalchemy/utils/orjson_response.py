# -*- coding: utf-8 -*-
"""Location: ./configalchemy/utils/orjson_response.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

JSON response class serialized with orjson.

Examples:
    >>> response = ORJSONResponse({"success": True, "result": "a: 1\\n"})
    >>> response.body
    b'{"success":true,"result":"a: 1\\\\n"}'
    >>> response.media_type
    'application/json'
"""

# Standard
from typing import Any

# Third-Party
import orjson
from starlette.responses import JSONResponse


class ORJSONResponse(JSONResponse):
    """JSONResponse rendered by orjson."""

    media_type = "application/json"

    def render(self, content: Any) -> bytes:
        """Serialize the content.

        Args:
            content: JSON-compatible content.

        Returns:
            bytes: UTF-8 encoded JSON.
        """
        return orjson.dumps(content, option=orjson.OPT_NON_STR_KEYS)
