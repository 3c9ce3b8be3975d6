# -*- coding: utf-8 -*-
"""Location: ./configalchemy/services/conversion_service.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Conversion Service Implementation.
Chains the validation gate, the source decoder and the target encoder for
one request, moving through Validated -> Decoded -> Encoded -> Succeeded,
or to a terminal Failed(stage, error) from any of them.

Any exception raised while decoding becomes a ParseError and any exception
raised while encoding becomes a StringifyError. Failures are terminal: there
are no retries and no partial output.

The service holds no per-request state, so the module-level instance is safe
to share between concurrent requests.

Examples:
    >>> service = ConversionService()
    >>> service.convert_payload({"from": "yaml", "to": "lua", "content": "a: [1, 2]"}).result
    'return { ["a"] = { 1, 2 } }'
    >>> try:
    ...     service.convert_payload({"from": "json", "to": "json", "content": "{invalid}"})
    ... except ParseError as e:
    ...     print(e.code, e.status_code)
    PARSE_JSON_FAILED 422
"""

# Standard
import time
from typing import Any, Dict, Optional

# First-Party
from configalchemy.exceptions import FeatureNotAvailableError, ParseError, StringifyError
from configalchemy.formats import get_adapter
from configalchemy.schemas import ConversionResult, ConvertRequest
from configalchemy.services.logging_service import LoggingService
from configalchemy.services.validation_service import parse_request_body, validate_convert_payload
from configalchemy.utils.error_formatter import ErrorFormatter
from configalchemy.values import Value

# Initialize logging service first
logging_service = LoggingService()
logger = logging_service.get_logger(__name__)

__all__ = ["ConversionService", "conversion_service"]


class ConversionService:
    """Run conversions between registered formats."""

    def __init__(self, max_content_bytes: Optional[int] = None) -> None:
        """Create the service.

        Args:
            max_content_bytes: Size ceiling; ``None`` follows ``settings.max_content_bytes``.
        """
        self._max_content_bytes = max_content_bytes

    def convert_body(self, body: bytes) -> ConversionResult:
        """Validate and convert a raw HTTP request body.

        Args:
            body: Raw JSON body of the request.

        Returns:
            ConversionResult: The converted text and sizes.
        """
        return self.convert_payload(parse_request_body(body))

    def convert_payload(self, payload: Dict[str, Any]) -> ConversionResult:
        """Validate and convert an already decoded request body.

        Args:
            payload: Mapping with ``from``, ``to`` and ``content``.

        Returns:
            ConversionResult: The converted text and sizes.
        """
        return self.convert(validate_convert_payload(payload, self._max_content_bytes))

    def convert(self, request: ConvertRequest) -> ConversionResult:
        """Decode ``request.content`` and re-encode it in the target format.

        Args:
            request: A validated request.

        Returns:
            ConversionResult: The converted text and sizes.

        Raises:
            FeatureNotAvailableError: If the source format cannot be decoded.
            ParseError: If the content is not valid in the source format.
            StringifyError: If the decoded value cannot be written in the target format.
        """
        started = time.perf_counter()
        source = get_adapter(request.source)
        target = get_adapter(request.target)
        input_size = len(request.content.encode("utf-8"))

        if not source.can_decode:
            raise FeatureNotAvailableError(f"Converting from {source.label} is not supported yet", code=f"UNSUPPORTED_FROM_{source.label}")

        try:
            value: Value = source.decode(request.content)
        except Exception as exc:
            error = ErrorFormatter.classify_parse_error(source.name, source.label, exc)
            self._log_outcome(request, error.code, started, input_size)
            raise error from exc

        try:
            text = target.encode(value)
        except Exception as exc:
            error = ErrorFormatter.classify_stringify_error(target.name, target.label, exc)
            self._log_outcome(request, error.code, started, input_size)
            raise error from exc

        result = ConversionResult(source=source.name, target=target.name, result=text, input_size=input_size, output_size=len(text.encode("utf-8")))
        self._log_outcome(request, "OK", started, input_size, result.output_size)
        return result

    @staticmethod
    def _log_outcome(request: ConvertRequest, code: str, started: float, input_size: int, output_size: Optional[int] = None) -> None:
        """Log one line per conversion, without the content.

        Args:
            request: The request that ran.
            code: ``OK`` or the error code.
            started: ``perf_counter`` value at the start.
            input_size: Content size in bytes.
            output_size: Result size in bytes, on success.
        """
        duration_ms = round((time.perf_counter() - started) * 1000, 3)
        extra = {"source": request.source, "target": request.target, "code": code, "input_size": input_size, "duration_ms": duration_ms}
        if output_size is not None:
            extra["output_size"] = output_size
        if code == "OK":
            logger.info(f"Converted {request.source} -> {request.target} ({input_size} bytes in {duration_ms} ms)", extra=extra)
        else:
            logger.info(f"Conversion {request.source} -> {request.target} failed with {code}", extra=extra)


conversion_service = ConversionService()
