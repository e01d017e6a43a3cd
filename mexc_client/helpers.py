"""Helper utilities for the MEXC client.

This module contains the default endpoints, request serialization, response
deserialization and the response normalizer shared by both API families.
"""

import logging
from decimal import Decimal
from enum import Enum

import orjson

from mexc_client.errors import SerializationError, TransportError, ValidationError
from mexc_client.types import ApiError, ApiResponse, ApiResult, Json

log = logging.getLogger(__name__)


# ============================================================================
# CONSTANTS
# ============================================================================

DEFAULT_SPOT_API_URL: str = "https://api.mexc.com"
DEFAULT_FUTURES_API_URL: str = "https://contract.mexc.com"

CONTENT_TYPE_JSON: str = "application/json"


# ============================================================================
# SERIALIZATION / DESERIALIZATION
# ============================================================================


def json_default(obj: object) -> str | int | float:
    """Serialize values orjson does not know natively.

    Converts Decimal to a positional-notation string to preserve precision and enums to their value.
    """
    if isinstance(obj, Decimal):
        return format(obj, "f")
    if isinstance(obj, Enum):
        return obj.value  # type: ignore[no-any-return]

    raise TypeError


def serialize_request(request: Json | None) -> bytes | None:
    """Serialize a request body to minified JSON bytes.

    Uses orjson, which keeps dict insertion order and emits no whitespace, so
    the returned bytes can be signed and transmitted as-is.

    Args:
        request: Request data to serialize

    Returns:
        JSON bytes or None if request is None

    Raises:
        SerializationError: If serialization fails

    """
    if request is None:
        return None
    try:
        return orjson.dumps(request, default=json_default)
    except Exception as e:
        raise SerializationError(f"Failed to serialize {request=}") from e


def deserialize_response(response_body: bytes, url: str) -> Json:
    """Deserialize a response body, falling back to the raw text.

    A body that is not valid JSON is still a completed exchange, so it is
    returned as decoded text instead of being dropped.

    Args:
        response_body: Response bytes to deserialize
        url: URL that was requested (for log messages)

    Returns:
        Deserialized JSON value, or the body decoded as text

    """
    try:
        return orjson.loads(response_body)  # type: ignore[no-any-return]
    except orjson.JSONDecodeError:
        if response_body:
            log.warning("Response from %s is not valid JSON, returning raw body", url)
        return response_body.decode(errors="replace")


# ============================================================================
# RESPONSE NORMALIZATION
# ============================================================================


def unwrap_response(outcome: object) -> ApiResult:
    """Normalize the outcome of an HTTP exchange.

    Any completed exchange becomes ``ApiResponse(status, result)``, including
    4XX and 5XX statuses. A transport failure becomes ``ApiError(reason)``.

    Args:
        outcome: An executor ``HttpResponse`` or the ``TransportError`` raised
            while trying to obtain one

    Returns:
        ApiResponse or ApiError

    """
    # the executors package imports this module (deserialize_response), so a
    # module-level import would be circular when helpers loads first
    from mexc_client.executors.interface import HttpResponse

    if isinstance(outcome, HttpResponse):
        return ApiResponse(status=outcome.status, result=outcome.body)
    if isinstance(outcome, TransportError):
        return ApiError(reason=outcome)
    return ApiError(reason=TransportError(f"Unknown exchange outcome {outcome!r}"))


# ============================================================================
# VALIDATION
# ============================================================================


def require(name: str, value: object) -> None:
    """Raise ValidationError if a required endpoint parameter is missing.

    Args:
        name: Parameter name used in the error message
        value: Supplied value; None and empty strings/collections are rejected

    Raises:
        ValidationError: If the value is missing or empty

    """
    if value is None or (isinstance(value, (str, list, tuple, dict)) and not value):
        raise ValidationError(f"{name} is required")
