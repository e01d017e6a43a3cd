"""Python client for the MEXC spot and futures REST APIs."""

from importlib.metadata import PackageNotFoundError, version

from mexc_client.api_futures import MexcFuturesClient
from mexc_client.api_spot import MexcSpotClient
from mexc_client.env_setup import load_config_file, setup_environment
from mexc_client.errors import (
    BaseError,
    HttpConnectionError,
    MissingCredentialsError,
    SerializationError,
    TransportError,
    TransportTimeoutError,
    ValidationError,
)
from mexc_client.signing import encode_query, sign_query, sign_sha256, timestamp
from mexc_client.types import (
    ApiError,
    ApiResponse,
    ApiResult,
    ClientConfig,
    Credentials,
)


def get_version() -> str:
    """Return the installed package version, or "unknown" outside an install."""
    try:
        return version("mexc-client")
    except PackageNotFoundError:
        return "unknown"


__version__ = get_version()

__all__ = [
    "ApiError",
    "ApiResponse",
    "ApiResult",
    "BaseError",
    "ClientConfig",
    "Credentials",
    "HttpConnectionError",
    "MexcFuturesClient",
    "MexcSpotClient",
    "MissingCredentialsError",
    "SerializationError",
    "TransportError",
    "TransportTimeoutError",
    "ValidationError",
    "encode_query",
    "get_version",
    "load_config_file",
    "setup_environment",
    "sign_query",
    "sign_sha256",
    "timestamp",
]
