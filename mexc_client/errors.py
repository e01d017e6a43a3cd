"""Exceptions raised by the MEXC client.

BaseError
├── TransportError          no HTTP exchange completed; returned as ApiError
│   ├── HttpConnectionError
│   ├── TransportTimeoutError
│   └── SerializationError  request body could not be encoded
└── ValidationError         caller misuse, raised before anything is sent
    └── MissingCredentialsError

A completed exchange is never an exception: error statuses and exchange error
payloads reach the caller as ApiResponse values.
"""


class BaseError(Exception):
    """Root of every exception defined by this library."""


# ============================================================================
# TRANSPORT ERRORS
# ============================================================================


class TransportError(BaseError):
    """The request did not produce an HTTP response.

    Raised by executors for DNS failures, refused or dropped connections, TLS
    failures and timeouts. API clients catch it and hand it back inside an
    ApiError. Nothing is retried.
    """


class HttpConnectionError(TransportError):
    """The connection could not be opened or was lost mid-exchange."""

    def __init__(self, message: str, url: str | None = None):
        self.message = message
        self.url = url
        super().__init__(f"{message} (url: {url})" if url else message)


class TransportTimeoutError(TransportError):
    """Connecting to or reading from the server took too long."""

    def __init__(self, message: str, timeout_seconds: float | None = None):
        self.message = message
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"{message} (timeout: {timeout_seconds}s)" if timeout_seconds else message
        )


class SerializationError(TransportError):
    """A request body or parameter could not be encoded as JSON."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# ============================================================================
# VALIDATION ERRORS
# ============================================================================


class ValidationError(BaseError):
    """The call cannot be turned into a valid request.

    Examples are a missing required endpoint argument, an unsupported HTTP
    method, a body on a signed futures GET or a reserved spot parameter.
    """


class MissingCredentialsError(ValidationError):
    """A signed endpoint was called without an API key or secret key."""

    def __init__(self, credential_type: str = "API key"):
        self.credential_type = credential_type
        super().__init__(f"{credential_type} is not set")
