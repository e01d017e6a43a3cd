"""Abstract interface for HTTP executors.

This module defines the request/response containers and the abstract base class
that all HTTP executor implementations must follow, enabling pluggable transport
layers.
"""

from abc import ABC, abstractmethod

from mexc_client.types import Json


class HttpRequest:
    """A fully assembled request, ready to be put on the wire.

    The URL already carries its query string. Executors must send ``url`` and
    ``content`` byte-for-byte, since both may be covered by a signature.
    """

    method: str
    url: str
    headers: dict[str, str]
    content: bytes | None

    __slots__ = ("method", "url", "headers", "content")

    def __init__(
        self,
        *,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
    ) -> None:
        """Initialize an HTTP request object.

        Args:
            method: The HTTP method, upper case.
            url: Absolute URL including the encoded query string.
            headers: Headers to send. Defaults to an empty dict if None.
            content: Raw request body, if any.

        """
        self.method = method
        self.url = url
        self.headers = headers if headers is not None else {}
        self.content = content

    def __repr__(self) -> str:
        return f"HttpRequest(method={self.method!r}, url={self.url!r})"


class HttpResponse:
    """Container for HTTP response data.

    Encapsulates the status code, body, and headers from an HTTP response.
    """

    status: int
    body: Json
    headers: dict[str, str] | None

    __slots__ = ("status", "body", "headers")

    def __init__(
        self,
        *,
        status: int,
        body: Json = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize an HTTP response object.

        Args:
            status: The HTTP status code of the response.
            body: The parsed response body, or its raw text if it was not JSON.
            headers: Optional HTTP response headers as key-value pairs.

        """
        self.status = status
        self.body = body
        self.headers = headers


class HttpExecutor(ABC):
    """Abstract base class for HTTP request executors.

    Executors perform exactly one HTTP exchange per call and never retry. They
    hold no per-request state, so one executor may serve many concurrent calls.
    """

    @abstractmethod
    def __init__(self, timeout: float | None = None):
        """Initialize the HTTP executor.

        Args:
            timeout: Transport timeout in seconds, None for the library default.

        """
        ...

    @abstractmethod
    def send_request(self, request: HttpRequest) -> HttpResponse:
        """Send a request and return the completed exchange.

        Args:
            request: The assembled request.

        Returns:
            An HttpResponse for any status code.

        Raises:
            TransportError: If no HTTP exchange completed.

        """
        ...
