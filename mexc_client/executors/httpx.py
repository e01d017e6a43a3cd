"""HTTP executor implementation using httpx.

This module provides HTTP request handling using the httpx library, the
default transport of the MEXC client.
"""

import logging
from typing import override

import httpx

from mexc_client.errors import (
    BaseError,
    HttpConnectionError,
    TransportError,
    TransportTimeoutError,
)
from mexc_client.executors.interface import HttpExecutor, HttpRequest, HttpResponse
from mexc_client.helpers import deserialize_response

log = logging.getLogger(__name__)


class HttpxHttpExecutor(HttpExecutor):
    """HTTP executor implementation using httpx.

    Provides synchronous HTTP request execution on a pooled ``httpx.Client``,
    which is safe to share between threads.
    """

    @override
    def __init__(
        self,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ):
        """Initialize the HTTPX HTTP executor.

        Args:
            timeout: Transport timeout in seconds. Ignored when ``client`` is given.
            client: Optional preconfigured httpx client, e.g. one with a custom
                transport. The executor takes ownership and closes it.

        """
        self.timeout = timeout
        self.client = (
            client
            if client is not None
            else httpx.Client(timeout=timeout if timeout is not None else 10.0)
        )

    @override
    def send_request(self, request: HttpRequest) -> HttpResponse:
        """Send an assembled request.

        Args:
            request: The request to send. Its URL and body are sent unchanged.

        Returns:
            HttpResponse containing the status code and deserialized response body.

        Raises:
            TransportTimeoutError: If the request times out.
            HttpConnectionError: If there is a connection or network error.
            TransportError: If any other transport-level error occurs.

        """
        method, url = request.method, request.url
        # signed query strings stay out of error messages
        endpoint = url.split("?", 1)[0]
        try:
            response = self.client.request(
                method, url, headers=request.headers, content=request.content
            )
        except BaseError:
            raise
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(
                f"{method} request to {endpoint} timed out", timeout_seconds=self.timeout
            ) from e
        except httpx.ConnectError as e:
            raise HttpConnectionError(f"Failed to connect to {endpoint}", url=endpoint) from e
        except httpx.NetworkError as e:
            raise HttpConnectionError(
                f"Network error during {method} request to {endpoint}", url=endpoint
            ) from e
        except Exception as e:
            raise TransportError(f"{method} request to {endpoint} failed: {e}") from e
        log.debug("%s %s -> %d", method, response.url.path, response.status_code)
        return HttpResponse(
            status=response.status_code,
            body=deserialize_response(response.content, endpoint),
            headers=dict(response.headers),
        )

    def close(self) -> None:
        """Close the underlying connection pool."""
        self.client.close()

    def __del__(self) -> None:
        """Cleanup the httpx client when the executor is destroyed."""
        client = getattr(self, "client", None)
        if client is not None:
            client.close()
