"""HTTP executor implementation using requests.

This module provides HTTP request handling using the popular requests library,
as an alternative to the default httpx executor.
"""

from typing import override

import requests

from mexc_client.errors import (
    BaseError,
    HttpConnectionError,
    TransportError,
    TransportTimeoutError,
)
from mexc_client.executors.interface import HttpExecutor, HttpRequest, HttpResponse
from mexc_client.helpers import deserialize_response


class RequestsHttpExecutor(HttpExecutor):
    """HTTP executor implementation using requests.

    Provides synchronous HTTP request execution using a ``requests.Session``.
    """

    @override
    def __init__(
        self,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize the RequestsHttpExecutor.

        Args:
            timeout: Transport timeout in seconds. Defaults to 10 seconds.
            session: Optional preconfigured session to send requests with.

        """
        self.timeout = timeout if timeout is not None else 10.0
        self.session = session if session is not None else requests.Session()

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
            response = self.session.request(
                method,
                url,
                headers=request.headers,
                data=request.content,
                timeout=self.timeout,
            )
        except BaseError:
            raise
        except requests.Timeout as e:
            raise TransportTimeoutError(
                f"{method} request to {endpoint} timed out", timeout_seconds=self.timeout
            ) from e
        except requests.ConnectionError as e:
            raise HttpConnectionError(f"Failed to connect to {endpoint}", url=endpoint) from e
        except Exception as e:
            raise TransportError(f"{method} request to {endpoint} failed: {e}") from e
        return HttpResponse(
            status=response.status_code,
            body=deserialize_response(response.content, endpoint),
            headers=dict(response.headers),
        )
