"""Shared plumbing of the spot and futures API clients.

A client owns an immutable configuration, a request signer for its API family
and an HTTP executor. Every endpoint method funnels through
:meth:`BaseApiClient.send_public_request` or
:meth:`BaseApiClient.send_signed_request`, which return normalized results.
"""

import logging
from typing import ClassVar, Type

from mexc_client.auth import RequestSigner
from mexc_client.errors import TransportError, ValidationError
from mexc_client.executors import DEFAULT_HTTP_EXECUTOR, HttpExecutor
from mexc_client.executors.interface import HttpRequest
from mexc_client.helpers import unwrap_response
from mexc_client.types import ApiResult, ClientConfig, Json, Params

log = logging.getLogger(__name__)


class BaseApiClient:
    """Base class for the MEXC API clients.

    Subclasses set the signer strategy and the default host of their API family.
    """

    signer_class: ClassVar[Type[RequestSigner]]
    default_base_url: ClassVar[str]

    _config: ClientConfig
    _signer: RequestSigner
    _http_executor: HttpExecutor

    def __init__(
        self,
        config: ClientConfig | None = None,
        executor: HttpExecutor | None = None,
    ):
        """Initialize the API client.

        Args:
            config: Client configuration (default: public access to the
                production host)
            executor: Custom HTTP executor (optional, uses default if not provided)

        Raises:
            ValidationError: If ``config`` is not a ClientConfig

        """
        if config is None:
            config = ClientConfig()
        if not isinstance(config, ClientConfig):
            raise ValidationError from TypeError(
                f"Unexpected type for config {type(config)}"
            )

        self._config = config
        self._signer = self.signer_class(
            config, config.base_url or self.default_base_url
        )
        self._http_executor = (
            executor
            if executor is not None
            else DEFAULT_HTTP_EXECUTOR(timeout=config.timeout)
        )

    @property
    def config(self) -> ClientConfig:
        """The immutable configuration this client was built with."""
        return self._config

    @property
    def base_url(self) -> str:
        return self._signer.base_url

    @property
    def headers(self) -> dict[str, str]:
        """Client-level headers sent with every request."""
        return self._signer.headers

    def send_public_request(
        self,
        method: str,
        path: str,
        params: Params | None = None,
        body: Json | None = None,
    ) -> ApiResult:
        """Send an unauthenticated request.

        Args:
            method: HTTP method
            path: Endpoint path
            params: Ordered query parameters; None values are dropped
            body: Optional JSON body

        Returns:
            ApiResponse for any completed exchange, ApiError otherwise

        """
        return self._dispatch(self._signer.public_request(method, path, params, body))

    def send_signed_request(
        self,
        method: str,
        path: str,
        params: Params | None = None,
        body: Json | None = None,
    ) -> ApiResult:
        """Send an authenticated request signed with the configured credentials.

        Args:
            method: HTTP method
            path: Endpoint path
            params: Ordered parameters; None values are dropped
            body: JSON body (futures POST requests only)

        Returns:
            ApiResponse for any completed exchange, ApiError otherwise

        Raises:
            MissingCredentialsError: If credentials are not configured. Raised
                before anything is sent.

        """
        return self._dispatch(self._signer.signed_request(method, path, params, body))

    def _dispatch(self, request: HttpRequest) -> ApiResult:
        log.debug("%s %s", request.method, request.url.split("?", 1)[0])
        try:
            response = self._http_executor.send_request(request)
        except TransportError as e:
            log.warning("%s %s failed: %s", request.method, request.url.split("?", 1)[0], e)
            return unwrap_response(e)
        return unwrap_response(response)
