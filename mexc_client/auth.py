"""Request assembly and signing for the two MEXC API families.

The futures API (v1) and the spot API (v3) authenticate requests with
incompatible conventions. Each convention is a :class:`RequestSigner` strategy
that turns a method, a path and an ordered parameter list into a ready-to-send
:class:`HttpRequest`.

Futures (v1)
    The API key travels in the ``ApiKey`` client header. The signed payload is
    ``query + api_key + request_time`` for GET/DELETE and
    ``api_key + request_time + json_body`` for POST. The request time and the
    signature are sent in the ``Request-Time`` and ``Signature`` headers.

Spot (v3)
    The API key travels in the ``X-MEXC-APIKEY`` client header. A ``timestamp``
    parameter is appended to the parameters, the canonical query string is
    signed as-is and the signature is appended as ``signature``. POST requests
    carry the signed parameters both in the URL and as a JSON body.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal

from mexc_client.errors import MissingCredentialsError, ValidationError
from mexc_client.executors.interface import HttpRequest
from mexc_client.helpers import CONTENT_TYPE_JSON, serialize_request
from mexc_client.signing import (
    encode_query,
    param_pairs,
    render_value,
    sign_sha256,
    timestamp,
)
from mexc_client.types import ClientConfig, Json, Params

log = logging.getLogger(__name__)

SUPPORTED_METHODS = frozenset({"GET", "DELETE", "POST", "PUT"})
BODY_METHODS = frozenset({"POST", "PUT"})


def _normalize_method(method: str) -> str:
    method = method.upper()
    if method not in SUPPORTED_METHODS:
        raise ValidationError(f"Unsupported HTTP method {method}")
    return method


class RequestSigner(ABC):
    """Assembles public and signed requests for one API family.

    Client-level headers (content type, API key, custom headers) are computed
    once at construction. Instances hold no mutable state and can be shared by
    concurrent calls.
    """

    api_key_header: str

    def __init__(self, config: ClientConfig, base_url: str):
        """Initialize the signer.

        Args:
            config: Client configuration providing credentials and custom headers
            base_url: Resolved API host for this family

        """
        self._config = config
        self.base_url = base_url.rstrip("/")
        headers = {"Content-Type": CONTENT_TYPE_JSON}
        if config.api_key is not None:
            headers[self.api_key_header] = config.api_key
        headers.update(config.headers)
        self._headers = headers

    @property
    def headers(self) -> dict[str, str]:
        """Headers attached to every request, as a fresh copy."""
        return dict(self._headers)

    def url(self, path: str, query: str = "") -> str:
        """Join the base URL, a path and an already encoded query string."""
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{path}?{query}" if query else f"{self.base_url}{path}"

    def public_request(
        self,
        method: str,
        path: str,
        params: Params | None = None,
        body: Json | None = None,
    ) -> HttpRequest:
        """Assemble an unauthenticated request. The signer is never involved.

        Args:
            method: HTTP method
            path: Endpoint path
            params: Ordered query parameters; None values are dropped
            body: Optional JSON body

        Returns:
            The assembled request

        """
        return HttpRequest(
            method=_normalize_method(method),
            url=self.url(path, encode_query(params)),
            headers=self.headers,
            content=serialize_request(body),
        )

    def _require_credentials(self) -> tuple[str, str]:
        credentials = self._config.credentials
        if credentials is None or not credentials.api_key:
            raise MissingCredentialsError("API key")
        if not credentials.secret_key:
            raise MissingCredentialsError("Secret key")
        return credentials.api_key, credentials.secret_key

    @abstractmethod
    def signed_request(
        self,
        method: str,
        path: str,
        params: Params | None = None,
        body: Json | None = None,
        *,
        request_time: str | None = None,
    ) -> HttpRequest:
        """Assemble an authenticated request.

        Args:
            method: HTTP method
            path: Endpoint path
            params: Ordered parameters; None values are dropped
            body: JSON body, for families that sign a body
            request_time: Millisecond timestamp to sign with. Taken from the
                clock when omitted.

        Returns:
            The assembled, signed request

        Raises:
            MissingCredentialsError: If the API key or secret key is not configured
            ValidationError: If the request cannot be expressed in this family

        """
        ...


class FuturesRequestSigner(RequestSigner):
    """Signing convention of the futures (contract) API."""

    api_key_header = "ApiKey"

    def signed_request(
        self,
        method: str,
        path: str,
        params: Params | None = None,
        body: Json | None = None,
        *,
        request_time: str | None = None,
    ) -> HttpRequest:
        method = _normalize_method(method)
        api_key, secret_key = self._require_credentials()
        request_time = request_time if request_time is not None else timestamp()

        if method in BODY_METHODS:
            if param_pairs(params):
                raise ValidationError(
                    f"Signed futures {method} requests carry parameters in the body only"
                )
            content = serialize_request(body)
            query = ""
            payload = api_key + request_time + (content.decode() if content else "")
        else:
            if body is not None:
                raise ValidationError(f"Signed futures {method} requests have no body")
            content = None
            query = encode_query(params)
            payload = query + api_key + request_time

        headers = self.headers
        headers["Request-Time"] = request_time
        headers["Signature"] = sign_sha256(secret_key, payload)
        log.debug("Signed futures request %s %s", method, path)
        return HttpRequest(
            method=method, url=self.url(path, query), headers=headers, content=content
        )


class SpotRequestSigner(RequestSigner):
    """Signing convention of the spot v3 API."""

    api_key_header = "X-MEXC-APIKEY"

    def signed_request(
        self,
        method: str,
        path: str,
        params: Params | None = None,
        body: Json | None = None,
        *,
        request_time: str | None = None,
    ) -> HttpRequest:
        method = _normalize_method(method)
        if body is not None:
            raise ValidationError(
                "Signed spot requests build their body from the parameters"
            )
        _, secret_key = self._require_credentials()

        pairs = param_pairs(params)
        reserved = {"timestamp", "signature"}.intersection(key for key, _ in pairs)
        if reserved:
            raise ValidationError(f"Parameters {sorted(reserved)} are set by the signer")

        # nested values (batch orders) and decimal numbers go into the body
        # exactly as they are rendered in the signed query string
        pairs = [
            (key, render_value(value))
            if isinstance(value, (list, dict, Decimal, float))
            else (key, value)
            for key, value in pairs
        ]
        pairs.append(
            ("timestamp", request_time if request_time is not None else timestamp())
        )
        signature = sign_sha256(secret_key, encode_query(pairs))
        pairs.append(("signature", signature))

        query = encode_query(pairs)
        content = serialize_request(dict(pairs)) if method in BODY_METHODS else None
        log.debug("Signed spot request %s %s", method, path)
        return HttpRequest(
            method=method, url=self.url(path, query), headers=self.headers, content=content
        )
