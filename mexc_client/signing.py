"""Timestamps, canonical query encoding and HMAC-SHA256 signing.

These are the primitives both signing protocols are built from. Everything here
is a pure function except :func:`timestamp`, which reads the wall clock.
"""

import hmac
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from hashlib import sha256
from time import time_ns
from urllib.parse import parse_qsl, quote

from mexc_client.helpers import serialize_request
from mexc_client.types import ParamValue, Params


def timestamp() -> str:
    """Return the current time as milliseconds since the Unix epoch.

    The value is a plain string of decimal digits, ready to be placed in a
    header or a query string.
    """
    return str(time_ns() // 1_000_000)


def render_value(value: ParamValue) -> str:
    """Render a single parameter value the way it is transmitted.

    Booleans become ``true``/``false``, enums are rendered by their value,
    decimals and floats in positional notation and nested lists/dicts as minified JSON.
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        # repr is the shortest round-tripping form; Decimal drops the exponent
        value = Decimal(repr(value))
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, (list, dict)):
        return serialize_request(value).decode()  # type: ignore[union-attr]
    return str(value)


def param_pairs(params: Params | None) -> list[tuple[str, ParamValue]]:
    """Flatten a parameter mapping or pair list, dropping ``None`` values."""
    if params is None:
        return []
    items = params.items() if isinstance(params, Mapping) else params
    return [(str(key), value) for key, value in items if value is not None]


def encode_query(params: Params | None, *, sort_keys: bool = False) -> str:
    """Encode parameters as a canonical ``k1=v1&k2=v2`` query string.

    Parameters whose value is ``None`` are left out entirely. Keys and values are
    percent-encoded leaving only RFC 3986 unreserved characters literal, so a
    space becomes ``%20`` and never ``+``. Caller order is kept unless
    ``sort_keys`` is set.

    Args:
        params: Ordered mapping or sequence of ``(key, value)`` pairs
        sort_keys: Sort pairs by key before encoding

    Returns:
        The encoded query string, ``""`` when there is nothing to encode

    """
    pairs = param_pairs(params)
    if sort_keys:
        pairs = sorted(pairs, key=lambda pair: pair[0])
    return "&".join(
        f"{quote(key, safe='')}={quote(render_value(value), safe='')}"
        for key, value in pairs
    )


def decode_query(query: str) -> list[tuple[str, str]]:
    """Parse a canonical query string back into ordered ``(key, value)`` pairs."""
    return parse_qsl(query, keep_blank_values=True)


def sign_sha256(secret_key: str, payload: str) -> str:
    """Sign a payload with HMAC-SHA256.

    Args:
        secret_key: HMAC key, UTF-8 encoded before use
        payload: Message to authenticate, UTF-8 encoded before use

    Returns:
        The 64 character lowercase hex digest

    Example:
        .. code-block:: python

            >>> sign_sha256("foo", "bar")
            'f9320baf0249169e73850cd6156ded0106e2bb6ad8cab01b7bbbebe6d1065317'

    """
    return hmac.new(secret_key.encode(), payload.encode(), sha256).hexdigest()


def sign_query(params: Params | None, secret_key: str) -> str:
    """Sign the canonical encoding of ``params`` with ``secret_key``."""
    return sign_sha256(secret_key, encode_query(params))
