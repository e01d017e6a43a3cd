"""Tests for response normalization and request/response serialization."""

import subprocess
import sys
from decimal import Decimal
from pathlib import Path

import pytest

from mexc_client.errors import (
    HttpConnectionError,
    SerializationError,
    TransportError,
    TransportTimeoutError,
)
from mexc_client.executors.interface import HttpResponse
from mexc_client.helpers import deserialize_response, serialize_request, unwrap_response
from mexc_client.types import ApiError, ApiResponse, Side

REPO_ROOT = Path(__file__).parents[2]


def test_success_response():
    body = {"symbol": "BTCUSDT", "price": "67012.45"}
    result = unwrap_response(HttpResponse(status=200, body=body))
    assert result == ApiResponse(status=200, result=body)
    assert result.ok


@pytest.mark.parametrize("status", [400, 401, 404, 429, 500, 503])
def test_error_status_is_still_a_response(status):
    body = {"code": 700002, "msg": "Signature for this request is not valid."}
    result = unwrap_response(HttpResponse(status=status, body=body))
    assert isinstance(result, ApiResponse)
    assert result.ok
    assert result.status == status
    assert result.result == body


@pytest.mark.parametrize(
    "error",
    [
        HttpConnectionError("Failed to connect", url="https://api.mexc.com/api/v3/ping"),
        TransportTimeoutError("timed out", timeout_seconds=10),
        TransportError("nodename nor servname provided"),
    ],
)
def test_transport_failure_is_an_error(error):
    result = unwrap_response(error)
    assert isinstance(result, ApiError)
    assert not isinstance(result, ApiResponse)
    assert not result.ok
    assert result.reason is error


def test_unknown_outcome_is_an_error():
    result = unwrap_response(object())
    assert isinstance(result, ApiError)
    assert isinstance(result.reason, TransportError)


def test_deserialize_json():
    assert deserialize_response(b'[{"a":1}]', "url") == [{"a": 1}]


def test_deserialize_keeps_raw_body():
    assert deserialize_response(b"<html>502 Bad Gateway</html>", "url") == (
        "<html>502 Bad Gateway</html>"
    )


def test_deserialize_partial_body():
    assert deserialize_response(b'{"code": 0, "da', "url") == '{"code": 0, "da'


def test_deserialize_empty_body():
    assert deserialize_response(b"", "url") == ""


def test_serialize_request():
    assert serialize_request(None) is None
    assert serialize_request({"b": Decimal("0.10"), "a": Side.SELL}) == (
        b'{"b":"0.10","a":"SELL"}'
    )
    assert serialize_request({"q": Decimal("1E-7"), "p": Decimal("1E+2")}) == (
        b'{"q":"0.0000001","p":"100"}'
    )


def test_serialize_request_failure():
    with pytest.raises(SerializationError):
        serialize_request({"a": object()})


@pytest.mark.parametrize(
    "module", ["mexc_client.helpers", "mexc_client.signing", "mexc_client.executors"]
)
def test_modules_import_first(module):
    # a fresh interpreter, so the import order is not masked by earlier tests
    subprocess.run(
        [sys.executable, "-c", f"import {module}"], cwd=REPO_ROOT, check=True
    )
