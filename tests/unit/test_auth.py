"""Tests for request assembly and the two signing conventions."""

import orjson
import pytest

from mexc_client.auth import FuturesRequestSigner, SpotRequestSigner
from mexc_client.errors import MissingCredentialsError, ValidationError
from mexc_client.signing import decode_query, encode_query, sign_sha256
from mexc_client.types import ClientConfig, Credentials
from tests.unit.conftest import API_KEY, SECRET_KEY, split_url

BASE_URL = "https://api.gaierror.xyz"
REQUEST_TIME = "1644489390087"


def make_config(**kwargs) -> ClientConfig:
    kwargs.setdefault("credentials", Credentials(API_KEY, SECRET_KEY))
    return ClientConfig(base_url=BASE_URL, **kwargs)


# ============================================================================
# CLIENT HEADERS
# ============================================================================


def test_futures_client_headers():
    signer = FuturesRequestSigner(make_config(), BASE_URL)
    assert signer.headers == {"Content-Type": "application/json", "ApiKey": API_KEY}


def test_spot_client_headers():
    signer = SpotRequestSigner(make_config(), BASE_URL)
    assert signer.headers == {
        "Content-Type": "application/json",
        "X-MEXC-APIKEY": API_KEY,
    }


def test_custom_headers_are_appended():
    config = make_config(headers=(("X-Trace", "abc"),))
    signer = SpotRequestSigner(config, BASE_URL)
    assert list(signer.headers.items())[-1] == ("X-Trace", "abc")


def test_headers_without_credentials():
    signer = SpotRequestSigner(ClientConfig(), BASE_URL)
    assert signer.headers == {"Content-Type": "application/json"}


def test_headers_are_copied_per_request():
    signer = FuturesRequestSigner(make_config(), BASE_URL)
    request = signer.signed_request("GET", "/x", request_time=REQUEST_TIME)
    assert "Signature" in request.headers
    assert "Signature" not in signer.headers


def test_secret_key_not_in_repr():
    assert SECRET_KEY not in repr(make_config())


# ============================================================================
# FUTURES SIGNING
# ============================================================================


def test_futures_get_signature_payload():
    signer = FuturesRequestSigner(make_config(), BASE_URL)
    params = [("symbol", "BTC_USDT"), ("page_num", 1), ("page_size", None)]

    request = signer.signed_request(
        "GET", "/api/v1/private/order/list/history_orders", params, request_time=REQUEST_TIME
    )

    expected = sign_sha256(SECRET_KEY, "symbol=BTC_USDT&page_num=1" + API_KEY + REQUEST_TIME)
    assert request.method == "GET"
    assert (
        request.url
        == f"{BASE_URL}/api/v1/private/order/list/history_orders?symbol=BTC_USDT&page_num=1"
    )
    assert request.headers["Request-Time"] == REQUEST_TIME
    assert request.headers["Signature"] == expected
    assert request.headers["ApiKey"] == API_KEY
    assert request.content is None


def test_futures_get_without_params_signs_empty_query():
    signer = FuturesRequestSigner(make_config(), BASE_URL)

    request = signer.signed_request(
        "GET", "/api/v1/private/account/assets", request_time=REQUEST_TIME
    )

    assert request.url == f"{BASE_URL}/api/v1/private/account/assets"
    assert request.headers["Signature"] == sign_sha256(
        SECRET_KEY, API_KEY + REQUEST_TIME
    )


def test_futures_post_signs_transmitted_body():
    signer = FuturesRequestSigner(make_config(), BASE_URL)
    body = {"symbol": "BTC_USDT", "price": 60000, "vol": 1, "side": 1, "type": 5}

    request = signer.signed_request(
        "POST", "/api/v1/private/order/submit", body=body, request_time=REQUEST_TIME
    )

    json_body = '{"symbol":"BTC_USDT","price":60000,"vol":1,"side":1,"type":5}'
    assert request.content == json_body.encode()
    assert request.url == f"{BASE_URL}/api/v1/private/order/submit"
    assert request.headers["Signature"] == sign_sha256(
        SECRET_KEY, API_KEY + REQUEST_TIME + json_body
    )


def test_futures_post_body_key_order_matters():
    signer = FuturesRequestSigner(make_config(), BASE_URL)
    one = signer.signed_request(
        "POST", "/p", body={"a": 1, "b": 2}, request_time=REQUEST_TIME
    )
    two = signer.signed_request(
        "POST", "/p", body={"b": 2, "a": 1}, request_time=REQUEST_TIME
    )
    assert one.headers["Signature"] != two.headers["Signature"]


def test_futures_post_array_body():
    signer = FuturesRequestSigner(make_config(), BASE_URL)
    request = signer.signed_request(
        "POST", "/api/v1/private/order/cancel", body=[101, 102], request_time=REQUEST_TIME
    )
    assert request.content == b"[101,102]"
    assert request.headers["Signature"] == sign_sha256(
        SECRET_KEY, API_KEY + REQUEST_TIME + "[101,102]"
    )


def test_futures_post_rejects_query_params():
    signer = FuturesRequestSigner(make_config(), BASE_URL)
    with pytest.raises(ValidationError):
        signer.signed_request("POST", "/p", [("symbol", "BTC_USDT")])


def test_futures_get_rejects_body():
    signer = FuturesRequestSigner(make_config(), BASE_URL)
    with pytest.raises(ValidationError):
        signer.signed_request("GET", "/p", body={"a": 1})


def test_futures_uses_one_timestamp(monkeypatch):
    calls = iter(["1000", "2000"])
    monkeypatch.setattr("mexc_client.auth.timestamp", lambda: next(calls))
    signer = FuturesRequestSigner(make_config(), BASE_URL)

    request = signer.signed_request("GET", "/p", [("a", 1)])

    assert request.headers["Request-Time"] == "1000"
    assert request.headers["Signature"] == sign_sha256(SECRET_KEY, "a=1" + API_KEY + "1000")


# ============================================================================
# SPOT SIGNING
# ============================================================================

ORDER_PARAMS = [
    ("symbol", "BTCUSDT"),
    ("side", "BUY"),
    ("type", "LIMIT"),
    ("quantity", 1),
    ("price", 11),
    ("recvWindow", 5000),
]
ORDER_SIGNATURE = "fd3e4e8543c5188531eb7279d68ae7d26a573d0fc5ab0d18eb692451654d837a"


def test_spot_get_signature_in_query():
    signer = SpotRequestSigner(make_config(), BASE_URL)

    request = signer.signed_request(
        "GET", "/api/v3/order", ORDER_PARAMS, request_time=REQUEST_TIME
    )

    path, query = split_url(request.url)
    assert path == "/api/v3/order"
    assert query == (
        "symbol=BTCUSDT&side=BUY&type=LIMIT&quantity=1&price=11&recvWindow=5000"
        f"&timestamp={REQUEST_TIME}&signature={ORDER_SIGNATURE}"
    )
    assert request.content is None
    assert "Signature" not in request.headers
    assert request.headers["X-MEXC-APIKEY"] == API_KEY


def test_spot_post_signed_params_in_query_and_body():
    signer = SpotRequestSigner(make_config(), BASE_URL)

    request = signer.signed_request(
        "POST", "/api/v3/order", ORDER_PARAMS, request_time=REQUEST_TIME
    )

    _, query = split_url(request.url)
    assert query.endswith(f"&timestamp={REQUEST_TIME}&signature={ORDER_SIGNATURE}")
    assert orjson.loads(request.content) == {
        "symbol": "BTCUSDT",
        "side": "BUY",
        "type": "LIMIT",
        "quantity": 1,
        "price": 11,
        "recvWindow": 5000,
        "timestamp": REQUEST_TIME,
        "signature": ORDER_SIGNATURE,
    }


def test_spot_signed_query_decodes_to_params_plus_auth():
    signer = SpotRequestSigner(make_config(), BASE_URL)
    params = [("symbol", "BTCUSDT"), ("note", "a b&c"), ("limit", None)]

    request = signer.signed_request("GET", "/p", params, request_time=REQUEST_TIME)

    _, query = split_url(request.url)
    decoded = decode_query(query)
    assert decoded[:-1] == [
        ("symbol", "BTCUSDT"),
        ("note", "a b&c"),
        ("timestamp", REQUEST_TIME),
    ]
    assert decoded[-1][0] == "signature"
    assert decoded[-1][1] == sign_sha256(SECRET_KEY, encode_query(decoded[:-1]))


def test_spot_batch_parameter_is_minified_json():
    signer = SpotRequestSigner(make_config(), BASE_URL)
    orders = [{"symbol": "BTCUSDT", "side": "BUY", "type": "LIMIT", "quantity": "1"}]

    request = signer.signed_request(
        "POST", "/api/v3/batchOrders", [("batchOrders", orders)], request_time=REQUEST_TIME
    )

    batch_json = '[{"symbol":"BTCUSDT","side":"BUY","type":"LIMIT","quantity":"1"}]'
    _, query = split_url(request.url)
    assert decode_query(query)[0] == ("batchOrders", batch_json)
    assert orjson.loads(request.content)["batchOrders"] == batch_json
    signed = encode_query([("batchOrders", batch_json), ("timestamp", REQUEST_TIME)])
    assert decode_query(query)[-1][1] == sign_sha256(SECRET_KEY, signed)


def test_spot_rejects_reserved_params():
    signer = SpotRequestSigner(make_config(), BASE_URL)
    with pytest.raises(ValidationError):
        signer.signed_request("GET", "/p", [("timestamp", 1)])


def test_spot_rejects_explicit_body():
    signer = SpotRequestSigner(make_config(), BASE_URL)
    with pytest.raises(ValidationError):
        signer.signed_request("POST", "/p", body={"a": 1})


# ============================================================================
# MISUSE
# ============================================================================


@pytest.mark.parametrize("signer_class", [FuturesRequestSigner, SpotRequestSigner])
@pytest.mark.parametrize(
    "credentials,missing",
    [
        (None, "API key"),
        (Credentials(API_KEY), "Secret key"),
        (Credentials(API_KEY, ""), "Secret key"),
        (Credentials("", SECRET_KEY), "API key"),
    ],
)
def test_signed_request_without_credentials(signer_class, credentials, missing):
    signer = signer_class(ClientConfig(credentials=credentials), BASE_URL)
    with pytest.raises(MissingCredentialsError) as exc_info:
        signer.signed_request("GET", "/p")
    assert str(exc_info.value) == f"{missing} is not set"
    assert SECRET_KEY not in str(exc_info.value)


def test_unsupported_method():
    signer = SpotRequestSigner(make_config(), BASE_URL)
    with pytest.raises(ValidationError):
        signer.public_request("PATCH", "/p")


def test_public_request_never_signs(monkeypatch):
    def fail(*args):
        raise AssertionError("signer invoked for a public request")

    monkeypatch.setattr("mexc_client.auth.sign_sha256", fail)
    signer = SpotRequestSigner(ClientConfig(), BASE_URL)

    request = signer.public_request("GET", "api/v3/depth", [("symbol", "BTCUSDT"), ("limit", None)])

    assert request.url == f"{BASE_URL}/api/v3/depth?symbol=BTCUSDT"
    assert request.content is None
