from functools import lru_cache
from pathlib import Path
from typing import Any, Generator
from urllib.parse import urlsplit

import orjson
import pytest

from mexc_client import (
    ClientConfig,
    Credentials,
    MexcFuturesClient,
    MexcSpotClient,
)
from tests.mock_executors import MockHttpExecutor

DATA_DIR = Path(__file__).parent.joinpath("data")

# Example key pair from the exchange's API documentation
API_KEY = "mx0aBYs33eIilxBWC5"
SECRET_KEY = "45d0b3c26f2644f19bfb98b07741b2f5"


def split_url(url: str) -> tuple[str, str]:
    """Return the path and raw query string of a URL."""
    parts = urlsplit(url)
    return parts.path, parts.query


def _mock_client(client_class, executor, credentials):
    return client_class(
        ClientConfig(
            # does not matter as it will not be used with the mock in place
            base_url="https://api.gaierror.xyz",
            credentials=credentials,
        ),
        # replace real network requests with our mock
        executor=executor,
    )


@pytest.fixture
def mock_spot_client() -> Generator[
    tuple[MexcSpotClient, MockHttpExecutor], None, None
]:
    mock_http = MockHttpExecutor()
    client = _mock_client(MexcSpotClient, mock_http, Credentials(API_KEY, SECRET_KEY))

    yield (client, mock_http)

    mock_http.assert_exhausted()


@pytest.fixture
def mock_futures_client() -> Generator[
    tuple[MexcFuturesClient, MockHttpExecutor], None, None
]:
    mock_http = MockHttpExecutor()
    client = _mock_client(
        MexcFuturesClient, mock_http, Credentials(API_KEY, SECRET_KEY)
    )

    yield (client, mock_http)

    mock_http.assert_exhausted()


@pytest.fixture
def public_spot_client() -> Generator[
    tuple[MexcSpotClient, MockHttpExecutor], None, None
]:
    mock_http = MockHttpExecutor()
    yield _mock_client(MexcSpotClient, mock_http, None), mock_http
    mock_http.assert_exhausted()


@pytest.fixture
def public_futures_client() -> Generator[
    tuple[MexcFuturesClient, MockHttpExecutor], None, None
]:
    mock_http = MockHttpExecutor()
    yield _mock_client(MexcFuturesClient, mock_http, None), mock_http
    mock_http.assert_exhausted()


@lru_cache(maxsize=1)
def data_files() -> list[Path]:
    return list(DATA_DIR.iterdir())


def json_data_files(name: str) -> list[Path]:
    return list(
        sorted(
            path
            for path in data_files()
            if path.match(f"*/{name}.*.json", case_sensitive=True)
        )
    )


def load_json(name: str, case: int | None = None) -> Any:
    case_part = f"{case}." if case else ""
    path = DATA_DIR / f"{name}.{case_part}json"
    with open(path, "rb") as fh:
        return orjson.loads(fh.read())


def load_json_all_cases(name: str) -> list[tuple[Any, Path]]:
    """Load all json payloads for a given base name (case1, case2, ...)."""
    results = []
    for path in json_data_files(name):
        with open(path, "rb") as fh:
            payload = orjson.loads(fh.read())
            results.append((payload, path))
    return results
