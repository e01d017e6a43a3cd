"""HTTP executor implementations.

This package provides pluggable HTTP client implementations for the MEXC
client, supporting the httpx and requests libraries.
"""

from mexc_client.executors.defaults import DEFAULT_HTTP_EXECUTOR
from mexc_client.executors.httpx import HttpxHttpExecutor
from mexc_client.executors.interface import HttpExecutor, HttpRequest, HttpResponse
from mexc_client.executors.requests import RequestsHttpExecutor

__all__ = [
    "HttpExecutor",
    "HttpRequest",
    "HttpResponse",
    "HttpxHttpExecutor",
    "RequestsHttpExecutor",
    "DEFAULT_HTTP_EXECUTOR",
]
