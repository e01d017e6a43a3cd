"""Default executor configuration.

This module defines the default HTTP executor implementation used by the MEXC
clients when no custom executor is provided.
"""

from typing import Type

from mexc_client.executors.httpx import HttpxHttpExecutor
from mexc_client.executors.interface import HttpExecutor

DEFAULT_HTTP_EXECUTOR: Type[HttpExecutor] = HttpxHttpExecutor
