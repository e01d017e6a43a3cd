"""Environment configuration setup utilities.

This module provides functions for loading client configuration from .env
files, environment variables and JSON config files.
"""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

import orjson
from dotenv import load_dotenv

from mexc_client.errors import ValidationError
from mexc_client.helpers import DEFAULT_FUTURES_API_URL, DEFAULT_SPOT_API_URL
from mexc_client.types import ClientConfig, Credentials

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Environment:
    """Settings for both API families, as loaded from the environment."""

    spot_api_url: str
    futures_api_url: str
    credentials: Credentials | None

    def spot_config(self, **overrides: object) -> ClientConfig:
        """Build a spot client configuration from these settings."""
        config = ClientConfig(base_url=self.spot_api_url, credentials=self.credentials)
        return replace(config, **overrides)  # type: ignore[arg-type]

    def futures_config(self, **overrides: object) -> ClientConfig:
        """Build a futures client configuration from these settings."""
        config = ClientConfig(base_url=self.futures_api_url, credentials=self.credentials)
        return replace(config, **overrides)  # type: ignore[arg-type]


def _credentials(api_key: str | None, secret_key: str | None) -> Credentials | None:
    if not api_key:
        return None
    return Credentials(api_key=api_key, secret_key=secret_key or None)


def setup_environment() -> Environment:
    """Load MEXC client settings from the environment.

    Loads environment variables from a .env file if present, otherwise falls
    back to system environment variables. Reads environment-specific variables
    based on the ENVIRONMENT variable (defaults to 'production'):

    - ``MEXC_SPOT_API_ENDPOINT_<ENV>``
    - ``MEXC_FUTURES_API_ENDPOINT_<ENV>``
    - ``MEXC_API_KEY_<ENV>``
    - ``MEXC_SECRET_KEY_<ENV>``

    Returns:
        Environment: endpoints and credentials (None when no API key is set)

    """
    env_file_path = Path(".env")
    if env_file_path.exists():
        log.info("Loading environment variables from .env file")
        load_dotenv(env_file_path)
    else:
        log.info(".env file not found. Falling back to Bash Environment variables.")

    environment = os.getenv("ENVIRONMENT", "production").lower()
    log.info("Using %s environment", environment)
    suffix = environment.upper()

    return Environment(
        spot_api_url=os.environ.get(
            f"MEXC_SPOT_API_ENDPOINT_{suffix}", DEFAULT_SPOT_API_URL
        ),
        futures_api_url=os.environ.get(
            f"MEXC_FUTURES_API_ENDPOINT_{suffix}", DEFAULT_FUTURES_API_URL
        ),
        credentials=_credentials(
            os.environ.get(f"MEXC_API_KEY_{suffix}"),
            os.environ.get(f"MEXC_SECRET_KEY_{suffix}"),
        ),
    )


def load_config_file(path: str | Path) -> Environment:
    """Load MEXC client settings from a JSON file.

    Recognized keys are ``api_key``, ``secret_key``, ``spot_api_url`` and
    ``futures_api_url``; all are optional.

    Args:
        path: Path of the JSON file

    Returns:
        Environment: endpoints and credentials (None when no API key is set)

    Raises:
        ValidationError: If the file cannot be read or is not a JSON object

    """
    path = Path(path)
    try:
        data = orjson.loads(path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as e:
        raise ValidationError(f"Cannot load config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValidationError(f"Config file {path} must contain a JSON object")

    log.info("Loaded configuration from %s", path)
    return Environment(
        spot_api_url=data.get("spot_api_url") or DEFAULT_SPOT_API_URL,
        futures_api_url=data.get("futures_api_url") or DEFAULT_FUTURES_API_URL,
        credentials=_credentials(data.get("api_key"), data.get("secret_key")),
    )
