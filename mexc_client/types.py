"""Type definitions for the MEXC client.

This module contains type aliases, enums, and dataclasses used throughout
the library, organized into logical sections for clarity.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Iterable, Mapping, TypeAlias

# ============================================================================
# TYPE ALIASES
# ============================================================================

# JSON type hierarchy
JsonObject: TypeAlias = dict[str, "JsonValue"]
JsonArray: TypeAlias = list["JsonValue"]
JsonValue: TypeAlias = None | bool | int | float | str | JsonObject | JsonArray
# Both API families answer with objects or arrays at the root, so Json is any value here
Json: TypeAlias = JsonValue

# Query parameter values accepted by the canonical encoder; None means "absent"
ParamValue: TypeAlias = (
    None | bool | int | float | str | Decimal | Enum | JsonObject | JsonArray
)
# Ordered parameter list; dicts keep their insertion order
Params: TypeAlias = Mapping[str, ParamValue] | Iterable[tuple[str, ParamValue]]

Headers: TypeAlias = tuple[tuple[str, str], ...]


# ============================================================================
# CORE ENUMS
# ============================================================================


class Side(Enum):
    """Spot order side."""

    BUY = "BUY"
    SELL = "SELL"


class OrderType(Enum):
    """Spot order type."""

    LIMIT = "LIMIT"
    MARKET = "MARKET"
    LIMIT_MAKER = "LIMIT_MAKER"
    IMMEDIATE_OR_CANCEL = "IMMEDIATE_OR_CANCEL"
    FILL_OR_KILL = "FILL_OR_KILL"


class KlineInterval(Enum):
    """Spot kline/candlestick intervals."""

    ONE_MINUTE = "1m"
    FIVE_MINUTES = "5m"
    FIFTEEN_MINUTES = "15m"
    THIRTY_MINUTES = "30m"
    SIXTY_MINUTES = "60m"
    FOUR_HOURS = "4h"
    ONE_DAY = "1d"
    ONE_MONTH = "1M"


class FuturesInterval(Enum):
    """Futures kline/candlestick intervals."""

    Min1 = "Min1"
    Min5 = "Min5"
    Min15 = "Min15"
    Min30 = "Min30"
    Min60 = "Min60"
    Hour4 = "Hour4"
    Hour8 = "Hour8"
    Day1 = "Day1"
    Week1 = "Week1"
    Month1 = "Month1"


class FuturesSide(Enum):
    """Futures order direction."""

    OPEN_LONG = 1
    CLOSE_SHORT = 2
    OPEN_SHORT = 3
    CLOSE_LONG = 4


class FuturesOrderType(Enum):
    """Futures order type."""

    LIMIT = 1
    POST_ONLY = 2
    IOC = 3
    FOK = 4
    MARKET = 5
    MARKET_TO_LIMIT = 6


class OpenType(Enum):
    """Futures margin mode."""

    ISOLATED = 1
    CROSS = 2


# ============================================================================
# CONFIGURATION
# ============================================================================


@dataclass(frozen=True)
class Credentials:
    """API key pair used to authenticate private endpoints.

    The secret key is excluded from ``repr`` so it cannot leak into logs or
    tracebacks by accident.
    """

    api_key: str
    secret_key: str | None = field(default=None, repr=False)


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client configuration shared by every request of a client.

    Attributes:
        base_url: API host, e.g. ``https://api.mexc.com``. None selects the
            default host of the API family the config is used with.
        credentials: API key pair. Required only for signed endpoints.
        headers: Extra headers sent with every request, after the library's own.
        timeout: Transport timeout in seconds.

    """

    base_url: str | None = None
    credentials: Credentials | None = None
    headers: Headers = ()
    timeout: float = 10.0

    @property
    def api_key(self) -> str | None:
        return self.credentials.api_key if self.credentials else None

    @property
    def secret_key(self) -> str | None:
        return self.credentials.secret_key if self.credentials else None


# ============================================================================
# NORMALIZED RESPONSES
# ============================================================================


@dataclass(frozen=True)
class ApiResponse:
    """A completed HTTP exchange, whatever its status code.

    ``result`` holds the parsed JSON body, or the raw decoded text when the body
    was not valid JSON.
    """

    status: int
    result: Json

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ApiError:
    """No HTTP exchange completed; ``reason`` is the underlying transport error."""

    reason: Exception

    @property
    def ok(self) -> bool:
        return False


ApiResult: TypeAlias = ApiResponse | ApiError
