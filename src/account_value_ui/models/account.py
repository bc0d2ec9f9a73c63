"""
Account domain models and payload parsing.

These dataclasses mirror the JSON returned by the valuation service. The
hierarchy of a completed lookup is:

    LookupResult
    ├── account_id
    ├── AccountValue (total_robux, in_euro, Collectible[])
    └── Profile (username, display_name?, avatar_url)

The parse_* functions turn decoded JSON into these models and raise
RemoteServiceError for anything missing or wrongly typed, so a malformed
response can never surface as an unhandled fault.
"""

from dataclasses import dataclass, field
from typing import Any, Sequence

from benedict import benedict

from account_value_ui.errors import InvalidAccountId, RemoteServiceError

# Account ids are unsigned 64-bit integers
ACCOUNT_ID_MAX = 2**64 - 1


@dataclass(frozen=True, slots=True)
class Collectible:
    """A single inventory item returned by the valuation service."""

    name: str
    price: int
    id: int
    thumbnail_url: str
    serial_number: int | None = None

    @property
    def is_serialized(self) -> bool:
        """Return True for limited items that carry a serial number."""
        return self.serial_number is not None


@dataclass(frozen=True, slots=True)
class Profile:
    """Public profile information for an account."""

    username: str
    avatar_url: str
    display_name: str | None = None

    @property
    def shown_name(self) -> str:
        """Return the display name, falling back to the username."""
        return self.display_name or self.username


@dataclass(frozen=True, slots=True)
class AccountValue:
    """Valuation of an account's public inventory."""

    total_robux: int
    in_euro: int
    collectibles: Sequence[Collectible] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class ExchangeRate:
    """Current Robux to euro conversion rate."""

    robux_per_euro: int


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Aggregate of a completed lookup. Built only when every call succeeded."""

    account_id: int
    value: AccountValue
    profile: Profile

    @property
    def total_value(self) -> int:
        return self.value.total_robux

    @property
    def value_in_local_currency(self) -> int:
        return self.value.in_euro

    @property
    def items(self) -> Sequence[Collectible]:
        return self.value.collectibles


def parse_account_id(text: str | None) -> int:
    """
    Parse user supplied text as an account id.

    Only a non-empty run of ASCII digits is accepted: no sign, no
    whitespace, no separators. The value must fit in an unsigned 64-bit
    integer.

    Args:
        text: Raw text, typically the content of the id field.

    Returns:
        The account id.

    Raises:
        InvalidAccountId: If the text is empty, not purely digits, or too large.
    """
    if not text:
        raise InvalidAccountId("account id is empty")
    if not (text.isascii() and text.isdigit()):
        raise InvalidAccountId(f"account id must be digits only: {text!r}")
    value = int(text)
    if value > ACCOUNT_ID_MAX:
        raise InvalidAccountId(f"account id out of range: {text}")
    return value


def parse_visibility(operation: str, body: str) -> bool:
    """Parse the can-view-inventory body, plain text or JSON boolean."""
    normalized = body.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise RemoteServiceError(operation, f"expected a boolean, got {body[:50]!r}")


def parse_account_value(operation: str, payload: Any) -> AccountValue:
    """
    Parse the collectibles-account-value payload.

    A missing collectibles key (older service revision) yields an empty
    item list. Item order is preserved exactly as received.
    """
    b = _as_benedict(operation, payload)
    raw_items = b.get("collectibles") or []
    if not isinstance(raw_items, list):
        raise RemoteServiceError(operation, "collectibles is not a list")
    return AccountValue(
        total_robux=_require_int(operation, b, "total_robux"),
        in_euro=_require_int(operation, b, "in_euro"),
        collectibles=tuple(_parse_collectible(operation, item) for item in raw_items),
    )


def parse_profile(operation: str, payload: Any) -> Profile:
    """Parse the profile-info payload. displayname is optional."""
    b = _as_benedict(operation, payload)
    display_name = b.get("displayname")
    if display_name is not None and not isinstance(display_name, str):
        raise RemoteServiceError(operation, "displayname is not a string")
    return Profile(
        username=_require_str(operation, b, "username"),
        avatar_url=_require_str(operation, b, "avatar"),
        display_name=display_name or None,
    )


def parse_exchange_rate(operation: str, payload: Any) -> ExchangeRate:
    """Parse the exchange-rate payload."""
    b = _as_benedict(operation, payload)
    return ExchangeRate(robux_per_euro=_require_int(operation, b, "robux_per_euro"))


def _parse_collectible(operation: str, item: Any) -> Collectible:
    b = _as_benedict(operation, item)
    serial = b.get("serialnumber")
    if serial is not None:
        serial = _require_int(operation, b, "serialnumber")
    return Collectible(
        name=_require_str(operation, b, "name"),
        price=_require_int(operation, b, "price"),
        id=_require_int(operation, b, "id"),
        thumbnail_url=_require_str(operation, b, "thumbnail"),
        serial_number=serial,
    )


def _as_benedict(operation: str, payload: Any) -> benedict:
    if not isinstance(payload, dict):
        raise RemoteServiceError(operation, "expected a JSON object")
    # Keys are flat; disabling the separator keeps dotted keys literal
    return benedict(payload, keypath_separator=None)


def _require_int(operation: str, b: benedict, key: str) -> int:
    value = b.get(key)
    # bool is a subclass of int and never a valid amount or id
    if isinstance(value, bool) or not isinstance(value, int):
        raise RemoteServiceError(operation, f"{key} must be an integer")
    if value < 0:
        raise RemoteServiceError(operation, f"{key} must not be negative")
    return value


def _require_str(operation: str, b: benedict, key: str) -> str:
    value = b.get(key)
    if not isinstance(value, str):
        raise RemoteServiceError(operation, f"{key} must be a string")
    return value
