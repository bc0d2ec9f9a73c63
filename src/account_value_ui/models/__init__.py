"""
Data models for the Account Value UI.

This package provides:
- Account domain models (Collectible, Profile, AccountValue, LookupResult)
- Payload parsing for the valuation service responses
- Page state models (UiState, View)
"""

from account_value_ui.models.account import (
    ACCOUNT_ID_MAX,
    AccountValue,
    Collectible,
    ExchangeRate,
    LookupResult,
    Profile,
    parse_account_id,
    parse_account_value,
    parse_exchange_rate,
    parse_profile,
    parse_visibility,
)
from account_value_ui.models.common import (
    CollectibleView,
    UiState,
    UiStateKind,
    View,
)

__all__ = [
    "ACCOUNT_ID_MAX",
    "AccountValue",
    "Collectible",
    "CollectibleView",
    "ExchangeRate",
    "LookupResult",
    "Profile",
    "UiState",
    "UiStateKind",
    "View",
    "parse_account_id",
    "parse_account_value",
    "parse_exchange_rate",
    "parse_profile",
    "parse_visibility",
]
