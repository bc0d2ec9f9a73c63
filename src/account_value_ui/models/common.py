"""
UI state models shared by the presenter, the controller and the Reflex state.

UiState is the finite state of the page (idle, loading, error, result).
View is the projection of that state onto the visible page regions; the
Reflex state copies it field by field into reactive vars.
"""

from dataclasses import dataclass, field
from enum import Enum

from account_value_ui.models.account import LookupResult


class UiStateKind(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    RESULT = "result"


@dataclass(frozen=True)
class UiState:
    """
    The current state of the page.

    Exactly one kind is current. message is set only for ERROR and
    result only for RESULT.

    Attributes:
        kind: Which of the four states is current.
        message: Error text shown to the user.
        result: The completed lookup being displayed.
    """

    kind: UiStateKind
    message: str | None = None
    result: LookupResult | None = None

    @classmethod
    def idle(cls) -> "UiState":
        return cls(UiStateKind.IDLE)

    @classmethod
    def loading(cls) -> "UiState":
        return cls(UiStateKind.LOADING)

    @classmethod
    def error(cls, message: str) -> "UiState":
        return cls(UiStateKind.ERROR, message=message)

    @classmethod
    def showing(cls, result: LookupResult) -> "UiState":
        return cls(UiStateKind.RESULT, result=result)

    @property
    def controls_enabled(self) -> bool:
        """Input and submit are usable in every state except LOADING."""
        return self.kind is not UiStateKind.LOADING


@dataclass(frozen=True)
class CollectibleView:
    """Display values for one inventory item."""

    name: str
    price_text: str
    catalog_url: str
    thumbnail_url: str
    has_serial: bool = False
    serial_text: str = ""


@dataclass(frozen=True)
class View:
    """
    Snapshot of every visible page region.

    The initial value is the startup screen: busy indicator shown and
    controls disabled until the exchange rate has been fetched.
    """

    controls_disabled: bool = True
    loading_visible: bool = True
    error_visible: bool = False
    error_text: str = ""
    result_visible: bool = False
    exchange_rate_text: str = ""
    avatar_url: str = ""
    avatar_alt: str = ""
    display_name: str = ""
    username_text: str = ""
    profile_url: str = ""
    robux_text: str = ""
    currency_text: str = ""
    items: tuple[CollectibleView, ...] = field(default_factory=tuple)
    items_placeholder: str = ""
