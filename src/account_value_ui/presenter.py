"""
Page state machine and its projection onto the visible regions.

States and transitions:

    (startup) --ready--------------> Idle
    Idle/Error/Result --begin_lookup--> Loading
    Idle/Error/Result --reject_input--> Error(invalid id)
    Loading --succeed--> Result
    Loading --fail-----> Error(message)

The presenter starts in Loading so the controls stay disabled until the
startup exchange-rate fetch has finished. Every transition rebuilds the
View; rendering never triggers a transition.
"""

from dataclasses import replace
from typing import Collection, Sequence

from account_value_ui import utils
from account_value_ui.errors import IllegalTransition, InvalidIdentifier, LookupFailure
from account_value_ui.lib import logs
from account_value_ui.models.account import Collectible, LookupResult
from account_value_ui.models.common import (
    CollectibleView,
    UiState,
    UiStateKind,
    View,
)

LOG = logs.logger(__file__)

NO_ITEMS_TEXT = "No items found :("

_INTERACTIVE = frozenset({UiStateKind.IDLE, UiStateKind.ERROR, UiStateKind.RESULT})


class UiPresenter:
    """
    Finite-state view controller for the lookup page.

    Attributes:
        state: The current UiState.
        view: Snapshot of every visible region for the current state.
    """

    def __init__(self) -> None:
        self.state = UiState.loading()
        self.view = View()
        self._started = False

    def ready(self, robux_per_euro: int | None) -> View:
        """
        Leave the startup screen once the exchange rate fetch has finished.

        Args:
            robux_per_euro: The fetched rate, or None if the fetch failed.
        """
        if self._started:
            raise IllegalTransition("presenter already started")
        self._started = True
        self.state = UiState.idle()
        self.view = replace(
            self.view,
            controls_disabled=False,
            loading_visible=False,
            exchange_rate_text=utils.format_exchange_rate(robux_per_euro),
        )
        return self.view

    def begin_lookup(self) -> View:
        """Lock the controls and hide previous output while a lookup runs."""
        self._require(_INTERACTIVE, "begin_lookup")
        self.state = UiState.loading()
        self.view = replace(
            self.view,
            controls_disabled=True,
            loading_visible=True,
            error_visible=False,
            error_text="",
            result_visible=False,
        )
        return self.view

    def reject_input(self) -> View:
        """Show the invalid id message without touching the network."""
        self._require(_INTERACTIVE, "reject_input")
        return self._show_error(InvalidIdentifier.message)

    def succeed(self, result: LookupResult) -> View:
        """Display a completed lookup."""
        self._require({UiStateKind.LOADING}, "succeed")
        profile = result.profile
        items = render_items(result.items)
        self.state = UiState.showing(result)
        self.view = replace(
            self.view,
            controls_disabled=False,
            loading_visible=False,
            error_visible=False,
            error_text="",
            result_visible=True,
            avatar_url=profile.avatar_url,
            avatar_alt=f"{profile.username}'s avatar",
            display_name=profile.shown_name,
            username_text=f"@{profile.username}",
            profile_url=utils.profile_url(result.account_id),
            robux_text=utils.format_robux(result.total_value),
            currency_text=utils.format_euros(result.value_in_local_currency),
            items=items,
            items_placeholder="" if items else NO_ITEMS_TEXT,
        )
        return self.view

    def fail(self, failure: LookupFailure) -> View:
        """Display a classified lookup failure."""
        self._require({UiStateKind.LOADING}, "fail")
        return self._show_error(failure.message)

    def _show_error(self, message: str) -> View:
        self.state = UiState.error(message)
        self.view = replace(
            self.view,
            controls_disabled=False,
            loading_visible=False,
            error_visible=True,
            error_text=message,
            result_visible=False,
        )
        return self.view

    def _require(self, allowed: Collection[UiStateKind], name: str) -> None:
        if not self._started or self.state.kind not in allowed:
            LOG.error("Illegal transition %s from %s", name, self.state.kind.value)
            raise IllegalTransition(f"{name} not allowed from {self.state.kind.value}")


def render_items(items: Sequence[Collectible]) -> tuple[CollectibleView, ...]:
    """
    Build display rows for inventory items, keeping the received order.

    A serial badge is rendered only for items that carry a serial number.
    """
    return tuple(
        CollectibleView(
            name=item.name,
            price_text=utils.format_price(item.price),
            catalog_url=utils.catalog_url(item.id),
            thumbnail_url=item.thumbnail_url,
            has_serial=item.is_serialized,
            serial_text=(
                utils.format_serial(item.serial_number) if item.is_serialized else ""
            ),
        )
        for item in items
    )
