"""
Reflex state management for the Account Value UI.

This module binds browser events to an AppController and mirrors the
controller's View into reactive vars. Each browser session gets its own
controller, keyed by the Reflex client token and replaced on every page
load, so nothing carries over a reload.
"""

import reflex as rx

from account_value_ui.controller import AppController, ViewListener
from account_value_ui.guard import NumericInputGuard
from account_value_ui.lib import logs
from account_value_ui.models.common import View
from account_value_ui.models.reflex_models import CollectibleModel, to_collectible_model
from account_value_ui.services import get_account_value_service
from account_value_ui.sessions import SessionRegistry

LOG = logs.logger(__file__)

ACCOUNT_ID_INPUT = "account_id_input"

# Process-local; one entry per browser session
SESSIONS = SessionRegistry()


def view_pusher(state, token: str, controller: AppController) -> ViewListener:
    """
    Build a callback that copies Views into a background-task state proxy.

    Updates from a controller that has since been replaced or evicted are
    dropped, so a stale lookup can never overwrite a newer session.
    """

    async def push(view: View) -> None:
        if not SESSIONS.is_current(token, controller):
            LOG.info("Dropping update from a replaced session - token:%s", token)
            return
        async with state:
            state._apply(view)

    return push


class AccountValueState(rx.State):
    """
    Main application state for the Account Value UI.

    Field content lives here; everything else is a copy of the
    controller's View.
    """

    account_id: str = ""

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
    items: list[CollectibleModel] = []
    items_placeholder: str = ""

    @rx.event(background=True)
    async def start(self):
        """
        Event handler for page load.

        Starts a fresh session, fetches the exchange rate and unlocks the
        controls.
        """
        async with self:
            token = self.router.session.client_token
            controller = SESSIONS.replace(
                token, AppController(get_account_value_service())
            )
            self.account_id = ""
            self._apply(controller.view)
        LOG.info("Session started - token:%s", token)
        await controller.start(view_pusher(self, token, controller))

    @rx.event
    def edit_account_id(self, value: str):
        """
        Event handler for field edits; keeps the field digits-only.

        The debounced input only resets its text when the bound value
        changes, and a revert restores the value already held, so the
        reverted text is also written into the field directly.
        """
        token = self.router.session.client_token
        controller = SESSIONS.get(token)
        if controller is not None:
            shown = controller.handle_input(value)
        else:
            # Evicted session; the field still holds the last accepted text
            guard = NumericInputGuard()
            guard.apply(self.account_id)
            shown = guard.apply(value)
        self.account_id = shown
        if shown != value:
            return rx.set_value(ACCOUNT_ID_INPUT, shown)

    @rx.event
    def handle_key_down(self, key: str):
        """Submit on Enter."""
        if key == "Enter":
            return AccountValueState.submit

    @rx.event(background=True)
    async def submit(self):
        """
        Event handler for the submit action.

        Runs the lookup in the background and pushes every intermediate
        View, so the busy indicator shows while the remote calls run.
        """
        async with self:
            token = self.router.session.client_token
            controller = SESSIONS.get(token)
            text = self.account_id
        pusher = None
        if controller is None:
            # Evicted while idle; the new session starts before looking up
            controller = SESSIONS.replace(
                token, AppController(get_account_value_service())
            )
            pusher = view_pusher(self, token, controller)
            await controller.start(pusher)
        await controller.submit(text, pusher or view_pusher(self, token, controller))

    def _apply(self, view: View) -> None:
        """Copy a View into the reactive vars."""
        self.controls_disabled = view.controls_disabled
        self.loading_visible = view.loading_visible
        self.error_visible = view.error_visible
        self.error_text = view.error_text
        self.result_visible = view.result_visible
        self.exchange_rate_text = view.exchange_rate_text
        self.avatar_url = view.avatar_url
        self.avatar_alt = view.avatar_alt
        self.display_name = view.display_name
        self.username_text = view.username_text
        self.profile_url = view.profile_url
        self.robux_text = view.robux_text
        self.currency_text = view.currency_text
        self.items = [to_collectible_model(item) for item in view.items]
        self.items_placeholder = view.items_placeholder
