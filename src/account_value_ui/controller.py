"""
Session ownership and event handling for one page instance.

AppController owns the Session (input guard plus presenter) exclusively
and exposes the three things the page can do: start up, accept a field
edit, and submit. Submits while a lookup is in flight are ignored, so at
most one lookup runs per session and results can never interleave.

All work happens on a single event loop. The in-flight check and the
switch to Loading happen before the first await of a submit, so no two
submits can both pass the check.
"""

from dataclasses import dataclass, field
from typing import Awaitable, Callable

from account_value_ui.errors import (
    InvalidAccountId,
    LookupFailure,
    RemoteServiceError,
    UnexpectedLookupError,
)
from account_value_ui.guard import NumericInputGuard
from account_value_ui.lib import logs
from account_value_ui.models.account import parse_account_id
from account_value_ui.models.common import UiState, UiStateKind, View
from account_value_ui.presenter import UiPresenter
from account_value_ui.services.account_value_service import AccountValueService
from account_value_ui.workflow import LookupWorkflow

LOG = logs.logger(__file__)

ViewListener = Callable[[View], Awaitable[None]]


@dataclass
class Session:
    """Per-page mutable state: the current UI state and the input state."""

    guard: NumericInputGuard = field(default_factory=NumericInputGuard)
    presenter: UiPresenter = field(default_factory=UiPresenter)

    @property
    def ui_state(self) -> UiState:
        return self.presenter.state

    @property
    def view(self) -> View:
        return self.presenter.view


class AppController:
    """
    Wires page events to the input guard, the lookup workflow and the presenter.

    Attributes:
        session: The session this controller owns.
        service: Valuation service used for the exchange rate and lookups.
    """

    def __init__(self, service: AccountValueService) -> None:
        self.service = service
        self.session = Session()
        self._workflow = LookupWorkflow(service)

    @property
    def view(self) -> View:
        return self.session.view

    async def start(self, listener: ViewListener | None = None) -> View:
        """
        Fetch the exchange rate and make the page interactive.

        A failed fetch is not fatal: the page shows a zero rate instead.
        """
        try:
            rate = (await self.service.exchange_rate()).robux_per_euro
        except RemoteServiceError as exc:
            LOG.warning("Exchange rate unavailable, showing 0: %s", exc)
            rate = None
        except Exception:
            LOG.error("Unexpected error fetching exchange rate", exc_info=True)
            rate = None
        view = self.session.presenter.ready(rate)
        await _notify(listener, view)
        return view

    def handle_input(self, raw_text: str) -> str:
        """Filter a field edit and return the text the field must show."""
        return self.session.guard.apply(raw_text)

    async def submit(self, text: str, listener: ViewListener | None = None) -> bool:
        """
        Handle the submit action.

        Args:
            text: Current content of the account id field.
            listener: Awaited with the new View after every transition.

        Returns:
            False if the submit was ignored because a lookup is in flight,
            True otherwise.
        """
        presenter = self.session.presenter
        if presenter.state.kind is UiStateKind.LOADING:
            LOG.info("Submit ignored, lookup already in flight")
            return False

        try:
            account_id = parse_account_id(text)
        except InvalidAccountId as exc:
            LOG.info("Submit rejected: %s", exc)
            await _notify(listener, presenter.reject_input())
            return True

        view = presenter.begin_lookup()
        try:
            await _notify(listener, view)
            view = await self._run_lookup(account_id)
        finally:
            # Cancellation or a failed push must not leave the controls locked
            if presenter.state.kind is UiStateKind.LOADING:
                LOG.warning("Lookup for %s interrupted, unlocking", account_id)
                presenter.fail(UnexpectedLookupError())

        await _notify(listener, view)
        return True

    async def _run_lookup(self, account_id: int) -> View:
        """Run the workflow and move the presenter out of Loading."""
        presenter = self.session.presenter
        try:
            result = await self._workflow.run(account_id)
        except LookupFailure as failure:
            return presenter.fail(failure)
        except Exception as exc:
            LOG.error("Lookup for %s failed unexpectedly", account_id, exc_info=True)
            return presenter.fail(UnexpectedLookupError(exc))
        return presenter.succeed(result)


async def _notify(listener: ViewListener | None, view: View) -> None:
    if listener is not None:
        await listener(view)
