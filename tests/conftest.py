"""Shared fixtures: a scriptable in-memory valuation service."""

import asyncio
from dataclasses import dataclass, field
from typing import Any

import pytest

from account_value_ui.errors import RemoteServiceError
from account_value_ui.models.account import (
    AccountValue,
    Collectible,
    ExchangeRate,
    Profile,
)
from account_value_ui.services.account_value_service import AccountValueService


@dataclass
class ScriptedService(AccountValueService):
    """
    Service whose answers are set per test.

    Any attribute holding an exception instance is raised instead of
    returned. Every call is recorded in `calls` as (operation, account_id).
    Setting `gate` makes can_view_inventory wait until the event is set.
    """

    visible: Any = True
    value: Any = field(
        default_factory=lambda: AccountValue(total_robux=500, in_euro=5)
    )
    profile: Any = field(
        default_factory=lambda: Profile(username="bob", avatar_url="u.png")
    )
    rate: Any = field(default_factory=lambda: ExchangeRate(robux_per_euro=350))
    gate: asyncio.Event | None = None
    calls: list = field(default_factory=list)

    async def can_view_inventory(self, account_id: int) -> bool:
        self.calls.append(("can_view_inventory", account_id))
        if self.gate is not None:
            await self.gate.wait()
        return _answer(self.visible)

    async def collectibles_account_value(self, account_id: int) -> AccountValue:
        self.calls.append(("collectibles_account_value", account_id))
        return _answer(self.value)

    async def profile_info(self, account_id: int) -> Profile:
        self.calls.append(("profile_info", account_id))
        return _answer(self.profile)

    async def exchange_rate(self) -> ExchangeRate:
        self.calls.append(("exchange_rate", None))
        return _answer(self.rate)

    @property
    def operations(self) -> list[str]:
        return [name for name, _ in self.calls]


def _answer(value: Any) -> Any:
    if isinstance(value, BaseException):
        raise value
    return value


@pytest.fixture
def service() -> ScriptedService:
    return ScriptedService()


@pytest.fixture
def remote_error() -> RemoteServiceError:
    return RemoteServiceError("test", "connection refused")


@pytest.fixture
def collectibles() -> tuple[Collectible, ...]:
    return (
        Collectible(
            name="Domino Crown",
            price=31000,
            id=1031429,
            thumbnail_url="crown.png",
            serial_number=7,
        ),
        Collectible(
            name="Sparkle Time Fedora",
            price=14990,
            id=1285307,
            thumbnail_url="fedora.png",
        ),
    )
