"""
Demo implementation of AccountValueService using static in-memory data.

This service is useful for:
- Local development without network access
- Exercising every page state (result, empty inventory, private account)
- Demonstrating the application offline

Known accounts:
- 1: public inventory with serialized and plain items
- 2: private inventory
- 3: public inventory with no items and no display name
Any other id fails the visibility check, the same way the real service
fails for accounts it cannot resolve.
"""

import asyncio
from typing import Mapping

from account_value_ui import config
from account_value_ui.errors import RemoteServiceError
from account_value_ui.models.account import (
    AccountValue,
    Collectible,
    ExchangeRate,
    Profile,
)
from account_value_ui.services.account_value_service import AccountValueService

_THUMBNAIL = "https://tr.rbxcdn.com/demo/{id}/150/150/Image/Png"

DEMO_VISIBILITY: Mapping[int, bool] = {1: True, 2: False, 3: True}

DEMO_VALUES: Mapping[int, AccountValue] = {
    1: AccountValue(
        total_robux=48210,
        in_euro=137,
        collectibles=(
            Collectible(
                name="Domino Crown",
                price=31000,
                id=1031429,
                thumbnail_url=_THUMBNAIL.format(id=1031429),
                serial_number=412,
            ),
            Collectible(
                name="Sparkle Time Fedora",
                price=14990,
                id=1285307,
                thumbnail_url=_THUMBNAIL.format(id=1285307),
            ),
            Collectible(
                name="Red Baseball Cap",
                price=2220,
                id=1028606,
                thumbnail_url=_THUMBNAIL.format(id=1028606),
                serial_number=7,
            ),
        ),
    ),
    3: AccountValue(total_robux=0, in_euro=0),
}

DEMO_PROFILES: Mapping[int, Profile] = {
    1: Profile(
        username="builderman",
        display_name="Builder Man",
        avatar_url="https://tr.rbxcdn.com/demo/avatar/1/420/420/Avatar/Png",
    ),
    2: Profile(
        username="private_player",
        avatar_url="https://tr.rbxcdn.com/demo/avatar/2/420/420/Avatar/Png",
    ),
    3: Profile(
        username="newcomer",
        avatar_url="https://tr.rbxcdn.com/demo/avatar/3/420/420/Avatar/Png",
    ),
}

DEMO_ROBUX_PER_EURO = 350


class DemoAccountValueService(AccountValueService):
    """
    In-memory valuation service backed by static demo accounts.

    Attributes:
        latency: Seconds to sleep before answering each call, so the
            loading state is visible in the browser.
    """

    def __init__(self, latency: float | None = None) -> None:
        self.latency = config.DEMO_LATENCY if latency is None else latency

    async def can_view_inventory(self, account_id: int) -> bool:
        await self._delay()
        try:
            return DEMO_VISIBILITY[account_id]
        except KeyError as exc:
            raise RemoteServiceError("can_view_inventory", "unknown account") from exc

    async def collectibles_account_value(self, account_id: int) -> AccountValue:
        await self._delay()
        try:
            return DEMO_VALUES[account_id]
        except KeyError as exc:
            raise RemoteServiceError(
                "collectibles_account_value", "unknown account"
            ) from exc

    async def profile_info(self, account_id: int) -> Profile:
        await self._delay()
        try:
            return DEMO_PROFILES[account_id]
        except KeyError as exc:
            raise RemoteServiceError("profile_info", "unknown account") from exc

    async def exchange_rate(self) -> ExchangeRate:
        await self._delay()
        return ExchangeRate(robux_per_euro=DEMO_ROBUX_PER_EURO)

    async def _delay(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)
