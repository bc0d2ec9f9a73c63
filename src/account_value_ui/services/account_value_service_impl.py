"""
HTTPS implementation of AccountValueService.

Talks to the public valuation API:

    GET /api/can-view-inventory?userid=<id>          -> true | false
    GET /api/collectibles-account-value?userid=<id>  -> {total_robux, in_euro, collectibles}
    GET /api/profile-info?userid=<id>                -> {username, displayname?, avatar}
    GET /api/exchange-rate                           -> {robux_per_euro}

Each call opens a short-lived httpx.AsyncClient, so the service holds no
connection state and can be shared across sessions and event loops.
Transport errors, non-2xx statuses and undecodable bodies are all
converted to RemoteServiceError. No retries are attempted.
"""

from typing import Any

import httpx

from account_value_ui import config
from account_value_ui.errors import RemoteServiceError
from account_value_ui.lib import logs
from account_value_ui.models.account import (
    AccountValue,
    ExchangeRate,
    Profile,
    parse_account_value,
    parse_exchange_rate,
    parse_profile,
    parse_visibility,
)
from account_value_ui.services.account_value_service import AccountValueService

LOG = logs.logger(__file__)

_CAN_VIEW_INVENTORY = "/api/can-view-inventory"
_ACCOUNT_VALUE = "/api/collectibles-account-value"
_PROFILE_INFO = "/api/profile-info"
_EXCHANGE_RATE = "/api/exchange-rate"


class AccountValueServiceImpl(AccountValueService):
    """
    Valuation service client over HTTPS.

    Attributes:
        base_url: Root URL of the valuation API.
        timeout: Per-request timeout in seconds, or None to wait forever.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: API root. Defaults to config.API_URL.
            timeout: Request timeout. Defaults to config.REQUEST_TIMEOUT.
            transport: Optional httpx transport, used to stub the network.
        """
        self.base_url = (base_url or config.API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self._transport = transport

    async def can_view_inventory(self, account_id: int) -> bool:
        response = await self._get(_CAN_VIEW_INVENTORY, {"userid": str(account_id)})
        return parse_visibility(_CAN_VIEW_INVENTORY, response.text)

    async def collectibles_account_value(self, account_id: int) -> AccountValue:
        response = await self._get(_ACCOUNT_VALUE, {"userid": str(account_id)})
        return parse_account_value(_ACCOUNT_VALUE, _json(_ACCOUNT_VALUE, response))

    async def profile_info(self, account_id: int) -> Profile:
        response = await self._get(_PROFILE_INFO, {"userid": str(account_id)})
        return parse_profile(_PROFILE_INFO, _json(_PROFILE_INFO, response))

    async def exchange_rate(self) -> ExchangeRate:
        response = await self._get(_EXCHANGE_RATE)
        return parse_exchange_rate(_EXCHANGE_RATE, _json(_EXCHANGE_RATE, response))

    async def _get(
        self, path: str, params: dict[str, str] | None = None
    ) -> httpx.Response:
        """Issue a GET request and return the response, raising on any failure."""
        LOG.debug("GET %s%s params:%s", self.base_url, path, params)
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(path, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise RemoteServiceError(path, f"HTTP {status}", status_code=status) from exc
        except httpx.HTTPError as exc:
            raise RemoteServiceError(path, f"request failed: {exc!r}") from exc
        return response


def _json(operation: str, response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise RemoteServiceError(
            operation, "response body is not valid JSON", response.status_code
        ) from exc
