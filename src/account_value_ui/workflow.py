"""
The account lookup pipeline.

A lookup is three remote calls in strict order:

1. visibility check, failing with InventoryNotPublic when the inventory is
   private or the check itself fails
2. valuation, failing with ValuationUnavailable
3. profile, failing with ProfileUnavailable

A later call never starts unless the earlier one succeeded. Callers get
either a complete LookupResult or exactly one LookupFailure; nothing in
between is exposed. The workflow has no view access and no internal
concurrency.
"""

from account_value_ui.errors import (
    InventoryNotPublic,
    ProfileUnavailable,
    RemoteServiceError,
    ValuationUnavailable,
)
from account_value_ui.lib import logs
from account_value_ui.models.account import LookupResult
from account_value_ui.services.account_value_service import AccountValueService

LOG = logs.logger(__file__)


class LookupWorkflow:
    """Runs one lookup against an AccountValueService."""

    def __init__(self, service: AccountValueService) -> None:
        self.service = service

    async def run(self, account_id: int) -> LookupResult:
        """
        Look up an account.

        Args:
            account_id: A validated account id.

        Returns:
            The aggregated LookupResult.

        Raises:
            InventoryNotPublic: Visibility check returned False or failed.
            ValuationUnavailable: The valuation call failed.
            ProfileUnavailable: The profile call failed.
        """
        LOG.info("Lookup started - account_id:%s", account_id)

        try:
            visible = await self.service.can_view_inventory(account_id)
        except RemoteServiceError as exc:
            LOG.warning("Visibility check failed for %s: %s", account_id, exc)
            raise InventoryNotPublic(exc) from exc
        if not visible:
            LOG.info("Inventory of %s is not public", account_id)
            raise InventoryNotPublic()

        try:
            value = await self.service.collectibles_account_value(account_id)
        except RemoteServiceError as exc:
            LOG.warning("Valuation failed for %s: %s", account_id, exc)
            raise ValuationUnavailable(exc) from exc

        try:
            profile = await self.service.profile_info(account_id)
        except RemoteServiceError as exc:
            LOG.warning("Profile fetch failed for %s: %s", account_id, exc)
            raise ProfileUnavailable(exc) from exc

        LOG.info(
            "Lookup complete - account_id:%s total_robux:%s items:%s",
            account_id,
            value.total_robux,
            len(value.collectibles),
        )
        return LookupResult(account_id=account_id, value=value, profile=profile)
