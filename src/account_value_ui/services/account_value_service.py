"""
Abstract base class defining the valuation service contract.

Every operation is a read-only, idempotent call against the remote
valuation service. Implementations raise RemoteServiceError for any
failure, including malformed responses; no other exception type is part
of the contract.

Implementations:
- AccountValueServiceImpl: HTTPS client for the public valuation API
- DemoAccountValueService: Static in-memory accounts for development
"""

from abc import ABC, abstractmethod

from account_value_ui.models.account import AccountValue, ExchangeRate, Profile


class AccountValueService(ABC):
    """Abstract base class for valuation service access."""

    @abstractmethod
    async def can_view_inventory(self, account_id: int) -> bool:
        """
        Return whether the account's inventory is publicly visible.

        Args:
            account_id: Account to check.
        """

    @abstractmethod
    async def collectibles_account_value(self, account_id: int) -> AccountValue:
        """
        Return the value of the account's collectibles and the item list.

        Args:
            account_id: Account to value.
        """

    @abstractmethod
    async def profile_info(self, account_id: int) -> Profile:
        """
        Return the account's public profile.

        Args:
            account_id: Account to describe.
        """

    @abstractmethod
    async def exchange_rate(self) -> ExchangeRate:
        """Return the current Robux per euro rate."""
