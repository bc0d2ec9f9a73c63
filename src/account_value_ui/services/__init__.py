"""
Valuation service selection.

The page talks to the valuation API through whichever AccountValueService
ACCOUNT_VALUE_SERVICE names: "impl" for the public HTTPS API, "demo" for
the offline accounts. One instance per kind is shared by every browser
session; both implementations are stateless between calls.
"""

from functools import cache
from typing import Callable, Dict

from account_value_ui import config
from account_value_ui.lib import logs
from account_value_ui.services.account_value_service import AccountValueService
from account_value_ui.services.account_value_service_demo import (
    DemoAccountValueService,
)
from account_value_ui.services.account_value_service_impl import (
    AccountValueServiceImpl,
)

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[], AccountValueService]] = {
    "demo": DemoAccountValueService,
    "impl": AccountValueServiceImpl,
}


@cache
def get_account_value_service(kind: str | None = None) -> AccountValueService:
    """
    Return the shared valuation service for a kind.

    Args:
        kind: "impl" or "demo"; defaults to config.SERVICE_KIND.

    Raises:
        ValueError: If the kind is not registered.
    """
    resolved_kind = (kind or config.SERVICE_KIND).lower()
    if resolved_kind not in _SERVICE_REGISTRY:
        raise ValueError(
            f"Unknown account value service kind: {resolved_kind} "
            f"(expected one of {', '.join(sorted(_SERVICE_REGISTRY))})"
        )
    service = _SERVICE_REGISTRY[resolved_kind]()
    if resolved_kind == "impl":
        LOG.info("Valuation service: %s (timeout %s)", config.API_URL, config.REQUEST_TIMEOUT)
    else:
        LOG.info("Valuation service: offline demo accounts")
    return service


__all__ = [
    "AccountValueService",
    "AccountValueServiceImpl",
    "DemoAccountValueService",
    "get_account_value_service",
]
