"""
Deployment configuration for the Account Value UI.

All values are read from the environment once, at import time. None of
them alter lookup semantics; they only select where and how the remote
valuation service is reached.
"""

import os

from account_value_ui.lib import logs

LOG = logs.logger(__file__)

_DEFAULT_API_URL = "https://roblox-account-value-api.sly.ee"

API_URL = os.getenv("ACCOUNT_VALUE_API_URL", _DEFAULT_API_URL).rstrip("/")
SERVICE_KIND = os.getenv("ACCOUNT_VALUE_SERVICE", "impl").lower()
APP_PORT = int(os.getenv("APP_PORT", "8000"))
DEMO_LATENCY = float(os.getenv("ACCOUNT_VALUE_DEMO_LATENCY", "0.4"))
MAX_SESSIONS = int(os.getenv("ACCOUNT_VALUE_MAX_SESSIONS", "1000"))

APP_TITLE = "Account Value"
APP_SUBTITLE = "Find out how much the collectibles in a public inventory are worth."


def _parse_timeout(raw: str | None) -> float | None:
    """Return the request timeout in seconds, or None for no timeout."""
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        LOG.warning("Ignoring invalid ACCOUNT_VALUE_TIMEOUT: %r", raw)
        return None
    return value if value > 0 else None


REQUEST_TIMEOUT = _parse_timeout(os.getenv("ACCOUNT_VALUE_TIMEOUT"))

LOG.info(
    "API_URL: %s SERVICE_KIND: %s REQUEST_TIMEOUT: %s",
    API_URL,
    SERVICE_KIND,
    REQUEST_TIMEOUT,
)
