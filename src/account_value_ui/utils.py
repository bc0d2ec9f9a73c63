"""
Formatting helpers for account values and links.

Provides helpers for:
- Robux and euro amounts as shown on the page
- The exchange rate line
- Profile and catalog links
"""

PROFILE_URL = "https://www.roblox.com/users/{account_id}/profile"
CATALOG_URL = "https://www.roblox.com/catalog/{item_id}"


def format_robux(value: int) -> str:
    """Format the total Robux value line, e.g. 'Robux: 500'."""
    return f"Robux: {value}"


def format_euros(value: int) -> str:
    """Format the local currency line, e.g. 'Euros: 5€'."""
    return f"Euros: {value}€"


def format_price(price: int) -> str:
    """Format an item price, e.g. '120 robux'."""
    return f"{price} robux"


def format_serial(serial_number: int) -> str:
    """Format a serial badge, e.g. '#7'."""
    return f"#{serial_number}"


def format_exchange_rate(robux_per_euro: int | None) -> str:
    """
    Format the exchange rate line.

    Args:
        robux_per_euro: Current rate, or None when it could not be fetched.

    Returns:
        Text like '350 Robux per 1€', with 0 standing in for an unknown rate.
    """
    return f"{robux_per_euro or 0} Robux per 1€"


def profile_url(account_id: int) -> str:
    return PROFILE_URL.format(account_id=account_id)


def catalog_url(item_id: int) -> str:
    return CATALOG_URL.format(item_id=item_id)
