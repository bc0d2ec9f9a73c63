"""
Local library modules shared across the Account Value UI.

Modules:
    logs: Logger factory with consistent formatting
"""

from account_value_ui.lib import logs

__all__ = ["logs"]
