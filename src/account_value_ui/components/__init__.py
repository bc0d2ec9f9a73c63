"""
Reflex UI components for the Account Value application.

- lookup_panel: Account id field, submit button, busy indicator, error text
- account_summary: Profile, value lines and inventory of a completed lookup
- collectible_card: A single inventory item

All components are pure functions that return Reflex components.
"""

from account_value_ui.components.account_summary import account_summary
from account_value_ui.components.collectible_card import collectible_card
from account_value_ui.components.lookup_panel import lookup_panel

__all__ = ["account_summary", "collectible_card", "lookup_panel"]
