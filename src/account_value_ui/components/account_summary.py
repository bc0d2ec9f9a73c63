"""
Account result component for the Account Value UI.

Displays the profile, the value lines and the inventory of a completed
lookup. Hidden in every state but Result.
"""

import reflex as rx

from account_value_ui.components.collectible_card import collectible_card
from account_value_ui.state import AccountValueState


def account_summary() -> rx.Component:
    """
    Build the result region.

    Returns:
        The account result component.
    """
    return rx.cond(
        AccountValueState.result_visible,
        rx.box(
            _profile(),
            _values(),
            _inventory(),
            id="account-info",
            class_name="card account-card",
        ),
    )


def _profile() -> rx.Component:
    """Build the avatar and name block linking to the profile."""
    return rx.link(
        rx.image(
            src=AccountValueState.avatar_url,
            alt=AccountValueState.avatar_alt,
            class_name="avatar no-select",
        ),
        rx.box(
            rx.text(AccountValueState.display_name, class_name="displayname"),
            rx.text(AccountValueState.username_text, class_name="username muted"),
            class_name="names",
        ),
        href=AccountValueState.profile_url,
        is_external=True,
        class_name="username-holder",
    )


def _values() -> rx.Component:
    return rx.box(
        rx.box(AccountValueState.robux_text, class_name="robux-value"),
        rx.box(AccountValueState.currency_text, class_name="robux-value-in-euro"),
        class_name="values",
    )


def _inventory() -> rx.Component:
    """Build the item list, or the placeholder when there are no items."""
    return rx.box(
        rx.cond(
            AccountValueState.items_placeholder != "",
            rx.text(AccountValueState.items_placeholder, class_name="muted empty-items"),
            rx.foreach(AccountValueState.items, collectible_card),
        ),
        id="inventory",
        class_name="inventory",
    )
