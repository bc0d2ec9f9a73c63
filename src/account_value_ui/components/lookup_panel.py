"""
Lookup panel component for the Account Value UI.

Provides the account id field, the submit button, the busy indicator and
the error text.
"""

import reflex as rx

from account_value_ui.state import ACCOUNT_ID_INPUT, AccountValueState


def lookup_panel() -> rx.Component:
    """
    Build the lookup panel.

    Returns:
        The lookup panel component.
    """
    return rx.box(
        rx.box(
            rx.icon("hash", class_name="input-icon"),
            rx.input(
                id=ACCOUNT_ID_INPUT,
                placeholder="Account id, e.g. 1",
                value=AccountValueState.account_id,
                on_change=AccountValueState.edit_account_id,
                on_key_down=AccountValueState.handle_key_down,
                disabled=AccountValueState.controls_disabled,
                class_name="account-input",
            ),
            rx.button(
                rx.icon("search", size=18),
                "Find account value",
                id="find_account_value_button",
                on_click=AccountValueState.submit,
                disabled=AccountValueState.controls_disabled,
                class_name="submit-button",
            ),
            class_name="input-with-icon",
        ),
        rx.text(AccountValueState.exchange_rate_text, class_name="muted exchange-rate"),
        rx.cond(
            AccountValueState.loading_visible,
            rx.box(rx.box(class_name="loading-bar-fill"), class_name="loading-bar"),
        ),
        rx.cond(
            AccountValueState.error_visible,
            rx.box(AccountValueState.error_text, class_name="error-text"),
        ),
        class_name="card lookup-card",
    )
