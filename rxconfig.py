"""Reflex configuration for the Account Value UI application."""

import reflex as rx

config = rx.Config(
    app_name="account_value_ui",
    # Use the src directory structure
    app_module_import="account_value_ui.app",
)
