"""
Reflex application entry point for the Account Value UI.

This module initializes the Reflex app and defines the single page.
"""

import reflex as rx

from account_value_ui import config
from account_value_ui.components.account_summary import account_summary
from account_value_ui.components.lookup_panel import lookup_panel
from account_value_ui.lib import logs
from account_value_ui.state import AccountValueState

LOG = logs.logger(__file__)

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap"


def page_header() -> rx.Component:
    """Build the hero text area at the top of the page."""
    return rx.box(
        rx.heading(config.APP_TITLE, size="6", as_="h1"),
        rx.text(config.APP_SUBTITLE, class_name="muted"),
        class_name="page-header",
    )


def index() -> rx.Component:
    """
    Build the main page layout.

    Returns:
        The complete page component with header, lookup panel and result.
    """
    return rx.box(
        rx.box(
            page_header(),
            lookup_panel(),
            account_summary(),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

app.add_page(
    index,
    title=config.APP_TITLE,
    on_load=AccountValueState.start,
)


def main() -> None:
    """Entrypoint for the `account-value-ui` script."""
    # In production, use `reflex run` directly
    import subprocess
    import sys

    LOG.info("Starting reflex on port %s", config.APP_PORT)
    subprocess.run(
        [sys.executable, "-m", "reflex", "run", "--frontend-port", str(config.APP_PORT)]
    )


if __name__ == "__main__":
    main()
