"""
Logging for the Account Value UI.

All module loggers are children of a single "account_value_ui" logger.
Only that parent carries a handler, so the level set through LOG_LEVEL
applies to the whole app and records from the lookup workflow, the
remote client and the Reflex state come out in one format, each tagged
with the module it came from.
"""

import logging
import os
from pathlib import Path

_APP_LOGGER = "account_value_ui"


def _app_logger() -> logging.Logger:
    log = logging.getLogger(_APP_LOGGER)
    if not log.handlers:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        log.setLevel(getattr(logging, level, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        log.addHandler(handler)
        # Reflex configures the root logger too; avoid printing twice
        log.propagate = False
    return log


def logger(name: str) -> logging.Logger:
    """
    Return the logger for an app module.

    Args:
        name: __file__ of the calling module, or a plain name.

    Returns:
        A child of the app logger, e.g. "account_value_ui.workflow".
    """
    if "/" in name or "\\" in name:
        name = Path(name).stem
    return _app_logger().getChild(name)
