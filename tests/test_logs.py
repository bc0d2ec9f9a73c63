"""Tests for the app logger factory."""

import logging

from account_value_ui.lib import logs


def test_module_loggers_are_children_of_the_app_logger():
    log = logs.logger("/somewhere/account_value_ui/workflow.py")

    assert log.name == "account_value_ui.workflow"
    assert not log.handlers


def test_app_logger_has_one_handler_and_does_not_propagate():
    logs.logger("first")
    logs.logger("second")
    app = logging.getLogger("account_value_ui")

    assert len(app.handlers) == 1
    assert app.propagate is False
