"""
Digits-only filtering for the account id field.

The guard sees the field's text after every user edit and decides what
the field must show afterwards. Accepted edits pass through untouched;
rejected edits snap the field back to the last fully valid text rather
than stripping the offending characters.
"""

from account_value_ui.errors import InvalidAccountId
from account_value_ui.lib import logs
from account_value_ui.models.account import parse_account_id

LOG = logs.logger(__file__)


class NumericInputGuard:
    """
    Keeps a text field restricted to a valid account id.

    Attributes:
        last_valid_text: Last accepted digits-only text, or None when the
            field is empty. Never holds anything but digits.
    """

    def __init__(self) -> None:
        self.last_valid_text: str | None = None

    def apply(self, raw_text: str) -> str:
        """
        Filter an edit and return the text the field must display.

        An empty field is always accepted and clears the remembered value.
        Text that parses as an account id is accepted and remembered.
        Anything else is rejected and the remembered value, or an empty
        string, is returned instead.

        Args:
            raw_text: Field content after an uncontrolled edit.

        Returns:
            The text the field should show. Equal to raw_text unless the
            edit was rejected.
        """
        if not raw_text:
            self.last_valid_text = None
            return ""

        try:
            parse_account_id(raw_text)
        except InvalidAccountId:
            LOG.debug("Rejected edit %r, reverting to %r", raw_text, self.last_valid_text)
            return self.last_valid_text or ""

        self.last_valid_text = raw_text
        return raw_text
