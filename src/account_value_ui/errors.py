"""
Error taxonomy for the account lookup.

Two layers of errors exist:

- RemoteServiceError is raised by AccountValueService implementations for
  anything that goes wrong talking to the valuation service: transport
  failures, non-2xx responses, undecodable or malformed payloads.
- LookupFailure subclasses are the user-visible classifications produced
  by the lookup workflow. Each carries the message the UI displays.
"""


class RemoteServiceError(Exception):
    """Raised when a call to the valuation service fails."""

    def __init__(
        self,
        operation: str,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self.operation = operation
        self.message = message
        self.status_code = status_code
        super().__init__(f"{operation}: {message}")


class InvalidAccountId(ValueError):
    """Raised when text cannot be used as an account id."""


class LookupFailure(Exception):
    """Base class for classified lookup failures."""

    message = "Could not complete the lookup"

    def __init__(self, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(self.message)


class InvalidIdentifier(LookupFailure):
    message = "Please insert a valid account id"


class InventoryNotPublic(LookupFailure):
    """Visibility check returned false or could not be completed."""

    message = "Please make sure the account has inventory set as public"


class ValuationUnavailable(LookupFailure):
    message = "Could not retrieve account value"


class ProfileUnavailable(LookupFailure):
    message = "Error getting profile info"


class UnexpectedLookupError(LookupFailure):
    """Anything escaping the workflow that is not a known classification."""

    message = "Something went wrong, please try again"


class IllegalTransition(RuntimeError):
    """Raised when the presenter is asked for an undefined state change."""
