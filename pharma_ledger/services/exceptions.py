"""
Domain error types raised by the services.

Every error is a ValueError so callers that only care about
"bad input" can keep catching ValueError. The API layer maps
the subclasses to HTTP status codes.
"""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors."""


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class InvalidPeriodError(ValidationError):
    """A date or date range supplied by the caller cannot be used."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class ConflictError(DomainError):
    """Uniqueness or overlap violation."""


class UnbalancedEntryError(ValidationError):
    """Journal entry debits and credits do not agree."""

    def __init__(self, total_debits: Decimal, total_credits: Decimal):
        self.total_debits = total_debits
        self.total_credits = total_credits
        super().__init__(
            "Journal entry is not balanced. "
            "Total debits must equal total credits."
        )


def account_not_found(account_id: int) -> str:
    return f"Account {account_id} not found"


def journal_entry_not_found(entry_id: int) -> str:
    return f"Journal entry {entry_id} not found"


def period_not_found(period_id: int) -> str:
    return f"Accounting period {period_id} not found"
