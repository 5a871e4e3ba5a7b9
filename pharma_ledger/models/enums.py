"""
Shared enumerations for database models and services.
"""

import enum


class AccountType(str, enum.Enum):
    """The five fundamental accounting categories."""
    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"
    INCOME = "Income"
    EXPENSE = "Expense"

    @property
    def is_debit_normal(self) -> bool:
        """Assets and expenses grow with debits; the rest with credits."""
        return self in (AccountType.ASSET, AccountType.EXPENSE)


class ClassificationMode(str, enum.Enum):
    """How accounts are sorted into the five buckets."""
    TYPE = "type"
    CODE_RANGE = "code"


class JournalStatus(str, enum.Enum):
    DRAFT = "draft"
    POSTED = "posted"


class PaymentStatus(str, enum.Enum):
    UNPAID = "unpaid"
    PARTIAL = "partial"
    PAID = "paid"


class PeriodStatus(str, enum.Enum):
    OPEN = "open"
    CLOSED = "closed"


class ProfitAndLossSource(str, enum.Enum):
    """Where the profit and loss statement reads its figures from."""
    LEDGER = "ledger"
    TRANSACTIONS = "transactions"
