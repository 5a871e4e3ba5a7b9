"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from pharma_ledger.models.base import Base
from pharma_ledger.models.enums import (
    AccountType,
    ClassificationMode,
    JournalStatus,
    PaymentStatus,
    PeriodStatus,
    ProfitAndLossSource,
)
from pharma_ledger.models.account import Account
from pharma_ledger.models.journal_entry import JournalEntry, JournalLine
from pharma_ledger.models.sale import Sale
from pharma_ledger.models.expense import Expense
from pharma_ledger.models.accounting_period import AccountingPeriod

__all__ = [
    "Base",
    "AccountType",
    "ClassificationMode",
    "JournalStatus",
    "PaymentStatus",
    "PeriodStatus",
    "ProfitAndLossSource",
    "Account",
    "JournalEntry",
    "JournalLine",
    "Sale",
    "Expense",
    "AccountingPeriod",
]
