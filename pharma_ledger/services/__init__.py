"""Business logic services."""

from pharma_ledger.services.account_service import AccountService
from pharma_ledger.services.journal_service import JournalService
from pharma_ledger.services.period_service import PeriodService
from pharma_ledger.services.report_service import ReportService

__all__ = ["AccountService", "JournalService", "PeriodService", "ReportService"]
