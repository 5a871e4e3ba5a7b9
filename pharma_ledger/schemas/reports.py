"""
Pydantic schemas for financial reports.

Amounts are computed as Decimal and exposed as JSON numbers.
No display formatting (currency symbols, thousands separators)
ever reaches these payloads.
"""

import datetime as dt

from pharma_ledger.models.enums import ClassificationMode, ProfitAndLossSource
from pharma_ledger.schemas.base import ApiModel


class ReportPeriod(ApiModel):
    """Inclusive window a report covers. A missing start means all time."""
    start_date: dt.date | None
    end_date: dt.date | None


# --- Trial Balance ---

class TrialBalanceRow(ApiModel):
    id: int
    code: str
    name: str
    type: str
    debit: float
    credit: float


class TrialBalanceResponse(ApiModel):
    period: ReportPeriod
    accounts: list[TrialBalanceRow]
    total_debits: float
    total_credits: float
    is_balanced: bool


# --- Profit & Loss / Balance Sheet ---

class StatementLine(ApiModel):
    code: str
    name: str
    amount: float


class StatementSection(ApiModel):
    accounts: list[StatementLine]
    total: float


class ProfitAndLossResponse(ApiModel):
    period: ReportPeriod
    source: ProfitAndLossSource
    revenue: StatementSection
    expenses: StatementSection
    total_revenue: float
    total_expenses: float
    net_income: float
    profit_margin: float


class BalanceSheetResponse(ApiModel):
    date: dt.date
    classify_by: ClassificationMode
    assets: StatementSection
    liabilities: StatementSection
    equity: StatementSection
    current_earnings: float
    total_assets: float
    total_liabilities: float
    total_equity: float
    is_balanced: bool


# --- Cash Flow ---

class CashFlowResponse(ApiModel):
    period: ReportPeriod
    operating_inflows: float
    operating_outflows: float
    net_operating_cash: float
    investing_activities: float
    financing_activities: float
    net_cash_flow: float
    beginning_cash: float
    ending_cash: float


# --- Aging ---

class AgingBucket(ApiModel):
    count: int
    amount: float


class AgingAnalysisResponse(ApiModel):
    as_of: dt.date
    current: AgingBucket
    thirty_days: AgingBucket
    sixty_days: AgingBucket
    ninety_days: AgingBucket
    total: AgingBucket


# --- Listings ---

class ChartOfAccountsRow(ApiModel):
    id: int
    code: str
    name: str
    type: str
    description: str
    is_active: bool
    balance: float


class ChartOfAccountsResponse(ApiModel):
    accounts: list[ChartOfAccountsRow]


class JournalEntriesReportRow(ApiModel):
    id: int
    entry_number: str
    date: dt.date
    description: str
    reference: str
    debit: float
    credit: float


class JournalEntriesReportResponse(ApiModel):
    period: ReportPeriod
    entries: list[JournalEntriesReportRow]


class GeneralLedgerAccount(ApiModel):
    id: int
    code: str
    name: str
    type: str


class GeneralLedgerRow(ApiModel):
    date: dt.date
    entry_number: str
    description: str
    reference: str
    debit: float
    credit: float
    balance: float


class GeneralLedgerResponse(ApiModel):
    account: GeneralLedgerAccount
    period: ReportPeriod
    opening_balance: float
    transactions: list[GeneralLedgerRow]
    closing_balance: float


class AccountSummaryRow(ApiModel):
    type: str
    count: int
    total_debit: float
    total_credit: float


class AccountSummaryResponse(ApiModel):
    summary: list[AccountSummaryRow]
