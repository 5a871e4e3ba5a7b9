"""
Financial report API endpoints.

Every report reads the same query conventions: ISO-8601
`startDate`/`endDate` (year to date when omitted) or a single
`date` for point-in-time reports. A malformed date is a 400,
never an empty report.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pharma_ledger.logger import get_logger
from pharma_ledger.models.base import get_db
from pharma_ledger.models.enums import ClassificationMode, ProfitAndLossSource
from pharma_ledger.services.aggregator import (
    resolve_as_of,
    resolve_optional_period,
    resolve_period,
)
from pharma_ledger.services.exceptions import NotFoundError
from pharma_ledger.services.report_service import ReportService
from pharma_ledger.schemas.reports import (
    AccountSummaryResponse,
    AgingAnalysisResponse,
    BalanceSheetResponse,
    CashFlowResponse,
    ChartOfAccountsResponse,
    GeneralLedgerResponse,
    JournalEntriesReportResponse,
    ProfitAndLossResponse,
    TrialBalanceResponse,
)

router = APIRouter(prefix="/api/reports", tags=["Reports"])
logger = get_logger(__name__)


def _generate(report: str, build):
    """
    Run a report builder and translate its failures.

    Bad input becomes 400, a missing account 404. Database
    failures are logged with the report name and surface as a
    generic 500.
    """
    try:
        return build()
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SQLAlchemyError:
        logger.exception("report generation failed", report=report)
        raise HTTPException(
            status_code=500, detail=f"Failed to generate {report}"
        )


@router.get("/pnl", response_model=ProfitAndLossResponse)
def profit_and_loss(
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    source: ProfitAndLossSource = Query(default=ProfitAndLossSource.LEDGER),
    db: Session = Depends(get_db),
):
    """
    Profit and loss for the window.

    `source=ledger` (default) reads income and expense accounts;
    `source=transactions` reads sales invoices and expense records.
    """
    service = ReportService(db)
    return _generate(
        "profit and loss",
        lambda: service.profit_and_loss(resolve_period(start_date, end_date), source),
    )


@router.get("/balance-sheet", response_model=BalanceSheetResponse)
def balance_sheet(
    as_of: str | None = Query(default=None, alias="date"),
    classify_by: ClassificationMode = Query(
        default=ClassificationMode.CODE_RANGE, alias="classifyBy"
    ),
    db: Session = Depends(get_db),
):
    """Balances of every posting on or before `date` (today when omitted)."""
    service = ReportService(db)
    return _generate(
        "balance sheet",
        lambda: service.balance_sheet(resolve_as_of(as_of), classify_by),
    )


@router.get("/trial-balance", response_model=TrialBalanceResponse)
def trial_balance(
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    account_filter: str | None = Query(default=None, alias="accountFilter"),
    db: Session = Depends(get_db),
):
    service = ReportService(db)
    return _generate(
        "trial balance",
        lambda: service.trial_balance(
            resolve_period(start_date, end_date), account_filter
        ),
    )


@router.get("/cash-flow", response_model=CashFlowResponse)
def cash_flow(
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    db: Session = Depends(get_db),
):
    service = ReportService(db)
    return _generate(
        "cash flow",
        lambda: service.cash_flow(resolve_period(start_date, end_date)),
    )


@router.get("/aging-analysis", response_model=AgingAnalysisResponse)
def aging_analysis(
    as_of: str | None = Query(default=None, alias="asOf"),
    db: Session = Depends(get_db),
):
    """Outstanding receivables bucketed by invoice age."""
    service = ReportService(db)
    return _generate(
        "aging analysis",
        lambda: service.aging_analysis(resolve_as_of(as_of)),
    )


@router.get("/chart-of-accounts", response_model=ChartOfAccountsResponse)
def chart_of_accounts(db: Session = Depends(get_db)):
    service = ReportService(db)
    return _generate("chart of accounts", service.chart_of_accounts)


@router.get("/journal-entries", response_model=JournalEntriesReportResponse)
def journal_entries(
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    db: Session = Depends(get_db),
):
    service = ReportService(db)
    return _generate(
        "journal entries report",
        lambda: service.journal_entries_report(
            resolve_optional_period(start_date, end_date)
        ),
    )


@router.get("/general-ledger", response_model=GeneralLedgerResponse)
def general_ledger(
    account_id: int | None = Query(default=None, alias="accountId"),
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    db: Session = Depends(get_db),
):
    """Posted lines for one account with a running balance."""
    if account_id is None:
        raise HTTPException(status_code=400, detail="accountId is required")
    service = ReportService(db)
    return _generate(
        "general ledger",
        lambda: service.general_ledger(
            account_id, resolve_optional_period(start_date, end_date)
        ),
    )


@router.get("/account-summary", response_model=AccountSummaryResponse)
def account_summary(db: Session = Depends(get_db)):
    service = ReportService(db)
    return _generate("account summary", service.account_summary)
