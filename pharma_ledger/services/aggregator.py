"""
Period aggregator.

Turns caller-supplied dates into a validated reporting window
and sums journal lines inside it. Sums are done by the database
in a single SUM ... GROUP BY query, never by loading lines into
Python.

Window rules, applied the same way by every report:
- both dates missing: calendar year to date
- only a start: start through today
- only an end: January 1st of that year through the end
- start after end, or a date that is not ISO-8601: rejected

Balance-sheet style snapshots take a single as-of date instead
and include every posting on or before it.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from dateutil.parser import isoparse
from sqlalchemy import select, func
from sqlalchemy.orm import Session

from pharma_ledger.models.enums import AccountType, JournalStatus
from pharma_ledger.models.journal_entry import JournalEntry, JournalLine
from pharma_ledger.services.exceptions import InvalidPeriodError

ZERO = Decimal("0")


def to_decimal(value) -> Decimal:
    """Convert a database or JSON number to Decimal without float noise."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Period:
    """Inclusive date window. start=None means from the beginning."""
    start: date | None
    end: date | None


@dataclass
class AccountTotals:
    debit: Decimal = ZERO
    credit: Decimal = ZERO

    def balance_for(self, account_type: AccountType | None) -> Decimal:
        """
        Balance signed the way the account normally carries it.

        Asset and expense accounts: debits - credits.
        Liability, equity and income accounts: credits - debits.
        """
        if account_type is None or account_type.is_debit_normal:
            return self.debit - self.credit
        return self.credit - self.debit

    def __add__(self, other: "AccountTotals") -> "AccountTotals":
        return AccountTotals(self.debit + other.debit, self.credit + other.credit)


# --- Boundary parsing ---

def parse_date(raw: str, field: str = "date") -> date:
    """
    Parse an ISO-8601 date or datetime string.

    Raises InvalidPeriodError instead of letting a bad value
    silently turn into an empty report.
    """
    try:
        return isoparse(raw.strip()).date()
    except (ValueError, OverflowError):
        raise InvalidPeriodError(
            f"Invalid {field}: '{raw}' is not an ISO-8601 date"
        ) from None


def resolve_period(
    start_raw: str | None,
    end_raw: str | None,
    *,
    today: date | None = None,
) -> Period:
    """Build a bounded reporting window from optional query values."""
    today = today or date.today()
    start = parse_date(start_raw, "startDate") if start_raw else None
    end = parse_date(end_raw, "endDate") if end_raw else None

    if end is None:
        end = today
    if start is None:
        start = end.replace(month=1, day=1)

    if start > end:
        raise InvalidPeriodError(
            f"startDate {start.isoformat()} is after endDate {end.isoformat()}"
        )
    return Period(start=start, end=end)


def resolve_optional_period(
    start_raw: str | None,
    end_raw: str | None,
    *,
    today: date | None = None,
) -> Period:
    """Like resolve_period, but no dates at all means no window."""
    if not start_raw and not end_raw:
        return Period(start=None, end=None)
    return resolve_period(start_raw, end_raw, today=today)


def resolve_as_of(raw: str | None, *, today: date | None = None) -> date:
    if not raw:
        return today or date.today()
    return parse_date(raw, "date")


def month_to_date(today: date | None = None) -> Period:
    today = today or date.today()
    return Period(start=today.replace(day=1), end=today)


# --- Aggregation ---

def apply_window(stmt, date_column, period: Period | None):
    """Restrict a select to rows whose date_column lies in the window."""
    if period is None:
        return stmt
    if period.start is not None:
        stmt = stmt.where(date_column >= period.start)
    if period.end is not None:
        stmt = stmt.where(date_column <= period.end)
    return stmt


class PeriodAggregator:
    """
    Sums posted journal lines per account.

    Only entries with status POSTED count. Drafts are stored but
    never reported.
    """

    def __init__(self, db: Session):
        self.db = db

    def _restrict(self, stmt, period: Period | None, as_of: date | None):
        stmt = stmt.where(JournalEntry.status == JournalStatus.POSTED)
        stmt = apply_window(stmt, JournalEntry.date, period)
        if as_of is not None:
            stmt = stmt.where(JournalEntry.date <= as_of)
        return stmt

    def sum_by_account(
        self,
        period: Period | None = None,
        *,
        as_of: date | None = None,
        account_ids: list[int] | None = None,
    ) -> dict[int, AccountTotals]:
        """
        Debit and credit sums keyed by account id.

        Accounts with no postings in the window are absent from
        the result; callers treat a missing key as zero.
        """
        stmt = (
            select(
                JournalLine.account_id,
                func.coalesce(func.sum(JournalLine.debit), 0),
                func.coalesce(func.sum(JournalLine.credit), 0),
            )
            .join(JournalEntry, JournalLine.journal_id == JournalEntry.id)
            .group_by(JournalLine.account_id)
        )
        stmt = self._restrict(stmt, period, as_of)
        if account_ids is not None:
            stmt = stmt.where(JournalLine.account_id.in_(account_ids))

        rows = self.db.execute(stmt).all()
        return {
            account_id: AccountTotals(to_decimal(debit), to_decimal(credit))
            for account_id, debit, credit in rows
        }

    def grand_totals(
        self,
        period: Period | None = None,
        *,
        as_of: date | None = None,
        account_ids: list[int] | None = None,
    ) -> AccountTotals:
        totals = AccountTotals()
        for account_totals in self.sum_by_account(
            period, as_of=as_of, account_ids=account_ids
        ).values():
            totals = totals + account_totals
        return totals

    def sum_column(self, amount_column, date_column, period: Period | None) -> Decimal:
        """SUM(amount_column) over rows whose date_column is in the window."""
        stmt = select(func.coalesce(func.sum(amount_column), 0))
        stmt = apply_window(stmt, date_column, period)
        return to_decimal(self.db.execute(stmt).scalar())

    def sum_column_by(
        self, amount_column, date_column, group_column, period: Period | None
    ) -> dict[str, Decimal]:
        """SUM(amount_column) grouped by group_column inside the window."""
        stmt = select(
            group_column, func.coalesce(func.sum(amount_column), 0)
        ).group_by(group_column).order_by(group_column)
        stmt = apply_window(stmt, date_column, period)
        return {
            key: to_decimal(total)
            for key, total in self.db.execute(stmt).all()
        }
