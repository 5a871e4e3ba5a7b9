"""
Accounting period service.

Periods partition the calendar for reporting. Closing a period
only records its status; journal entries dated inside a closed
period are still accepted.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from pharma_ledger.models.accounting_period import AccountingPeriod
from pharma_ledger.models.enums import PeriodStatus
from pharma_ledger.schemas.period import AccountingPeriodCreate
from pharma_ledger.services.exceptions import (
    ConflictError,
    NotFoundError,
    period_not_found,
)


class PeriodService:

    def __init__(self, db: Session):
        self.db = db

    def list_periods(self) -> list[AccountingPeriod]:
        """All periods, most recent first."""
        return list(self.db.execute(
            select(AccountingPeriod).order_by(AccountingPeriod.start_date.desc())
        ).scalars().all())

    def create_period(self, request: AccountingPeriodCreate) -> AccountingPeriod:
        """
        Create a period.

        Raises ConflictError if the new range shares any day
        with an existing period.
        """
        overlapping = self.db.execute(
            select(AccountingPeriod).where(
                AccountingPeriod.start_date <= request.end_date,
                AccountingPeriod.end_date >= request.start_date,
            )
        ).scalars().all()
        if overlapping:
            names = ", ".join(p.name for p in overlapping)
            raise ConflictError(
                f"The specified period overlaps with existing periods: {names}"
            )

        period = AccountingPeriod(
            name=request.name,
            start_date=request.start_date,
            end_date=request.end_date,
            status=request.status,
        )
        self.db.add(period)
        self.db.flush()
        return period

    def change_status(self, period_id: int, status: PeriodStatus) -> AccountingPeriod:
        period = self.db.get(AccountingPeriod, period_id)
        if not period:
            raise NotFoundError(period_not_found(period_id))
        period.status = status
        self.db.flush()
        return period
