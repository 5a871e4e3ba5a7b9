"""
Accounting period model.

Periods are informational: closing one does not lock journal
entries dated inside it.
"""

from datetime import date, datetime

from sqlalchemy import String, Date, DateTime, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from pharma_ledger.models.base import Base
from pharma_ledger.models.enums import PeriodStatus


class AccountingPeriod(Base):
    __tablename__ = "accounting_periods"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[PeriodStatus] = mapped_column(
        SAEnum(PeriodStatus, name="period_status_enum"),
        nullable=False,
        default=PeriodStatus.OPEN,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<AccountingPeriod {self.name} ({self.status.value})>"
