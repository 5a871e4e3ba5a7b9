"""
Operating expense model.

Expenses are recorded by the ERP's expense module and read
here for cash outflows and transaction-based profit and loss.
"""

import datetime as dt
from decimal import Decimal

from sqlalchemy import String, Date, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from pharma_ledger.models.base import Base


class Expense(Base):
    __tablename__ = "expenses"

    id: Mapped[int] = mapped_column(primary_key=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(19, 4), nullable=False)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(
        String(100), nullable=False, default="Other"
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pending"
    )

    def __repr__(self) -> str:
        return f"<Expense {self.category} {self.amount}>"
