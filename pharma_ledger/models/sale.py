"""
Sales invoice model.

Invoices are written by the ERP's sales module. The ledger
service only reads them for receivables aging, cash collected
and transaction-based profit and loss.
"""

import datetime as dt
from decimal import Decimal

from sqlalchemy import String, Date, Numeric, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from pharma_ledger.models.base import Base
from pharma_ledger.models.enums import PaymentStatus


class Sale(Base):
    __tablename__ = "sales"

    id: Mapped[int] = mapped_column(primary_key=True)
    invoice_number: Mapped[str] = mapped_column(
        String(50), unique=True, nullable=False
    )
    customer_name: Mapped[str | None] = mapped_column(
        String(255), nullable=True
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    grand_total: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    amount_paid: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    payment_status: Mapped[PaymentStatus] = mapped_column(
        SAEnum(PaymentStatus, name="payment_status_enum"),
        nullable=False,
        default=PaymentStatus.UNPAID,
    )

    @property
    def outstanding(self) -> Decimal:
        return self.grand_total - (self.amount_paid or Decimal("0"))

    def __repr__(self) -> str:
        return f"<Sale {self.invoice_number} {self.grand_total}>"
