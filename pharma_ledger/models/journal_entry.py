"""
Journal entry and journal line models.

A journal entry groups the debit and credit lines recorded on
one date. Within an entry, the sum of debits must equal the sum
of credits. This is enforced by the JournalService when the
entry is created, not by the model.
"""

import datetime as dt
from decimal import Decimal

from sqlalchemy import (
    String, Date, DateTime, Numeric, Integer, ForeignKey, Text,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pharma_ledger.models.base import Base
from pharma_ledger.models.enums import JournalStatus


class JournalEntry(Base):
    __tablename__ = "journal_entries"

    id: Mapped[int] = mapped_column(primary_key=True)
    entry_number: Mapped[str] = mapped_column(
        String(30), unique=True, nullable=False
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    reference: Mapped[str | None] = mapped_column(String(100), nullable=True)
    memo: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[JournalStatus] = mapped_column(
        SAEnum(JournalStatus, name="journal_status_enum"),
        nullable=False,
        default=JournalStatus.POSTED,
    )
    total_debit: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    total_credit: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    source_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    source_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    user_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime, nullable=False, default=dt.datetime.utcnow
    )

    lines: Mapped[list["JournalLine"]] = relationship(
        back_populates="entry",
        order_by="JournalLine.position",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<JournalEntry {self.entry_number} {self.date}>"


class JournalLine(Base):
    """
    One debit or credit posting inside a journal entry.

    A line normally carries exactly one non-zero side.
    """

    __tablename__ = "journal_lines"

    id: Mapped[int] = mapped_column(primary_key=True)
    journal_id: Mapped[int] = mapped_column(
        ForeignKey("journal_entries.id"), nullable=False, index=True
    )
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    debit: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    credit: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    entry: Mapped["JournalEntry"] = relationship(back_populates="lines")
    account: Mapped["Account"] = relationship(back_populates="lines")

    def __repr__(self) -> str:
        return (
            f"<JournalLine account={self.account_id} "
            f"debit={self.debit} credit={self.credit}>"
        )
