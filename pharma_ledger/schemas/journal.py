"""
Pydantic schemas for journal entries.

A journal entry is posted as an `entry` header plus its
`lines`. Debits and credits must balance; that rule lives in
the JournalService so it can report both totals back.
"""

import datetime as dt
from decimal import Decimal

from pydantic import Field, model_validator

from pharma_ledger.models.enums import JournalStatus
from pharma_ledger.schemas.base import ApiModel


# --- Request Schemas ---

class JournalEntryCreate(ApiModel):
    entry_number: str | None = Field(default=None, min_length=1, max_length=30)
    date: dt.date
    reference: str | None = Field(default=None, max_length=100)
    memo: str | None = None
    status: JournalStatus = JournalStatus.POSTED
    source_type: str | None = Field(default=None, max_length=50)
    source_id: int | None = None
    user_id: int | None = None


class JournalLineCreate(ApiModel):
    """A single debit or credit posting."""
    account_id: int
    description: str | None = Field(default=None, max_length=255)
    debit: Decimal = Field(default=Decimal("0"), ge=0)
    credit: Decimal = Field(default=Decimal("0"), ge=0)

    @model_validator(mode="after")
    def must_carry_an_amount(self):
        if self.debit == 0 and self.credit == 0:
            raise ValueError("line must have a debit or a credit amount")
        return self


class PostJournalEntryRequest(ApiModel):
    entry: JournalEntryCreate
    lines: list[JournalLineCreate] = Field(min_length=2)


# --- Response Schemas ---

class JournalLineResponse(ApiModel):
    id: int
    journal_id: int
    account_id: int
    description: str | None
    debit: float
    credit: float
    position: int


class JournalEntryResponse(ApiModel):
    id: int
    entry_number: str
    date: dt.date
    reference: str | None
    memo: str | None
    status: JournalStatus
    total_debit: float
    total_credit: float
    source_type: str | None
    source_id: int | None
    user_id: int | None
    created_at: dt.datetime


class JournalEntryDetailResponse(JournalEntryResponse):
    lines: list[JournalLineResponse]
