"""
Pydantic schemas for chart-of-accounts operations.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from pharma_ledger.schemas.base import ApiModel


# --- Request Schemas ---

class AccountCreate(ApiModel):
    """Request to create a new ledger account."""
    code: str = Field(min_length=1, max_length=20)
    name: str = Field(min_length=1, max_length=100)
    type: str = Field(min_length=1, max_length=20)
    subtype: str | None = Field(default=None, max_length=50)
    parent_id: int | None = None
    description: str | None = None
    is_active: bool = True
    balance: Decimal = Decimal("0")


class AccountUpdate(ApiModel):
    """Partial update; only the fields sent are changed."""
    code: str | None = Field(default=None, min_length=1, max_length=20)
    name: str | None = Field(default=None, min_length=1, max_length=100)
    type: str | None = Field(default=None, min_length=1, max_length=20)
    subtype: str | None = Field(default=None, max_length=50)
    parent_id: int | None = None
    description: str | None = None
    is_active: bool | None = None
    balance: Decimal | None = None


# --- Response Schemas ---

class AccountResponse(ApiModel):
    id: int
    code: str
    name: str
    type: str
    subtype: str | None
    parent_id: int | None
    description: str | None
    is_active: bool
    balance: float
    created_at: datetime
    updated_at: datetime


class AccountingSummaryResponse(ApiModel):
    """Dashboard figures for the accounting module."""
    total_accounts: int
    journal_entries: int
    revenue_this_month: float
    expenses_this_month: float
