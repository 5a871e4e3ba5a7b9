"""
Pydantic schemas for accounting periods.
"""

from datetime import date, datetime

from pydantic import Field, model_validator

from pharma_ledger.models.enums import PeriodStatus
from pharma_ledger.schemas.base import ApiModel


class AccountingPeriodCreate(ApiModel):
    name: str = Field(min_length=1, max_length=100)
    start_date: date
    end_date: date
    status: PeriodStatus = PeriodStatus.OPEN

    @model_validator(mode="after")
    def start_before_end(self):
        if self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


class AccountingPeriodStatusUpdate(ApiModel):
    status: PeriodStatus


class AccountingPeriodResponse(ApiModel):
    id: int
    name: str
    start_date: date
    end_date: date
    status: PeriodStatus
    created_at: datetime
    updated_at: datetime
