"""
Accounting period API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from pharma_ledger.models.base import get_db
from pharma_ledger.services.period_service import PeriodService
from pharma_ledger.schemas.period import (
    AccountingPeriodCreate,
    AccountingPeriodResponse,
    AccountingPeriodStatusUpdate,
)

router = APIRouter(prefix="/api", tags=["Accounting Periods"])


@router.get("/accounting-periods", response_model=list[AccountingPeriodResponse])
def list_periods(db: Session = Depends(get_db)):
    service = PeriodService(db)
    return service.list_periods()


@router.post(
    "/accounting-periods",
    response_model=AccountingPeriodResponse,
    status_code=201,
)
def create_period(
    request: AccountingPeriodCreate,
    db: Session = Depends(get_db),
):
    """Create a period. Overlapping an existing period is rejected."""
    service = PeriodService(db)
    try:
        period = service.create_period(request)
        db.commit()
        return period
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.patch(
    "/accounting-periods/{period_id}/status",
    response_model=AccountingPeriodResponse,
)
def change_period_status(
    period_id: int,
    request: AccountingPeriodStatusUpdate,
    db: Session = Depends(get_db),
):
    service = PeriodService(db)
    try:
        period = service.change_status(period_id, request.status)
        db.commit()
        return period
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
