"""
Chart-of-accounts API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from pharma_ledger.models.base import get_db
from pharma_ledger.services.account_service import AccountService
from pharma_ledger.services.exceptions import NotFoundError
from pharma_ledger.schemas.account import (
    AccountCreate,
    AccountUpdate,
    AccountResponse,
    AccountingSummaryResponse,
)

router = APIRouter(prefix="/api", tags=["Accounts"])


@router.get("/accounting/summary", response_model=AccountingSummaryResponse)
def get_accounting_summary(db: Session = Depends(get_db)):
    """Dashboard figures: counts and this month's revenue and expenses."""
    service = AccountService(db)
    return service.get_summary()


@router.get("/accounts", response_model=list[AccountResponse])
def list_accounts(
    account_type: str | None = Query(default=None, alias="type"),
    include_inactive: bool = Query(default=False, alias="includeInactive"),
    db: Session = Depends(get_db),
):
    service = AccountService(db)
    try:
        return service.list_accounts(account_type, include_inactive)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/accounts/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    db: Session = Depends(get_db),
):
    """Get account details."""
    service = AccountService(db)
    try:
        return service.get_account(account_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/accounts", response_model=AccountResponse, status_code=201)
def create_account(
    request: AccountCreate,
    db: Session = Depends(get_db),
):
    """
    Create a new ledger account.

    Codes are unique. Journal lines can only be posted to
    accounts that exist and are active.
    """
    service = AccountService(db)
    try:
        account = service.create_account(request)
        db.commit()
        return account
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.patch("/accounts/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: int,
    request: AccountUpdate,
    db: Session = Depends(get_db),
):
    service = AccountService(db)
    try:
        account = service.update_account(account_id, request)
        db.commit()
        return account
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
