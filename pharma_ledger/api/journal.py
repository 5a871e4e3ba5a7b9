"""
Journal entry API endpoints.

The API layer is thin: it handles status codes and response
shapes and leaves every ledger rule to the JournalService.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from pharma_ledger.models.base import get_db
from pharma_ledger.services.aggregator import resolve_optional_period
from pharma_ledger.services.exceptions import UnbalancedEntryError
from pharma_ledger.services.journal_service import JournalService
from pharma_ledger.schemas.journal import (
    PostJournalEntryRequest,
    JournalEntryResponse,
    JournalEntryDetailResponse,
)

router = APIRouter(prefix="/api", tags=["Journal"])


@router.get("/journal-entries", response_model=list[JournalEntryResponse])
def list_journal_entries(
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    db: Session = Depends(get_db),
):
    """Entries of every status, newest first. No dates means all time."""
    service = JournalService(db)
    try:
        period = resolve_optional_period(start_date, end_date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return service.list_entries(period)


@router.get("/journal-entries/{entry_id}", response_model=JournalEntryDetailResponse)
def get_journal_entry(
    entry_id: int,
    db: Session = Depends(get_db),
):
    """Get a journal entry with its lines."""
    service = JournalService(db)
    try:
        return service.get_entry(entry_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "/journal-entries",
    response_model=JournalEntryDetailResponse,
    status_code=201,
)
def post_journal_entry(
    request: PostJournalEntryRequest,
    db: Session = Depends(get_db),
):
    """
    Record a journal entry with its lines.

    Total debits must equal total credits exactly. An unbalanced
    entry is rejected with both totals so the client can show
    the difference. Nothing is written when any check fails.
    """
    service = JournalService(db)
    try:
        entry = service.create_entry(request)
        db.commit()
        db.refresh(entry)
        return entry
    except UnbalancedEntryError as e:
        db.rollback()
        raise HTTPException(
            status_code=400,
            detail={
                "error": str(e),
                "totalDebits": float(e.total_debits),
                "totalCredits": float(e.total_credits),
            },
        )
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
