"""
Journal service: recording and reading journal entries.

This service enforces the rules for writing to the ledger:
1. Every entry must balance (debits = credits)
2. Every line must point at an existing, active account
3. The entry header and all its lines are written together

There is no update or delete path. The caller commits.
"""

from decimal import Decimal

from sqlalchemy import select, func
from sqlalchemy.orm import Session, selectinload

from pharma_ledger.logger import get_logger
from pharma_ledger.models.account import Account
from pharma_ledger.models.enums import JournalStatus
from pharma_ledger.models.journal_entry import JournalEntry, JournalLine
from pharma_ledger.schemas.journal import PostJournalEntryRequest
from pharma_ledger.services.aggregator import Period, apply_window
from pharma_ledger.services.exceptions import (
    ConflictError,
    NotFoundError,
    UnbalancedEntryError,
    ValidationError,
    journal_entry_not_found,
)

logger = get_logger(__name__)


class JournalService:

    def __init__(self, db: Session):
        self.db = db

    def _entry_number_taken(self, entry_number: str) -> bool:
        return self.db.execute(
            select(JournalEntry.id).where(JournalEntry.entry_number == entry_number)
        ).first() is not None

    def _next_entry_number(self) -> str:
        """
        First free JE-nnnnnn number at or after COUNT(*) + 1.

        Client-supplied numbers can occupy slots in the sequence,
        so taken numbers are skipped.
        """
        sequence = (self.db.execute(
            select(func.count()).select_from(JournalEntry)
        ).scalar() or 0) + 1
        while self._entry_number_taken(f"JE-{sequence:06d}"):
            sequence += 1
        return f"JE-{sequence:06d}"

    def create_entry(self, request: PostJournalEntryRequest) -> JournalEntry:
        """
        Record a balanced journal entry with its lines.

        Checks, in order:
        - the entry number (given or generated) is unused
        - every referenced account exists and is active
        - total debits equal total credits

        If any check fails nothing is written.
        """
        header = request.entry
        entry_number = header.entry_number or self._next_entry_number()

        if self._entry_number_taken(entry_number):
            raise ConflictError(
                f"Journal entry number '{entry_number}' already exists"
            )

        # --- Validate accounts ---
        account_ids = {line.account_id for line in request.lines}
        accounts = self.db.execute(
            select(Account).where(Account.id.in_(account_ids))
        ).scalars().all()
        accounts_by_id = {a.id: a for a in accounts}

        missing = account_ids - set(accounts_by_id)
        if missing:
            raise ValidationError(f"Accounts not found: {sorted(missing)}")

        for account in accounts_by_id.values():
            if not account.is_active:
                raise ValidationError(f"Account {account.code} is not active")

        # --- Enforce balance rule ---
        total_debits = sum((line.debit for line in request.lines), Decimal("0"))
        total_credits = sum((line.credit for line in request.lines), Decimal("0"))
        if total_debits != total_credits:
            raise UnbalancedEntryError(total_debits, total_credits)

        # --- Create entry and lines ---
        entry = JournalEntry(
            entry_number=entry_number,
            date=header.date,
            reference=header.reference,
            memo=header.memo,
            status=header.status,
            total_debit=total_debits,
            total_credit=total_credits,
            source_type=header.source_type,
            source_id=header.source_id,
            user_id=header.user_id,
        )
        for position, line in enumerate(request.lines, start=1):
            entry.lines.append(JournalLine(
                account_id=line.account_id,
                description=line.description,
                debit=line.debit,
                credit=line.credit,
                position=position,
            ))

        self.db.add(entry)
        self.db.flush()

        logger.info(
            "journal entry recorded",
            entry_number=entry.entry_number,
            date=entry.date.isoformat(),
            lines=len(entry.lines),
            total=str(total_debits),
        )
        return entry

    def get_entry(self, entry_id: int) -> JournalEntry:
        entry = self.db.execute(
            select(JournalEntry)
            .options(selectinload(JournalEntry.lines))
            .where(JournalEntry.id == entry_id)
        ).scalar_one_or_none()
        if not entry:
            raise NotFoundError(journal_entry_not_found(entry_id))
        return entry

    def list_entries(self, period: Period | None = None) -> list[JournalEntry]:
        """Entries inside the window, newest first."""
        stmt = select(JournalEntry).order_by(
            JournalEntry.date.desc(), JournalEntry.id.desc()
        )
        stmt = apply_window(stmt, JournalEntry.date, period)
        return list(self.db.execute(stmt).scalars().all())

    def lines_for_account(
        self, account_id: int, period: Period | None = None
    ) -> list[JournalLine]:
        """Posted lines for one account inside the window, oldest first."""
        stmt = (
            select(JournalLine)
            .join(JournalEntry, JournalLine.journal_id == JournalEntry.id)
            .options(selectinload(JournalLine.entry))
            .where(
                JournalLine.account_id == account_id,
                JournalEntry.status == JournalStatus.POSTED,
            )
            .order_by(JournalEntry.date, JournalEntry.id, JournalLine.position)
        )
        stmt = apply_window(stmt, JournalEntry.date, period)
        return list(self.db.execute(stmt).scalars().all())
