"""
Account service: the chart of accounts.

Accounts are created once by an administrator and rarely
change. The service takes a session from the caller, who owns
the commit.
"""

from datetime import date

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from pharma_ledger.models.account import Account
from pharma_ledger.models.enums import AccountType
from pharma_ledger.models.journal_entry import JournalEntry
from pharma_ledger.schemas.account import AccountCreate, AccountUpdate
from pharma_ledger.services.aggregator import PeriodAggregator, month_to_date, ZERO
from pharma_ledger.services.classifier import partition, parse_account_type
from pharma_ledger.services.exceptions import (
    ConflictError,
    NotFoundError,
    ValidationError,
    account_not_found,
)


class AccountService:

    def __init__(self, db: Session):
        self.db = db

    def _ensure_code_free(self, code: str, account_id: int | None = None) -> None:
        existing = self.db.execute(
            select(Account).where(Account.code == code)
        ).scalar_one_or_none()
        if existing and existing.id != account_id:
            raise ConflictError(f"Account with code '{code}' already exists")

    def _ensure_parent(self, parent_id: int | None, account_id: int | None = None) -> None:
        if parent_id is None:
            return
        if parent_id == account_id:
            raise ValidationError("An account cannot be its own parent")
        if not self.db.get(Account, parent_id):
            raise ValidationError(f"Parent account {parent_id} not found")

    def create_account(self, request: AccountCreate) -> Account:
        """
        Create a new ledger account.

        Raises ConflictError if the code is taken. The type is
        stored as given; unrecognised types are allowed but such
        accounts are left out of every report.
        """
        self._ensure_code_free(request.code)
        self._ensure_parent(request.parent_id)

        account = Account(**request.model_dump())
        self.db.add(account)
        self.db.flush()
        return account

    def update_account(self, account_id: int, request: AccountUpdate) -> Account:
        """Apply the fields present in the request."""
        account = self.get_account(account_id)
        changes = request.model_dump(exclude_unset=True)

        if changes.get("code") is not None:
            self._ensure_code_free(changes["code"], account_id)
        if "parent_id" in changes:
            self._ensure_parent(changes["parent_id"], account_id)

        for field, value in changes.items():
            # Required columns cannot be cleared with an explicit null
            if value is None and field in ("code", "name", "type", "is_active", "balance"):
                continue
            setattr(account, field, value)

        self.db.flush()
        return account

    def get_account(self, account_id: int) -> Account:
        account = self.db.get(Account, account_id)
        if not account:
            raise NotFoundError(account_not_found(account_id))
        return account

    def list_accounts(
        self, account_type: str | None = None, include_inactive: bool = False
    ) -> list[Account]:
        """
        Accounts ordered by code.

        `account_type` filters on the declared type, compared
        case-insensitively.
        """
        stmt = select(Account).order_by(Account.code)
        if not include_inactive:
            stmt = stmt.where(Account.is_active.is_(True))
        accounts = list(self.db.execute(stmt).scalars().all())

        if account_type:
            wanted = parse_account_type(account_type)
            if wanted is None:
                raise ValidationError(f"Unknown account type '{account_type}'")
            accounts = [a for a in accounts if parse_account_type(a.type) == wanted]
        return accounts

    def get_summary(self, today: date | None = None) -> dict:
        """Counts plus this month's revenue and expenses from the ledger."""
        total_accounts = self.db.execute(
            select(func.count()).select_from(Account)
        ).scalar()
        total_entries = self.db.execute(
            select(func.count()).select_from(JournalEntry)
        ).scalar()

        accounts = self.db.execute(select(Account)).scalars().all()
        classification = partition(accounts)
        sums = PeriodAggregator(self.db).sum_by_account(month_to_date(today))

        def total_for(account_type: AccountType):
            total = ZERO
            for account in classification[account_type]:
                totals = sums.get(account.id)
                if totals is not None:
                    total += totals.balance_for(account_type)
            return total

        return {
            "total_accounts": total_accounts or 0,
            "journal_entries": total_entries or 0,
            "revenue_this_month": total_for(AccountType.INCOME),
            "expenses_this_month": total_for(AccountType.EXPENSE),
        }
