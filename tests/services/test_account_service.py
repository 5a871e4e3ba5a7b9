"""
Tests for the AccountService (chart of accounts).
"""

from datetime import date
from decimal import Decimal

import pytest

from pharma_ledger.schemas.account import AccountCreate, AccountUpdate
from pharma_ledger.services.account_service import AccountService
from pharma_ledger.services.exceptions import (
    ConflictError,
    NotFoundError,
    ValidationError,
)


def make_account(service, code, name, account_type, **extra):
    return service.create_account(AccountCreate(
        code=code, name=name, type=account_type, **extra
    ))


class TestCreateAccount:

    def test_create_account_succeeds(self, db_session):
        service = AccountService(db_session)
        account = make_account(service, "1000", "Cash", "Asset")
        db_session.commit()

        assert account.id is not None
        assert account.type == "Asset"
        assert account.is_active is True
        assert account.balance == Decimal("0")

    def test_duplicate_code_rejected(self, db_session):
        service = AccountService(db_session)
        make_account(service, "1000", "Cash", "Asset")
        db_session.commit()

        with pytest.raises(ConflictError, match="already exists"):
            make_account(service, "1000", "Petty Cash", "Asset")

    def test_unrecognised_type_is_stored(self, db_session):
        service = AccountService(db_session)
        account = make_account(service, "9000", "Suspense", "Suspense")
        db_session.commit()

        assert account.type == "Suspense"

    def test_missing_parent_rejected(self, db_session):
        service = AccountService(db_session)

        with pytest.raises(ValidationError, match="Parent account"):
            make_account(service, "1010", "Bank", "Asset", parent_id=424242)

    def test_child_account_links_to_parent(self, db_session):
        service = AccountService(db_session)
        parent = make_account(service, "1000", "Cash", "Asset")
        child = make_account(service, "1010", "Bank", "Asset", parent_id=parent.id)
        db_session.commit()

        assert child.parent.code == "1000"


class TestUpdateAccount:

    def test_only_sent_fields_change(self, db_session):
        service = AccountService(db_session)
        account = make_account(
            service, "5100", "Rent", "Expense", description="Warehouse"
        )
        db_session.commit()

        service.update_account(account.id, AccountUpdate(name="Rent Expense"))
        db_session.commit()

        assert account.name == "Rent Expense"
        assert account.description == "Warehouse"

    def test_deactivate(self, db_session):
        service = AccountService(db_session)
        account = make_account(service, "5100", "Rent", "Expense")

        service.update_account(account.id, AccountUpdate(is_active=False))

        assert account.is_active is False

    def test_code_clash_rejected(self, db_session):
        service = AccountService(db_session)
        make_account(service, "1000", "Cash", "Asset")
        other = make_account(service, "1200", "Receivables", "Asset")
        db_session.commit()

        with pytest.raises(ConflictError):
            service.update_account(other.id, AccountUpdate(code="1000"))

    def test_own_parent_rejected(self, db_session):
        service = AccountService(db_session)
        account = make_account(service, "1000", "Cash", "Asset")

        with pytest.raises(ValidationError, match="own parent"):
            service.update_account(account.id, AccountUpdate(parent_id=account.id))

    def test_missing_account_raises(self, db_session):
        with pytest.raises(NotFoundError):
            AccountService(db_session).update_account(7, AccountUpdate(name="X"))


class TestListAccounts:

    def test_ordered_by_code_and_active_only(self, db_session):
        service = AccountService(db_session)
        make_account(service, "4000", "Sales", "Income")
        make_account(service, "1000", "Cash", "Asset")
        make_account(service, "1500", "Old Fixtures", "Asset", is_active=False)
        db_session.commit()

        codes = [a.code for a in service.list_accounts()]
        assert codes == ["1000", "4000"]

        codes = [a.code for a in service.list_accounts(include_inactive=True)]
        assert codes == ["1000", "1500", "4000"]

    def test_filter_by_type_is_case_insensitive(self, db_session):
        service = AccountService(db_session)
        make_account(service, "4000", "Sales", "Income")
        make_account(service, "1000", "Cash", "Asset")
        db_session.commit()

        accounts = service.list_accounts(account_type="income")
        assert [a.code for a in accounts] == ["4000"]

    def test_unknown_type_filter_rejected(self, db_session):
        with pytest.raises(ValidationError, match="Unknown account type"):
            AccountService(db_session).list_accounts(account_type="Revenue")


class TestSummary:

    def test_month_to_date_revenue_and_expenses(self, db_session, chart, post_entry):
        post_entry(date(2024, 5, 3), [(chart["1000"], 800, 0), (chart["4000"], 0, 800)])
        post_entry(date(2024, 5, 9), [(chart["5100"], 300, 0), (chart["1000"], 0, 300)])
        # Previous month, outside the window
        post_entry(date(2024, 4, 28), [(chart["1000"], 50, 0), (chart["4000"], 0, 50)])

        summary = AccountService(db_session).get_summary(today=date(2024, 5, 15))

        assert summary["total_accounts"] == len(chart)
        assert summary["journal_entries"] == 3
        assert summary["revenue_this_month"] == Decimal("800")
        assert summary["expenses_this_month"] == Decimal("300")
