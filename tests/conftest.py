"""
Shared test fixtures.

Sets up an isolated SQLite database so tests never touch the
real database. Each test starts from empty tables.
"""

import os

# Must be set before pharma_ledger is imported: the engine is
# built from it at import time.
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from pharma_ledger.main import app
from pharma_ledger.models import Account, Base, Expense, Sale
from pharma_ledger.models.base import get_db
from pharma_ledger.models.enums import JournalStatus
from pharma_ledger.schemas.journal import (
    JournalEntryCreate,
    JournalLineCreate,
    PostJournalEntryRequest,
)
from pharma_ledger.services.journal_service import JournalService


TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(db_session):
    """
    Provide a test client bound to the test session.

    get_db is overridden so the app uses the same session as
    the test's own setup code.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# --- Data builders ---

STANDARD_CHART = [
    ("1000", "Cash", "Asset"),
    ("1200", "Accounts Receivable", "Asset"),
    ("1300", "Inventory", "Asset"),
    ("2000", "Accounts Payable", "Liability"),
    ("3000", "Owner's Equity", "Equity"),
    ("4000", "Sales Revenue", "Income"),
    ("5000", "Cost of Goods Sold", "Expense"),
    ("5100", "Rent Expense", "Expense"),
]


@pytest.fixture
def chart(db_session):
    """The standard chart of accounts, keyed by code."""
    accounts = {}
    for code, name, account_type in STANDARD_CHART:
        account = Account(code=code, name=name, type=account_type)
        db_session.add(account)
        accounts[code] = account
    db_session.commit()
    return accounts


@pytest.fixture
def post_entry(db_session):
    """
    Record a journal entry from (account, debit, credit) tuples.

    Amounts may be given as strings, ints or Decimals.
    """
    service = JournalService(db_session)

    def _post(on, lines, status=JournalStatus.POSTED, memo=None, reference=None):
        entry = service.create_entry(PostJournalEntryRequest(
            entry=JournalEntryCreate(
                date=on, status=status, memo=memo, reference=reference
            ),
            lines=[
                JournalLineCreate(
                    account_id=account.id,
                    debit=Decimal(str(debit)),
                    credit=Decimal(str(credit)),
                )
                for account, debit, credit in lines
            ],
        ))
        db_session.commit()
        return entry

    return _post


@pytest.fixture
def add_sale(db_session):
    counter = {"n": 0}

    def _add(on: date, grand_total, amount_paid="0"):
        counter["n"] += 1
        sale = Sale(
            invoice_number=f"INV-{counter['n']:04d}",
            customer_name="City Pharmacy",
            date=on,
            grand_total=Decimal(str(grand_total)),
            amount_paid=Decimal(str(amount_paid)),
        )
        db_session.add(sale)
        db_session.commit()
        return sale

    return _add


@pytest.fixture
def add_expense(db_session):
    def _add(on: date, amount, category="Other", description="Expense"):
        expense = Expense(
            date=on,
            amount=Decimal(str(amount)),
            category=category,
            description=description,
        )
        db_session.add(expense)
        db_session.commit()
        return expense

    return _add
