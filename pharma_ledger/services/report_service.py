"""
Report service: financial statements built from the ledger.

Every report follows the same pipeline:
1. The PeriodAggregator sums posted journal lines per account
2. The classifier sorts accounts into the five buckets
3. This service totals the buckets and runs the balance checks

The journal (accounts + journal lines) is the single source of
truth for trial balance, balance sheet and the ledger-based
profit and loss. Sales and expense records are only read where
the ledger has no equivalent: receivables aging, cash collected,
and the transaction-based profit and loss.

Reports are read-only and never persisted.
"""

from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from pharma_ledger.config import Settings, get_settings
from pharma_ledger.models.account import Account
from pharma_ledger.models.enums import (
    AccountType,
    ClassificationMode,
    JournalStatus,
    ProfitAndLossSource,
)
from pharma_ledger.models.expense import Expense
from pharma_ledger.models.sale import Sale
from pharma_ledger.schemas.reports import (
    AccountSummaryResponse,
    AccountSummaryRow,
    AgingAnalysisResponse,
    AgingBucket,
    BalanceSheetResponse,
    CashFlowResponse,
    ChartOfAccountsResponse,
    ChartOfAccountsRow,
    GeneralLedgerAccount,
    GeneralLedgerResponse,
    GeneralLedgerRow,
    JournalEntriesReportResponse,
    JournalEntriesReportRow,
    ProfitAndLossResponse,
    ReportPeriod,
    StatementLine,
    StatementSection,
    TrialBalanceResponse,
    TrialBalanceRow,
)
from pharma_ledger.services.aggregator import (
    AccountTotals,
    Period,
    PeriodAggregator,
    ZERO,
    to_decimal,
)
from pharma_ledger.services.classifier import (
    Classification,
    parse_account_type,
    partition,
)
from pharma_ledger.services.exceptions import (
    NotFoundError,
    ValidationError,
    account_not_found,
)
from pharma_ledger.services.journal_service import JournalService

# Two figures are considered equal when they differ by less than a cent.
BALANCE_TOLERANCE = Decimal("0.01")

# Upper bound (inclusive, in days) of each aging bucket.
AGING_BUCKETS = (
    ("current", 30),
    ("thirty_days", 60),
    ("sixty_days", 90),
    ("ninety_days", None),
)


def is_balanced(left, right) -> bool:
    """True when |left - right| is strictly below one cent."""
    return abs(to_decimal(left) - to_decimal(right)) < BALANCE_TOLERANCE


def profit_margin(revenue: Decimal, net_income: Decimal) -> Decimal:
    """Net income as a percentage of revenue; 0 when there is no revenue."""
    if revenue <= 0:
        return ZERO
    return net_income / revenue * 100


def aging_bucket_for(age_days: int) -> str:
    for name, upper in AGING_BUCKETS[:-1]:
        if age_days <= upper:
            return name
    return AGING_BUCKETS[-1][0]


def _period_schema(period: Period | None) -> ReportPeriod:
    if period is None:
        return ReportPeriod(start_date=None, end_date=None)
    return ReportPeriod(start_date=period.start, end_date=period.end)


class ReportService:

    def __init__(self, db: Session, settings: Settings | None = None):
        self.db = db
        self.settings = settings or get_settings()
        self.aggregator = PeriodAggregator(db)

    # --- Helpers ---

    def _accounts(self) -> list[Account]:
        return list(
            self.db.execute(select(Account).order_by(Account.code)).scalars().all()
        )

    def _classify(
        self, mode: ClassificationMode = ClassificationMode.TYPE
    ) -> Classification:
        return partition(self._accounts(), mode)

    def _section(
        self,
        accounts: list[Account],
        account_type: AccountType,
        sums: dict[int, AccountTotals],
    ) -> tuple[StatementSection, Decimal]:
        lines = []
        total = ZERO
        for account in accounts:
            amount = sums.get(account.id, AccountTotals()).balance_for(account_type)
            total += amount
            lines.append(StatementLine(
                code=account.code, name=account.name, amount=float(amount)
            ))
        return StatementSection(accounts=lines, total=float(total)), total

    # --- Trial Balance ---

    def trial_balance(
        self, period: Period, account_filter: str | None = None
    ) -> TrialBalanceResponse:
        """
        Debit and credit sums per account for the window.

        `account_filter` restricts the listing (and the totals)
        to one account type; "all" or None lists every recognised
        account. Accounts with no postings are listed with zeros.
        """
        classification = self._classify(ClassificationMode.TYPE)
        if account_filter and account_filter.lower() != "all":
            wanted = parse_account_type(account_filter)
            if wanted is None:
                raise ValidationError(f"Unknown account type '{account_filter}'")
            accounts = classification[wanted]
        else:
            accounts = classification.classified()

        sums = self.aggregator.sum_by_account(period)

        rows = []
        total_debits = ZERO
        total_credits = ZERO
        for account in accounts:
            totals = sums.get(account.id, AccountTotals())
            total_debits += totals.debit
            total_credits += totals.credit
            rows.append(TrialBalanceRow(
                id=account.id,
                code=account.code,
                name=account.name,
                type=parse_account_type(account.type).value,
                debit=float(totals.debit),
                credit=float(totals.credit),
            ))

        return TrialBalanceResponse(
            period=_period_schema(period),
            accounts=rows,
            total_debits=float(total_debits),
            total_credits=float(total_credits),
            is_balanced=is_balanced(total_debits, total_credits),
        )

    # --- Profit & Loss ---

    def profit_and_loss(
        self,
        period: Period,
        source: ProfitAndLossSource = ProfitAndLossSource.LEDGER,
    ) -> ProfitAndLossResponse:
        if source == ProfitAndLossSource.TRANSACTIONS:
            revenue, total_revenue, expenses, total_expenses = (
                self._pnl_from_transactions(period)
            )
        else:
            revenue, total_revenue, expenses, total_expenses = (
                self._pnl_from_ledger(period)
            )

        net_income = total_revenue - total_expenses
        return ProfitAndLossResponse(
            period=_period_schema(period),
            source=source,
            revenue=revenue,
            expenses=expenses,
            total_revenue=float(total_revenue),
            total_expenses=float(total_expenses),
            net_income=float(net_income),
            profit_margin=float(profit_margin(total_revenue, net_income)),
        )

    def _pnl_from_ledger(self, period: Period):
        """Income: credits - debits. Expense: debits - credits."""
        classification = self._classify(ClassificationMode.TYPE)
        sums = self.aggregator.sum_by_account(period)
        revenue, total_revenue = self._section(
            classification[AccountType.INCOME], AccountType.INCOME, sums
        )
        expenses, total_expenses = self._section(
            classification[AccountType.EXPENSE], AccountType.EXPENSE, sums
        )
        return revenue, total_revenue, expenses, total_expenses

    def _pnl_from_transactions(self, period: Period):
        """Revenue from sales invoices, expenses grouped by category."""
        total_revenue = self.aggregator.sum_column(
            Sale.grand_total, Sale.date, period
        )
        by_category = self.aggregator.sum_column_by(
            Expense.amount, Expense.date, Expense.category, period
        )
        total_expenses = sum(by_category.values(), ZERO)

        revenue = StatementSection(
            accounts=[StatementLine(
                code="4000", name="Sales Revenue", amount=float(total_revenue)
            )],
            total=float(total_revenue),
        )
        expenses = StatementSection(
            accounts=[
                StatementLine(
                    code=f"5{index:03d}", name=category, amount=float(amount)
                )
                for index, (category, amount) in enumerate(by_category.items(), start=1)
            ],
            total=float(total_expenses),
        )
        return revenue, total_revenue, expenses, total_expenses

    # --- Balance Sheet ---

    def balance_sheet(
        self,
        as_of: date,
        mode: ClassificationMode = ClassificationMode.CODE_RANGE,
    ) -> BalanceSheetResponse:
        """
        Cumulative balances of every posting on or before `as_of`.

        Assets are shown as debits - credits, liabilities and
        equity as credits - debits. Income and expense accounts
        are not closed into equity by any posting, so their net
        (current earnings) is added to equity here.
        """
        classification = self._classify(mode)
        sums = self.aggregator.sum_by_account(as_of=as_of)

        assets, total_assets = self._section(
            classification[AccountType.ASSET], AccountType.ASSET, sums
        )
        liabilities, total_liabilities = self._section(
            classification[AccountType.LIABILITY], AccountType.LIABILITY, sums
        )
        equity, equity_accounts_total = self._section(
            classification[AccountType.EQUITY], AccountType.EQUITY, sums
        )

        income = sum(
            (sums.get(a.id, AccountTotals()).balance_for(AccountType.INCOME)
             for a in classification[AccountType.INCOME]),
            ZERO,
        )
        expense = sum(
            (sums.get(a.id, AccountTotals()).balance_for(AccountType.EXPENSE)
             for a in classification[AccountType.EXPENSE]),
            ZERO,
        )
        current_earnings = income - expense
        total_equity = equity_accounts_total + current_earnings
        equity.total = float(total_equity)

        return BalanceSheetResponse(
            date=as_of,
            classify_by=mode,
            assets=assets,
            liabilities=liabilities,
            equity=equity,
            current_earnings=float(current_earnings),
            total_assets=float(total_assets),
            total_liabilities=float(total_liabilities),
            total_equity=float(total_equity),
            is_balanced=is_balanced(total_assets, total_liabilities + total_equity),
        )

    # --- Cash Flow ---

    def cash_flow(self, period: Period) -> CashFlowResponse:
        """
        Operating cash from collections and expenses.

        Investing and financing activities are not tracked yet and
        are reported as zero.
        """
        inflows = self.aggregator.sum_column(Sale.amount_paid, Sale.date, period)
        outflows = self.aggregator.sum_column(Expense.amount, Expense.date, period)
        net_operating = inflows - outflows
        investing = ZERO
        financing = ZERO
        net_cash_flow = net_operating + investing + financing
        beginning_cash = to_decimal(self.settings.BEGINNING_CASH)

        return CashFlowResponse(
            period=_period_schema(period),
            operating_inflows=float(inflows),
            operating_outflows=float(outflows),
            net_operating_cash=float(net_operating),
            investing_activities=float(investing),
            financing_activities=float(financing),
            net_cash_flow=float(net_cash_flow),
            beginning_cash=float(beginning_cash),
            ending_cash=float(beginning_cash + net_cash_flow),
        )

    # --- Aging Analysis ---

    def aging_analysis(self, as_of: date | None = None) -> AgingAnalysisResponse:
        """
        Outstanding receivables bucketed by invoice age.

        Age is whole days from the invoice date to `as_of`.
        Buckets: up to 30 days, 31-60, 61-90, over 90. Invoices
        dated in the future count as current.
        """
        as_of = as_of or date.today()
        unpaid = self.db.execute(
            select(Sale).where(Sale.grand_total > Sale.amount_paid)
        ).scalars().all()

        counts = {name: 0 for name, _ in AGING_BUCKETS}
        amounts = {name: ZERO for name, _ in AGING_BUCKETS}
        for sale in unpaid:
            bucket = aging_bucket_for((as_of - sale.date).days)
            counts[bucket] += 1
            amounts[bucket] += to_decimal(sale.outstanding)

        buckets = {
            name: AgingBucket(count=counts[name], amount=float(amounts[name]))
            for name, _ in AGING_BUCKETS
        }
        return AgingAnalysisResponse(
            as_of=as_of,
            total=AgingBucket(
                count=sum(counts.values()),
                amount=float(sum(amounts.values(), ZERO)),
            ),
            **buckets,
        )

    # --- Listings ---

    def chart_of_accounts(self) -> ChartOfAccountsResponse:
        """Recognised accounts with their all-time normal balance."""
        sums = self.aggregator.sum_by_account()
        rows = []
        for account in self._classify(ClassificationMode.TYPE).classified():
            account_type = parse_account_type(account.type)
            rows.append(ChartOfAccountsRow(
                id=account.id,
                code=account.code,
                name=account.name,
                type=account_type.value,
                description=account.description or "",
                is_active=account.is_active,
                balance=float(
                    sums.get(account.id, AccountTotals()).balance_for(account_type)
                ),
            ))
        return ChartOfAccountsResponse(accounts=rows)

    def journal_entries_report(
        self, period: Period | None = None
    ) -> JournalEntriesReportResponse:
        """Posted entries with debits and credits summed from their lines."""
        entries = [
            e for e in JournalService(self.db).list_entries(period)
            if e.status == JournalStatus.POSTED
        ]
        rows = []
        for entry in entries:
            debit = sum((to_decimal(l.debit) for l in entry.lines), ZERO)
            credit = sum((to_decimal(l.credit) for l in entry.lines), ZERO)
            rows.append(JournalEntriesReportRow(
                id=entry.id,
                entry_number=entry.entry_number,
                date=entry.date,
                description=entry.memo or "",
                reference=entry.reference or "",
                debit=float(debit),
                credit=float(credit),
            ))
        return JournalEntriesReportResponse(
            period=_period_schema(period), entries=rows
        )

    def general_ledger(
        self, account_id: int, period: Period | None = None
    ) -> GeneralLedgerResponse:
        """
        Every posted line for one account with a running balance.

        The opening balance carries everything posted before the
        window starts.
        """
        account = self.db.get(Account, account_id)
        if not account:
            raise NotFoundError(account_not_found(account_id))
        account_type = parse_account_type(account.type)
        if account_type is None:
            raise ValidationError(
                f"Account {account.code} has unrecognised type '{account.type}'"
            )

        opening = ZERO
        # Nothing can be dated before date.min
        if period is not None and period.start is not None and period.start > date.min:
            before = self.aggregator.sum_by_account(
                Period(start=None, end=period.start - timedelta(days=1)),
                account_ids=[account_id],
            )
            opening = before.get(account_id, AccountTotals()).balance_for(account_type)

        running = opening
        rows = []
        for line in JournalService(self.db).lines_for_account(account_id, period):
            totals = AccountTotals(to_decimal(line.debit), to_decimal(line.credit))
            running += totals.balance_for(account_type)
            rows.append(GeneralLedgerRow(
                date=line.entry.date,
                entry_number=line.entry.entry_number,
                description=line.description or line.entry.memo or "",
                reference=line.entry.reference or "",
                debit=float(totals.debit),
                credit=float(totals.credit),
                balance=float(running),
            ))

        return GeneralLedgerResponse(
            account=GeneralLedgerAccount(
                id=account.id,
                code=account.code,
                name=account.name,
                type=account_type.value,
            ),
            period=_period_schema(period),
            opening_balance=float(opening),
            transactions=rows,
            closing_balance=float(running),
        )

    def account_summary(self) -> AccountSummaryResponse:
        """Account count and all-time debit/credit totals per type."""
        classification = self._classify(ClassificationMode.TYPE)
        sums = self.aggregator.sum_by_account()
        summary = []
        for account_type in AccountType:
            accounts = classification[account_type]
            totals = AccountTotals()
            for account in accounts:
                totals = totals + sums.get(account.id, AccountTotals())
            summary.append(AccountSummaryRow(
                type=account_type.value,
                count=len(accounts),
                total_debit=float(totals.debit),
                total_credit=float(totals.credit),
            ))
        return AccountSummaryResponse(summary=summary)
