"""
Tests for the account classifier.

The classifier is pure, so these tests use plain objects
instead of database rows.
"""

from types import SimpleNamespace

from pharma_ledger.models.enums import AccountType, ClassificationMode
from pharma_ledger.services.classifier import (
    by_code_range,
    by_type,
    parse_account_type,
    partition,
    type_for_code,
)


def acct(code, account_type):
    return SimpleNamespace(code=code, type=account_type)


MIXED_CHART = [
    acct("5100", "Expense"),
    acct("1000", "Asset"),
    acct("2000", "Liability"),
    acct("4000", "Income"),
    acct("3000", "Equity"),
    acct("1200", "asset"),
    acct("9000", "Suspense"),
    acct("CASH", "Asset"),
    acct("12000", "Asset"),
]


class TestParseAccountType:

    def test_recognises_all_five_types(self):
        for account_type in AccountType:
            assert parse_account_type(account_type.value) == account_type

    def test_is_case_insensitive(self):
        assert parse_account_type("LIABILITY") == AccountType.LIABILITY
        assert parse_account_type(" income ") == AccountType.INCOME

    def test_unknown_type_is_none(self):
        assert parse_account_type("Revenue") is None
        assert parse_account_type(None) is None


class TestByType:

    def test_returns_matching_accounts_ordered_by_code(self):
        assets = by_type(MIXED_CHART, AccountType.ASSET)
        assert [a.code for a in assets] == ["1000", "1200", "12000", "CASH"]

    def test_unknown_types_match_nothing(self):
        everything = [a for t in AccountType for a in by_type(MIXED_CHART, t)]
        assert all(a.code != "9000" for a in everything)


class TestByCodeRange:

    def test_inclusive_bounds(self):
        accounts = [acct("999", "Asset"), acct("1000", "Asset"),
                    acct("1999", "Asset"), acct("2000", "Liability")]
        matched = by_code_range(accounts, 1000, 1999)
        assert [a.code for a in matched] == ["1000", "1999"]

    def test_compares_numerically_not_lexically(self):
        matched = by_code_range(MIXED_CHART, 1000, 1999)
        assert "12000" not in [a.code for a in matched]

    def test_open_upper_bound(self):
        matched = by_code_range(MIXED_CHART, 5000)
        assert [a.code for a in matched] == ["5100", "9000", "12000"]

    def test_non_numeric_codes_never_match(self):
        matched = by_code_range(MIXED_CHART, 0)
        assert "CASH" not in [a.code for a in matched]


class TestTypeForCode:

    def test_ranges(self):
        assert type_for_code("1500") == AccountType.ASSET
        assert type_for_code("2999") == AccountType.LIABILITY
        assert type_for_code("3000") == AccountType.EQUITY
        assert type_for_code("4100") == AccountType.INCOME
        assert type_for_code("7000") == AccountType.EXPENSE

    def test_below_first_range_and_non_numeric(self):
        assert type_for_code("0999") is None
        assert type_for_code("CASH") is None


class TestPartition:

    def test_by_type_covers_every_account_exactly_once(self):
        result = partition(MIXED_CHART, ClassificationMode.TYPE)

        seen = [id(a) for bucket in result.buckets.values() for a in bucket]
        seen += [id(a) for a in result.unclassified]
        assert sorted(seen) == sorted(id(a) for a in MIXED_CHART)

    def test_by_code_covers_every_account_exactly_once(self):
        result = partition(MIXED_CHART, ClassificationMode.CODE_RANGE)

        seen = [id(a) for bucket in result.buckets.values() for a in bucket]
        seen += [id(a) for a in result.unclassified]
        assert sorted(seen) == sorted(id(a) for a in MIXED_CHART)

    def test_unrecognised_type_is_left_out(self):
        result = partition(MIXED_CHART, ClassificationMode.TYPE)
        assert [a.code for a in result.unclassified] == ["9000"]
        assert "9000" not in [a.code for a in result.classified()]

    def test_modes_can_disagree(self):
        # Declared Asset but numbered in the expense range
        result_by_type = partition(MIXED_CHART, ClassificationMode.TYPE)
        result_by_code = partition(MIXED_CHART, ClassificationMode.CODE_RANGE)

        assert "12000" in [a.code for a in result_by_type[AccountType.ASSET]]
        assert "12000" in [a.code for a in result_by_code[AccountType.EXPENSE]]

    def test_every_bucket_present_even_when_empty(self):
        result = partition([], ClassificationMode.TYPE)
        for account_type in AccountType:
            assert result[account_type] == []
        assert result.unclassified == []
