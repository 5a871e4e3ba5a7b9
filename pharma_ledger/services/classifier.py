"""
Account classifier.

Sorts chart-of-accounts rows into the five accounting buckets.
Two strategies exist and are kept distinct:

- TYPE: by the account's declared type string
- CODE_RANGE: by the numeric range its code falls in

They usually agree but nothing forces them to, so callers name
the one they want. Accounts that land in no bucket are returned
separately and never appear in a report.

Classification is pure: it works on any object with `code` and
`type` attributes and never touches the database.
"""

from dataclasses import dataclass, field
from typing import Iterable, Protocol, TypeVar

from pharma_ledger.logger import get_logger
from pharma_ledger.models.enums import AccountType, ClassificationMode

logger = get_logger(__name__)


class Classifiable(Protocol):
    code: str
    type: str


A = TypeVar("A", bound=Classifiable)


# Inclusive code ranges. None as the upper bound means unbounded.
CODE_RANGES: dict[AccountType, tuple[int, int | None]] = {
    AccountType.ASSET: (1000, 1999),
    AccountType.LIABILITY: (2000, 2999),
    AccountType.EQUITY: (3000, 3999),
    AccountType.INCOME: (4000, 4999),
    AccountType.EXPENSE: (5000, None),
}

_TYPES_BY_NAME = {t.value.lower(): t for t in AccountType}


def parse_account_type(value: str | None) -> AccountType | None:
    """Return the recognised type for a stored type string, or None."""
    if value is None:
        return None
    return _TYPES_BY_NAME.get(value.strip().lower())


def _code_number(code: str) -> int | None:
    code = code.strip()
    return int(code) if code.isdigit() else None


def _sort_key(account: Classifiable) -> tuple:
    # Numeric codes first in numeric order, then anything else.
    number = _code_number(account.code)
    if number is None:
        return (1, 0, account.code)
    return (0, number, account.code)


def _by_code(accounts: Iterable[A]) -> list[A]:
    return sorted(accounts, key=_sort_key)


def by_type(accounts: Iterable[A], account_type: AccountType) -> list[A]:
    """Accounts whose declared type is `account_type`, ordered by code."""
    return _by_code(
        a for a in accounts if parse_account_type(a.type) == account_type
    )


def by_code_range(
    accounts: Iterable[A], min_code: int, max_code: int | None = None
) -> list[A]:
    """
    Accounts whose numeric code lies in [min_code, max_code].

    Codes are compared as integers, so "10000" is not inside
    1000-1999. Non-numeric codes never match a range.
    """
    matched = []
    for account in accounts:
        number = _code_number(account.code)
        if number is None or number < min_code:
            continue
        if max_code is not None and number > max_code:
            continue
        matched.append(account)
    return _by_code(matched)


def type_for_code(code: str) -> AccountType | None:
    """Range bucket a code belongs to under the numbering convention."""
    number = _code_number(code)
    if number is None:
        return None
    for account_type, (low, high) in CODE_RANGES.items():
        if number >= low and (high is None or number <= high):
            return account_type
    return None


def classify(account: Classifiable, mode: ClassificationMode) -> AccountType | None:
    if mode == ClassificationMode.CODE_RANGE:
        return type_for_code(account.code)
    return parse_account_type(account.type)


@dataclass
class Classification:
    """Result of partitioning a list of accounts."""
    mode: ClassificationMode
    buckets: dict[AccountType, list] = field(default_factory=dict)
    unclassified: list = field(default_factory=list)

    def __getitem__(self, account_type: AccountType) -> list:
        return self.buckets[account_type]

    def classified(self) -> list:
        """Every account that landed in a bucket, ordered by code."""
        return _by_code(a for bucket in self.buckets.values() for a in bucket)


def partition(
    accounts: Iterable[A], mode: ClassificationMode = ClassificationMode.TYPE
) -> Classification:
    """
    Split accounts into the five buckets.

    Buckets are disjoint and, together with `unclassified`, cover
    the input exactly once.
    """
    result = Classification(
        mode=mode, buckets={account_type: [] for account_type in AccountType}
    )
    for account in accounts:
        account_type = classify(account, mode)
        if account_type is None:
            result.unclassified.append(account)
        else:
            result.buckets[account_type].append(account)

    for account_type, bucket in result.buckets.items():
        result.buckets[account_type] = _by_code(bucket)

    if result.unclassified:
        logger.warning(
            "accounts excluded from classification",
            mode=mode.value,
            codes=[a.code for a in result.unclassified],
        )
    return result
