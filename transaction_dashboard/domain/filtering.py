"""Table filters applied to the already-fetched transaction set"""

from datetime import datetime, timezone
from typing import List, Optional
from transaction_dashboard.domain.models import TRANSACTION_TYPES, Transaction
from transaction_dashboard.domain.exceptions import InvalidFilterError
from transaction_dashboard.utils.date_utils import parse_timestamp, period_start

TYPE_FILTERS = ("all",) + TRANSACTION_TYPES
DATE_RANGES = ("week", "month", "year")


def matches_search(transaction: Transaction, search: str) -> bool:
    """Case-insensitive substring match on the human-readable fields"""
    needle = search.lower()
    haystacks = (
        transaction.description,
        transaction.property_title,
        transaction.buyer_name,
        transaction.seller_name,
    )
    return any(needle in text.lower() for text in haystacks if text)


def filter_transactions(
    transactions: List[Transaction],
    type_filter: str = "all",
    search: str = "",
    date_range: Optional[str] = None,
    now: Optional[datetime] = None,
) -> List[Transaction]:
    """
    Narrow the fetched records for table display.

    Type, search and date range all have to match (logical AND). The date range
    keeps records created since the start of the current week, month or year.
    The input list is never mutated.
    """
    if type_filter not in TYPE_FILTERS:
        raise InvalidFilterError(f"Unknown transaction type filter: {type_filter}")
    if date_range is not None and date_range not in DATE_RANGES:
        raise InvalidFilterError(f"Unknown date range: {date_range}")

    search = (search or "").strip()
    since = None
    if date_range is not None:
        since = period_start(date_range, parse_timestamp(now or datetime.now(timezone.utc)))

    filtered = []
    for transaction in transactions:
        if type_filter != "all" and transaction.type != type_filter:
            continue
        if search and not matches_search(transaction, search):
            continue
        if since is not None and transaction.created_at < since:
            continue
        filtered.append(transaction)

    return filtered
