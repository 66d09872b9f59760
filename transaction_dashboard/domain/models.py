"""Domain models - pure Python dataclasses representing business entities"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

ROLE_ADMIN = "admin"
ROLE_SELLER = "seller"
ROLE_BUYER = "buyer"

TRANSACTION_TYPES = ("payment", "refund", "commission", "withdrawal")
TRANSACTION_STATUSES = ("completed", "pending", "failed")


@dataclass(frozen=True)
class UserIdentity:
    """Signed-in viewer as supplied by the auth layer"""

    uid: str
    role: str  # "admin" | "seller" | anything else is a buyer


@dataclass
class Transaction:
    """Transaction record owned by the document store (read-only here)"""

    id: str
    type: str  # payment | refund | commission | withdrawal
    amount: float  # SAR, never negative
    status: str  # completed | pending | failed
    description: str
    created_at: datetime
    buyer_id: Optional[str] = None
    buyer_name: Optional[str] = None
    seller_id: Optional[str] = None
    seller_name: Optional[str] = None
    property_id: Optional[str] = None
    property_title: Optional[str] = None


@dataclass
class TransactionStats:
    """Summary cards, recomputed on every fetch"""

    total_transactions: int = 0
    total_amount: float = 0.0
    success_rate: float = 0.0
    pending_amount: float = 0.0


@dataclass(frozen=True)
class FieldFilter:
    """Single equality-style predicate against a document field"""

    field: str
    op: str
    value: Any


@dataclass(frozen=True)
class OrderBy:
    field: str
    direction: str = "desc"


@dataclass(frozen=True)
class TransactionQuery:
    """Store-agnostic description of which documents to read"""

    collection: str
    filters: List[FieldFilter] = field(default_factory=list)
    order_by: List[OrderBy] = field(default_factory=list)


@dataclass
class ChartPoint:
    """One bucket of a dashboard chart series"""

    name: str
    amount: float
    count: int


@dataclass(frozen=True)
class Notification:
    """User-facing message surfaced alongside the dashboard payload"""

    level: str
    message: str


def validate_transaction_values(type: str, status: str, amount: Any) -> float:
    """
    Check the enum fields and amount of a stored transaction.

    Returns the amount as a float.

    Raises:
        ValueError: Unknown type or status, or an amount that is boolean, non-finite or negative
    """
    if type not in TRANSACTION_TYPES:
        raise ValueError(f"unknown transaction type {type!r}")
    if status not in TRANSACTION_STATUSES:
        raise ValueError(f"unknown transaction status {status!r}")
    if isinstance(amount, bool):
        raise ValueError(f"boolean amount {amount!r}")

    value = float(amount)
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"invalid amount {amount!r}")
    return value
