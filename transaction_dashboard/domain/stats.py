"""Summary statistics over the role-scoped transaction set"""

from typing import List
from transaction_dashboard.domain.models import Transaction, TransactionStats


def compute_stats(transactions: List[Transaction]) -> TransactionStats:
    """
    Reduce fetched records to the four dashboard numbers.

    No rounding happens here; formatting is a display concern.
    An empty set reports a success rate of 0.0 instead of dividing by zero.
    """
    total_transactions = len(transactions)
    total_amount = sum((t.amount for t in transactions), 0.0)
    completed_count = sum(1 for t in transactions if t.status == "completed")
    pending_amount = sum((t.amount for t in transactions if t.status == "pending"), 0.0)

    success_rate = 100 * completed_count / total_transactions if total_transactions > 0 else 0.0

    return TransactionStats(
        total_transactions=total_transactions,
        total_amount=total_amount,
        success_rate=success_rate,
        pending_amount=pending_amount,
    )
