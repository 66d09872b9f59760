"""Display formatting for stat cards, table rows and exports"""

from datetime import datetime
from typing import List, Dict
from transaction_dashboard.domain.models import Transaction, TransactionStats

STATUS_TONES = {
    "completed": "success",
    "pending": "warning",
    "failed": "error",
}

# Money coming in to the platform renders green, everything else amber
INCOMING_TYPES = ("payment", "commission")


def format_amount(amount: float, currency: str = "SAR") -> str:
    """Group thousands and keep at most two decimals: 12500.5 -> '12,500.5 SAR'"""
    text = f"{amount:,.2f}".rstrip("0").rstrip(".")
    return f"{text} {currency}"


def format_signed_amount(transaction: Transaction, currency: str = "SAR") -> str:
    sign = "-" if transaction.type == "refund" else "+"
    return f"{sign}{format_amount(transaction.amount, currency)}"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def format_date(value: datetime) -> str:
    """'Oct 19, 2026'"""
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def status_tone(status: str) -> str:
    return STATUS_TONES.get(status, "neutral")


def amount_tone(transaction_type: str) -> str:
    return "success" if transaction_type in INCOMING_TYPES else "warning"


def build_stat_cards(stats: TransactionStats, currency: str = "SAR") -> List[Dict[str, str]]:
    """The four summary cards in page order"""
    return [
        {
            "key": "total_transactions",
            "title": "Total Transactions",
            "value": str(stats.total_transactions),
            "tone": "primary",
        },
        {
            "key": "total_amount",
            "title": "Total Amount",
            "value": format_amount(stats.total_amount, currency),
            "tone": "success",
        },
        {
            "key": "success_rate",
            "title": "Success Rate",
            "value": format_percentage(stats.success_rate),
            "tone": "accent",
        },
        {
            "key": "pending_amount",
            "title": "Pending Amount",
            "value": format_amount(stats.pending_amount, currency),
            "tone": "warning",
        },
    ]
