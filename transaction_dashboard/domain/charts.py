"""Daily chart series for the dashboard volume and count charts"""

from datetime import date, datetime, timedelta, timezone
from typing import Dict, List, Optional
from transaction_dashboard.domain.models import ChartPoint, Transaction
from transaction_dashboard.utils.date_utils import generate_date_range


def build_daily_series(
    transactions: List[Transaction],
    end: Optional[date] = None,
    days: int = 7,
) -> List[ChartPoint]:
    """
    Bucket transactions by UTC calendar day for the `days` days ending at `end` (default: today in UTC).

    Points are oldest first and named by weekday ("Mon".."Sun").
    Days without activity are zero-filled so the series always has `days` points.
    """
    if days <= 0:
        return []

    if end is None:
        end = datetime.now(timezone.utc).date()
    start = end - timedelta(days=days - 1)

    amount_by_day: Dict[date, float] = {}
    count_by_day: Dict[date, int] = {}
    for txn in transactions:
        day = txn.created_at.astimezone(timezone.utc).date()
        if start <= day <= end:
            amount_by_day[day] = amount_by_day.get(day, 0.0) + txn.amount
            count_by_day[day] = count_by_day.get(day, 0) + 1

    return [
        ChartPoint(
            name=day.strftime("%a"),
            amount=amount_by_day.get(day, 0.0),
            count=count_by_day.get(day, 0),
        )
        for day in generate_date_range(start, end)
    ]
