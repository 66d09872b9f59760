"""GET /v1/transactions - role-scoped transaction dashboard and CSV export"""

import csv
import io
import time
import logging
from datetime import datetime, timezone
from typing import List, Literal, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from starlette.responses import Response

from transaction_dashboard.api.v1.schemas import (
    ChartPointSchema,
    ChartSchema,
    NotificationSchema,
    StatCardSchema,
    StatsSchema,
    TransactionDashboardResponse,
    TransactionRow,
)
from transaction_dashboard.api.dependencies import get_current_identity, get_request_id, get_transaction_store
from transaction_dashboard.config import settings
from transaction_dashboard.domain.charts import build_daily_series
from transaction_dashboard.domain.dashboard import TransactionHistoryPage, TransactionStore
from transaction_dashboard.domain.exceptions import InvalidFilterError
from transaction_dashboard.domain.formatting import (
    amount_tone,
    build_stat_cards,
    format_date,
    format_signed_amount,
    status_tone,
)
from transaction_dashboard.domain.models import Transaction, UserIdentity
from transaction_dashboard.infrastructure.notifications import CollectingNotifier
from transaction_dashboard.infrastructure.observability.logging import log_dashboard_load
from transaction_dashboard.infrastructure.observability.metrics import record_dashboard_load, record_export

router = APIRouter()

TypeFilter = Literal["all", "payment", "refund", "commission", "withdrawal"]
DateRange = Literal["week", "month", "year"]

EXPORT_COLUMNS = [
    "id",
    "date",
    "type",
    "description",
    "property",
    "buyer",
    "seller",
    "amount",
    "currency",
    "status",
]


def to_row(transaction: Transaction) -> TransactionRow:
    return TransactionRow(
        id=transaction.id,
        type=transaction.type,
        amount=transaction.amount,
        status=transaction.status,
        description=transaction.description,
        created_at=transaction.created_at,
        buyer_id=transaction.buyer_id,
        buyer_name=transaction.buyer_name,
        seller_id=transaction.seller_id,
        seller_name=transaction.seller_name,
        property_id=transaction.property_id,
        property_title=transaction.property_title,
        display_amount=format_signed_amount(transaction, settings.currency),
        display_date=format_date(transaction.created_at),
        amount_tone=amount_tone(transaction.type),
        status_tone=status_tone(transaction.status),
    )


def build_charts(transactions: List[Transaction]) -> List[ChartSchema]:
    """Volume (area) and count (bar) over the last seven days"""
    points = [
        ChartPointSchema(name=p.name, amount=p.amount, count=p.count)
        for p in build_daily_series(transactions, end=datetime.now(timezone.utc).date())
    ]
    return [
        ChartSchema(
            title="Transaction Volume",
            subtitle="Daily transaction volume",
            type="area",
            data_key="amount",
            data=points,
        ),
        ChartSchema(
            title="Transaction Count",
            subtitle="Number of transactions",
            type="bar",
            data_key="count",
            data=points,
        ),
    ]


def apply_filters(
    page: TransactionHistoryPage,
    type_filter: str,
    search: str,
    date_range: Optional[str],
) -> List[Transaction]:
    try:
        return page.view(type_filter, search, date_range)
    except InvalidFilterError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/transactions", response_model=TransactionDashboardResponse)
async def get_transactions_dashboard(
    request: Request,
    type: TypeFilter = Query("all", description="Transaction type filter"),
    search: str = Query("", description="Free-text search over description, property and participants"),
    date_range: Optional[DateRange] = Query(None, description="Restrict table to this week, month, or year"),
    identity: UserIdentity = Depends(get_current_identity),
    store: TransactionStore = Depends(get_transaction_store),
):
    """
    Dashboard payload for the signed-in viewer.

    Flow:
    1. Build the role-scoped query and fetch from the document store
    2. Compute summary stats and chart series over the whole fetched set
    3. Filter the table by type, search text and date range
    4. On store failure, return an empty dashboard with one error notification
    """
    start_time = time.time()
    request_id = get_request_id(request)

    notifier = CollectingNotifier(request_id)
    page = TransactionHistoryPage(
        store,
        notifier,
        collection=settings.transactions_collection,
        request_id=request_id,
    )
    await page.set_identity(identity)

    rows = apply_filters(page, type, search, date_range)

    duration_ms = (time.time() - start_time) * 1000
    record_dashboard_load(identity.role, page.last_load_failed)
    log_dashboard_load(
        request_id,
        identity.uid,
        identity.role,
        len(page.transactions),
        len(rows),
        page.last_load_failed,
        duration_ms,
    )

    return TransactionDashboardResponse(
        user_id=identity.uid,
        role=identity.role,
        loading=page.loading,
        currency=settings.currency,
        stats=StatsSchema(
            total_transactions=page.stats.total_transactions,
            total_amount=page.stats.total_amount,
            success_rate=page.stats.success_rate,
            pending_amount=page.stats.pending_amount,
        ),
        cards=[StatCardSchema(**card) for card in build_stat_cards(page.stats, settings.currency)],
        charts=build_charts(page.transactions),
        total_count=page.stats.total_transactions,
        transactions=[to_row(t) for t in rows],
        notifications=[NotificationSchema(level=n.level, message=n.message) for n in notifier.notifications],
    )


@router.get("/transactions/export")
async def export_transactions(
    request: Request,
    type: TypeFilter = Query("all", description="Transaction type filter"),
    search: str = Query("", description="Free-text search over description, property and participants"),
    date_range: Optional[DateRange] = Query(None, description="Restrict export to this week, month, or year"),
    identity: UserIdentity = Depends(get_current_identity),
    store: TransactionStore = Depends(get_transaction_store),
):
    """
    Download the filtered transaction table as CSV.

    Returns:
        text/csv attachment, one row per transaction, newest first
    """
    request_id = get_request_id(request)
    notifier = CollectingNotifier(request_id)
    page = TransactionHistoryPage(
        store,
        notifier,
        collection=settings.transactions_collection,
        request_id=request_id,
    )
    await page.set_identity(identity)

    if page.last_load_failed:
        raise HTTPException(status_code=503, detail="Transaction store unavailable")

    rows = apply_filters(page, type, search, date_range)

    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(EXPORT_COLUMNS)
    for t in rows:
        writer.writerow(
            [
                t.id,
                t.created_at.isoformat(),
                t.type,
                t.description,
                t.property_title or "",
                t.buyer_name or "",
                t.seller_name or "",
                f"{t.amount:.2f}",
                settings.currency,
                t.status,
            ]
        )

    record_export(identity.role)
    logging.info(
        "Transactions exported",
        extra={"request_id": request_id, "user_id": identity.uid, "row_count": len(rows)},
    )

    filename = f"transactions-{datetime.now(timezone.utc).strftime('%Y%m%d')}.csv"
    return Response(
        content=buffer.getvalue(),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
