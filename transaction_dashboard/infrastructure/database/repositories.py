"""Data access layer for transactions stored in SQL"""

from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from transaction_dashboard.infrastructure.database.models import TransactionRecord
from transaction_dashboard.domain.models import Transaction, TransactionQuery, validate_transaction_values
from transaction_dashboard.domain.exceptions import DocumentStoreError, InvalidTransactionDataError
from transaction_dashboard.utils.date_utils import parse_timestamp

# Document field name -> mapped column
FIELD_COLUMNS = {
    "id": TransactionRecord.id,
    "type": TransactionRecord.type,
    "amount": TransactionRecord.amount,
    "status": TransactionRecord.status,
    "buyerId": TransactionRecord.buyer_id,
    "sellerId": TransactionRecord.seller_id,
    "propertyId": TransactionRecord.property_id,
    "createdAt": TransactionRecord.created_at,
}


def record_to_transaction(record: TransactionRecord) -> Transaction:
    """
    Map an ORM row onto the domain model.

    Raises:
        InvalidTransactionDataError: Unknown type or status, or a bad amount or timestamp
    """
    try:
        amount = validate_transaction_values(record.type, record.status, record.amount)
        created_at = parse_timestamp(record.created_at)
    except (ValueError, TypeError, AttributeError) as e:
        raise InvalidTransactionDataError(f"Transaction {record.id} is malformed: {e}") from e

    return Transaction(
        id=record.id,
        type=record.type,
        amount=amount,
        status=record.status,
        description=record.description or "",
        created_at=created_at,
        buyer_id=record.buyer_id,
        buyer_name=record.buyer_name,
        seller_id=record.seller_id,
        seller_name=record.seller_name,
        property_id=record.property_id,
        property_title=record.property_title,
    )


class TransactionRepository:
    """Repository translating TransactionQuery objects into SQL"""

    def __init__(self, db: Session):
        self.db = db

    def run_query(self, query: TransactionQuery) -> List[TransactionRecord]:
        """
        Execute the query's predicates and ordering; no limit is applied.

        Raises:
            DocumentStoreError: For fields or operators the table does not support
        """
        if query.collection != TransactionRecord.__tablename__:
            raise DocumentStoreError(f"Unknown collection: {query.collection}")

        sql_query = self.db.query(TransactionRecord)

        for predicate in query.filters:
            column = FIELD_COLUMNS.get(predicate.field)
            if column is None:
                raise DocumentStoreError(f"Unsupported filter field: {predicate.field}")
            if predicate.op != "==":
                raise DocumentStoreError(f"Unsupported filter operator: {predicate.op}")
            sql_query = sql_query.filter(column == predicate.value)

        for order in query.order_by:
            column = FIELD_COLUMNS.get(order.field)
            if column is None:
                raise DocumentStoreError(f"Unsupported order field: {order.field}")
            sql_query = sql_query.order_by(column.desc() if order.direction == "desc" else column.asc())

        return sql_query.all()


class SqlTransactionStore:
    """TransactionStore backed by a SQL table instead of a remote document store"""

    def __init__(self, db: Session):
        self.repository = TransactionRepository(db)

    def fetch_sync(self, query: TransactionQuery) -> List[Transaction]:
        try:
            records = self.repository.run_query(query)
        except SQLAlchemyError as e:
            raise DocumentStoreError(f"Database error: {e}") from e
        except (ValueError, TypeError) as e:
            # Result processors reject unparseable stored values while loading rows
            raise InvalidTransactionDataError(f"Malformed transaction row: {e}") from e
        return [record_to_transaction(r) for r in records]

    async def fetch(self, query: TransactionQuery) -> List[Transaction]:
        return await run_in_threadpool(self.fetch_sync, query)
