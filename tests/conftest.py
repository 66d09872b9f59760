"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timedelta, timezone
from typing import Generator, List
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from transaction_dashboard.api.main import create_app
from transaction_dashboard.api.dependencies import get_sql_session
from transaction_dashboard.infrastructure.database.models import Base, TransactionRecord
from transaction_dashboard.domain.exceptions import DocumentStoreError
from transaction_dashboard.domain.models import Transaction, TransactionQuery


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class StaticStore:
    """In-memory TransactionStore returning a fixed list and recording queries"""

    def __init__(self, transactions: List[Transaction]):
        self.transactions = transactions
        self.queries: List[TransactionQuery] = []

    async def fetch(self, query: TransactionQuery) -> List[Transaction]:
        self.queries.append(query)
        return list(self.transactions)


class FailingStore:
    """TransactionStore that always fails like an unreachable document store"""

    def __init__(self):
        self.calls = 0

    async def fetch(self, query: TransactionQuery) -> List[Transaction]:
        self.calls += 1
        raise DocumentStoreError("connection refused")


class RecordingNotifier:
    def __init__(self):
        self.errors: List[str] = []

    def error(self, message: str) -> None:
        self.errors.append(message)


def make_transaction(
    id: str,
    type: str = "payment",
    amount: float = 100.0,
    status: str = "completed",
    description: str = "Transaction",
    created_at: datetime | None = None,
    **optional,
) -> Transaction:
    return Transaction(
        id=id,
        type=type,
        amount=amount,
        status=status,
        description=description,
        created_at=created_at or datetime(2026, 10, 14, 12, 0, tzinfo=timezone.utc),
        **optional,
    )


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def app(db: Session):
    """FastAPI app wired to the test database"""
    app = create_app()

    def override_get_sql_session():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_sql_session] = override_get_sql_session
    return app


@pytest.fixture
def client(app) -> TestClient:
    """Create FastAPI test client with test database"""
    return TestClient(app)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def marketplace_records(db: Session) -> List[TransactionRecord]:
    """
    Seed a small marketplace ledger.

    Admin sees 5 rows (880 SAR, 3 completed, 50 pending).
    Seller u_seller sees 4 rows, buyer u_buyer sees 2.
    """
    now = datetime.now(timezone.utc)
    records = [
        TransactionRecord(
            id="t1",
            type="payment",
            amount=100.0,
            status="completed",
            description="Monthly rent",
            buyer_id="u_buyer",
            buyer_name="Alice Buyer",
            seller_id="u_seller",
            seller_name="Sam Seller",
            property_id="p1",
            property_title="Palm Villa",
            created_at=now - timedelta(seconds=5),
        ),
        TransactionRecord(
            id="t2",
            type="refund",
            amount=50.0,
            status="pending",
            description="Deposit refund",
            buyer_id="u_buyer",
            buyer_name="Alice Buyer",
            seller_id="u_seller",
            seller_name="Sam Seller",
            property_id="p1",
            property_title="Palm Villa",
            created_at=now - timedelta(seconds=10),
        ),
        TransactionRecord(
            id="t3",
            type="payment",
            amount=200.0,
            status="completed",
            description="Booking fee",
            buyer_id="u_other",
            buyer_name="Olivia Other",
            seller_id="u_seller",
            seller_name="Sam Seller",
            property_id="p2",
            property_title="Sea View Flat",
            created_at=now - timedelta(seconds=15),
        ),
        TransactionRecord(
            id="t4",
            type="commission",
            amount=30.0,
            status="failed",
            description="Platform commission",
            seller_id="u_seller2",
            seller_name="Nora Seller",
            created_at=now - timedelta(days=400),
        ),
        TransactionRecord(
            id="t5",
            type="withdrawal",
            amount=500.0,
            status="completed",
            description="Payout to bank",
            seller_id="u_seller",
            seller_name="Sam Seller",
            created_at=now - timedelta(seconds=20),
        ),
    ]
    db.add_all(records)
    db.commit()
    return records
