"""Dependency injection for FastAPI endpoints"""

from typing import Iterator, Optional
from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.orm import Session
from transaction_dashboard.config import settings
from transaction_dashboard.domain.dashboard import TransactionStore
from transaction_dashboard.domain.models import ROLE_BUYER, UserIdentity
from transaction_dashboard.infrastructure.clients.document_store import DocumentStoreClient
from transaction_dashboard.infrastructure.database.repositories import SqlTransactionStore
from transaction_dashboard.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_current_identity(
    x_user_id: Optional[str] = Header(default=None),
    x_user_role: Optional[str] = Header(default=None),
) -> UserIdentity:
    """
    Identity forwarded by the auth layer.

    No user id means signed out, and no fetch is attempted.
    """
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Not signed in")
    return UserIdentity(uid=x_user_id, role=(x_user_role or ROLE_BUYER).strip().lower())


def get_sql_session() -> Iterator[Optional[Session]]:
    """Database session only when the SQL backend is active"""
    if settings.store_backend != "sql":
        yield None
        return
    yield from get_db()


def get_transaction_store(db: Optional[Session] = Depends(get_sql_session)) -> TransactionStore:
    """Provide the configured transaction store"""
    if settings.store_backend == "http":
        return DocumentStoreClient()
    return SqlTransactionStore(db)
