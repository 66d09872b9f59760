"""Unit tests for the HTTP document store client"""

import json
import httpx
import pytest
from datetime import datetime, timezone
from transaction_dashboard.domain.exceptions import DocumentStoreError, InvalidTransactionDataError
from transaction_dashboard.domain.query import build_transactions_query
from transaction_dashboard.infrastructure.clients.document_store import (
    DocumentStoreClient,
    transaction_from_document,
)


DOCUMENTS = {
    "documents": [
        {
            "id": "tx_2",
            "data": {
                "type": "refund",
                "amount": 50,
                "status": "pending",
                "description": "Deposit refund",
                "buyerId": "b1",
                "buyerName": "Alice",
                "createdAt": "2026-10-18T10:00:00Z",
            },
        },
        {
            "id": "tx_1",
            "data": {
                "type": "payment",
                "amount": 1200.5,
                "status": "completed",
                "description": "Rent",
                "buyerId": "b1",
                "sellerId": "s1",
                "sellerName": "Sam",
                "propertyId": "p1",
                "propertyTitle": "Palm Villa",
                "createdAt": "2026-10-17T09:00:00+03:00",
            },
        },
    ]
}


def make_client(handler) -> DocumentStoreClient:
    return DocumentStoreClient(
        base_url="http://store.test",
        timeout=1.0,
        api_key="secret",
        transport=httpx.MockTransport(handler),
    )


async def test_fetch_sends_structured_query_and_parses_documents():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=DOCUMENTS)

    transactions = await make_client(handler).fetch(build_transactions_query("buyer", "b1"))

    assert seen["path"] == "/v1/collections/transactions:query"
    assert seen["auth"] == "Bearer secret"
    assert seen["body"] == {
        "where": [{"field": "buyerId", "op": "==", "value": "b1"}],
        "orderBy": [{"field": "createdAt", "direction": "desc"}],
    }
    assert [t.id for t in transactions] == ["tx_2", "tx_1"]
    assert transactions[0].seller_id is None
    assert transactions[1].amount == 1200.5
    assert transactions[1].property_title == "Palm Villa"
    assert transactions[1].created_at == datetime(2026, 10, 17, 6, 0, tzinfo=timezone.utc)


async def test_admin_query_sends_no_predicates():
    def handler(request: httpx.Request) -> httpx.Response:
        assert json.loads(request.content)["where"] == []
        return httpx.Response(200, json={"documents": []})

    assert await make_client(handler).fetch(build_transactions_query("admin", "a1")) == []


async def test_permission_denied_raises_store_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"error": "PERMISSION_DENIED"})

    with pytest.raises(DocumentStoreError, match="403"):
        await make_client(handler).fetch(build_transactions_query("seller", "s1"))


async def test_network_failure_raises_store_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(DocumentStoreError):
        await make_client(handler).fetch(build_transactions_query("seller", "s1"))


async def test_timeout_raises_store_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(DocumentStoreError, match="timeout"):
        await make_client(handler).fetch(build_transactions_query("seller", "s1"))


async def test_malformed_document_raises_invalid_data():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"documents": [{"id": "x", "data": {"type": "payment"}}]})

    with pytest.raises(InvalidTransactionDataError):
        await make_client(handler).fetch(build_transactions_query("admin", "a1"))


async def test_non_json_body_raises_store_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>oops</html>")

    with pytest.raises(DocumentStoreError):
        await make_client(handler).fetch(build_transactions_query("admin", "a1"))


def test_transaction_from_document_rejects_negative_amount():
    with pytest.raises(ValueError):
        transaction_from_document(
            "x",
            {"type": "payment", "amount": -5, "status": "completed", "createdAt": "2026-10-01T00:00:00Z"},
        )


@pytest.mark.parametrize("amount", [b"NaN", b"Infinity", b"-Infinity", b"true"])
async def test_non_finite_or_boolean_amount_raises_invalid_data(amount: bytes):
    body = (
        b'{"documents": [{"id": "1", "data": {"type": "payment", "amount": '
        + amount
        + b', "status": "completed", "description": "x", "createdAt": "2026-10-01T00:00:00Z"}}]}'
    )

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=body, headers={"Content-Type": "application/json"})

    with pytest.raises(InvalidTransactionDataError):
        await make_client(handler).fetch(build_transactions_query("admin", "a1"))


@pytest.mark.parametrize("field,value", [("type", "bonus"), ("status", "reversed")])
def test_transaction_from_document_rejects_unknown_enums(field: str, value: str):
    data = {"type": "payment", "amount": 5, "status": "completed", "createdAt": "2026-10-01T00:00:00Z"}
    data[field] = value

    with pytest.raises(ValueError):
        transaction_from_document("x", data)
