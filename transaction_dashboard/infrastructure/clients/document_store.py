"""Document store HTTP client for running transaction queries"""

import httpx
from typing import Any, Dict, List
from transaction_dashboard.domain.models import Transaction, TransactionQuery, validate_transaction_values
from transaction_dashboard.domain.exceptions import DocumentStoreError, InvalidTransactionDataError
from transaction_dashboard.utils.date_utils import parse_timestamp
from transaction_dashboard.config import settings


def transaction_from_document(doc_id: str, data: Dict[str, Any]) -> Transaction:
    """
    Merge a document id and its camelCase payload into a Transaction.

    Raises:
        KeyError, ValueError, TypeError: On missing or malformed fields
    """
    amount = validate_transaction_values(data["type"], data["status"], data["amount"])

    return Transaction(
        id=str(doc_id),
        type=data["type"],
        amount=amount,
        status=data["status"],
        description=data.get("description") or "",
        created_at=parse_timestamp(data["createdAt"]),
        buyer_id=data.get("buyerId"),
        buyer_name=data.get("buyerName"),
        seller_id=data.get("sellerId"),
        seller_name=data.get("sellerName"),
        property_id=data.get("propertyId"),
        property_title=data.get("propertyTitle"),
    )


def query_to_body(query: TransactionQuery) -> Dict[str, Any]:
    """Wire shape of a structured query"""
    return {
        "where": [{"field": f.field, "op": f.op, "value": f.value} for f in query.filters],
        "orderBy": [{"field": o.field, "direction": o.direction} for o in query.order_by],
    }


class DocumentStoreClient:
    """Client for the remote document store's structured query endpoint"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        api_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.document_store_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.api_key = api_key or settings.document_store_api_key
        self.transport = transport

    async def fetch(self, query: TransactionQuery) -> List[Transaction]:
        """
        Run a query and return the matching transactions in store order.

        Raises:
            DocumentStoreError: On timeout, HTTP errors (incl. permission denied), or network failure
            InvalidTransactionDataError: When a returned document cannot be parsed
        """
        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(
                    f"{self.base_url}/v1/collections/{query.collection}:query",
                    json=query_to_body(query),
                    headers=headers,
                )
                response.raise_for_status()
                data = response.json()
            except httpx.TimeoutException as e:
                raise DocumentStoreError(f"Document store timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise DocumentStoreError(f"Document store error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise DocumentStoreError(f"Document store unreachable: {e}") from e
            except ValueError as e:
                raise DocumentStoreError(f"Document store returned invalid JSON: {e}") from e

        try:
            return [
                transaction_from_document(doc["id"], doc["data"])
                for doc in data.get("documents", [])
            ]
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise InvalidTransactionDataError(f"Invalid transaction document from store: {e}") from e
