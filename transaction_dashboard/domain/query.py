"""Role-scoped transaction query selection"""

from transaction_dashboard.domain.models import (
    ROLE_ADMIN,
    ROLE_SELLER,
    FieldFilter,
    OrderBy,
    TransactionQuery,
)

DEFAULT_COLLECTION = "transactions"


def build_transactions_query(role: str, uid: str, collection: str = DEFAULT_COLLECTION) -> TransactionQuery:
    """
    Choose which slice of the transaction collection a viewer may see.

    Scoping rules:
    - admin:  every record
    - seller: records where sellerId == uid
    - other:  records where buyerId == uid (buyer is the fallback role)

    All queries are ordered newest first and carry no limit.
    """
    if role == ROLE_ADMIN:
        filters = []
    elif role == ROLE_SELLER:
        filters = [FieldFilter(field="sellerId", op="==", value=uid)]
    else:
        filters = [FieldFilter(field="buyerId", op="==", value=uid)]

    return TransactionQuery(
        collection=collection,
        filters=filters,
        order_by=[OrderBy(field="createdAt", direction="desc")],
    )
