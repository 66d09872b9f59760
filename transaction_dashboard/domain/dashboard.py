"""Transaction history page controller: fetch, aggregate, and filter for one viewer"""

import logging
import time
from typing import List, Optional, Protocol
from transaction_dashboard.domain.models import (
    Transaction,
    TransactionQuery,
    TransactionStats,
    UserIdentity,
)
from transaction_dashboard.domain.query import DEFAULT_COLLECTION, build_transactions_query
from transaction_dashboard.domain.stats import compute_stats
from transaction_dashboard.domain.filtering import filter_transactions
from transaction_dashboard.domain.exceptions import DocumentStoreError
from transaction_dashboard.infrastructure.observability.metrics import (
    store_fetch_failures_counter,
    store_fetch_latency_histogram,
)

LOAD_FAILED_MESSAGE = "Failed to load transactions"


class TransactionStore(Protocol):
    """Anything that can run a TransactionQuery (HTTP document store, SQL table)"""

    async def fetch(self, query: TransactionQuery) -> List[Transaction]:
        ...


class Notifier(Protocol):
    """Fire-and-forget user notification channel"""

    def error(self, message: str) -> None:
        ...


class TransactionHistoryPage:
    """
    Page state for the transaction dashboard.

    A fetch is triggered by every identity change. Each reload takes a new
    generation number; a response whose generation is no longer current is
    dropped instead of overwriting newer state.
    """

    def __init__(
        self,
        store: TransactionStore,
        notifier: Notifier,
        collection: str = DEFAULT_COLLECTION,
        request_id: str = "unknown",
    ):
        self.store = store
        self.notifier = notifier
        self.collection = collection
        self.request_id = request_id

        self.identity: Optional[UserIdentity] = None
        self.transactions: List[Transaction] = []
        self.stats = TransactionStats()
        self.loading = False
        self.last_load_failed = False
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    async def set_identity(self, identity: Optional[UserIdentity]) -> None:
        """React to sign-in, sign-out, or a switch of viewer"""
        if identity == self.identity:
            return

        self.identity = identity
        if identity is None:
            # Signed out: invalidate anything in flight and show nothing
            self._generation += 1
            self._reset()
            self.loading = False
            return

        await self.reload()

    async def reload(self) -> bool:
        """
        Fetch the role-scoped set for the current identity.

        Returns True when the result (or failure) was applied, False when the
        call was superseded by a newer reload or there is no identity.
        """
        if self.identity is None:
            return False

        self._generation += 1
        generation = self._generation
        identity = self.identity
        self.loading = True

        query = build_transactions_query(identity.role, identity.uid, self.collection)
        start_time = time.time()

        try:
            transactions = await self.store.fetch(query)
        except DocumentStoreError as e:
            if generation != self._generation:
                return False
            logging.error(f"Error fetching transactions: {e}", extra={"request_id": self.request_id})
            self._fail()
            return True
        except Exception as e:
            if generation != self._generation:
                return False
            logging.error(f"Unexpected error fetching transactions: {e}", extra={"request_id": self.request_id})
            self._fail()
            return True
        finally:
            store_fetch_latency_histogram.observe(time.time() - start_time)

        if generation != self._generation:
            logging.info(
                "Discarding superseded transaction fetch",
                extra={"request_id": self.request_id, "user_id": identity.uid},
            )
            return False

        self.transactions = transactions
        self.stats = compute_stats(transactions)
        self.last_load_failed = False
        self.loading = False
        return True

    def view(
        self,
        type_filter: str = "all",
        search: str = "",
        date_range: Optional[str] = None,
    ) -> List[Transaction]:
        """Rows for the table; stats are unaffected by these filters"""
        return filter_transactions(self.transactions, type_filter, search, date_range)

    def _fail(self) -> None:
        """Empty page, one notification, loading cleared"""
        store_fetch_failures_counter.inc()
        self._reset()
        self.last_load_failed = True
        self.notifier.error(LOAD_FAILED_MESSAGE)
        self.loading = False

    def _reset(self) -> None:
        self.transactions = []
        self.stats = TransactionStats()
