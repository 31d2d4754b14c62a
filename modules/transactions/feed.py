"""
Last-known product list for the transactions view
A failed refresh keeps showing the previous list instead of an empty table.
"""
import threading
from datetime import datetime, timezone


class TransactionFeed:

    def __init__(self):
        self._lock = threading.Lock()
        self._products = []
        self._fetched_at = None

    @property
    def products(self):
        with self._lock:
            return list(self._products)

    @property
    def fetched_at(self):
        return self._fetched_at

    @property
    def has_data(self):
        return self._fetched_at is not None

    def refresh(self, api):
        """Fetch all products through api and replace the snapshot.

        On failure the LedgerAPIError propagates and the old snapshot stays.
        """
        products = api.get_all_products()
        with self._lock:
            self._products = list(products)
            self._fetched_at = datetime.now(timezone.utc)
        return list(products)

    def clear(self):
        with self._lock:
            self._products = []
            self._fetched_at = None
