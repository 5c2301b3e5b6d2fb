# cache.py
"""
In-process LRU cache of orders keyed by order_uid.

Shared by the Flask worker threads, so every operation takes the lock.
"""

import logging
import threading
from collections import OrderedDict

from schemas import Order

logger = logging.getLogger(__name__)


class LRUCache:
    """Least-recently-used cache with a fixed capacity."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        self._lock = threading.Lock()
        self._orders: OrderedDict[str, Order] = OrderedDict()

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)

    def set(self, order: Order) -> None:
        """Insert or refresh an order, evicting the least recent one when full."""
        if self.capacity <= 0:
            return
        with self._lock:
            uid = order.order_uid
            if uid in self._orders:
                self._orders.move_to_end(uid)
                self._orders[uid] = order
                return

            if len(self._orders) >= self.capacity:
                evicted, _ = self._orders.popitem(last=False)
                logger.debug("Evicted order %s from cache", evicted)

            self._orders[uid] = order

    def get(self, order_uid: str) -> Order | None:
        """Return the cached order and mark it most recently used."""
        with self._lock:
            order = self._orders.get(order_uid)
            if order is not None:
                self._orders.move_to_end(order_uid)
            return order

    def load_batch(self, orders: list[Order]) -> None:
        """
        Replace the cache contents with up to `capacity` orders.

        Orders are expected newest first; the first one ends up most recent.
        """
        with self._lock:
            self._orders = OrderedDict()
            for order in orders[: max(self.capacity, 0)]:
                self._orders[order.order_uid] = order
                self._orders.move_to_end(order.order_uid, last=False)
