# repository.py
"""In-memory order storage."""

import logging
import threading

from schemas import Order

logger = logging.getLogger(__name__)


class OrderNotFoundError(Exception):
    """Raised when no order exists for the requested order_uid."""

    pass


def _created_ts(order: Order) -> float:
    return order.date_created.timestamp() if order.date_created else float("-inf")


class OrderRepository:
    """Thread-safe store of orders keyed by order_uid."""

    def __init__(self):
        self._lock = threading.Lock()
        self._orders: dict[str, Order] = {}

    def save_order(self, order: Order) -> None:
        """Insert the order, replacing any previous version with the same uid."""
        with self._lock:
            self._orders[order.order_uid] = order.model_copy(deep=True)
        logger.debug("Saved order %s", order.order_uid)

    def get_order_by_uid(self, order_uid: str) -> Order:
        """
        Fetch a single order.

        Raises:
            OrderNotFoundError: If the uid is unknown.
        """
        with self._lock:
            order = self._orders.get(order_uid)
        if order is None:
            raise OrderNotFoundError(f"order {order_uid} not found")
        return order.model_copy(deep=True)

    def get_last_n_orders(self, num_orders: int) -> list[Order]:
        """Return up to num_orders orders, newest date_created first."""
        if num_orders <= 0:
            return []
        with self._lock:
            orders = list(self._orders.values())
        orders.sort(key=_created_ts, reverse=True)
        return [o.model_copy(deep=True) for o in orders[:num_orders]]
