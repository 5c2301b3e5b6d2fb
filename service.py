# service.py
"""
Order service: combines the repository and the LRU cache.

Reads go through the cache first; writes go to the repository and then the
cache.
"""

import logging

from cache import LRUCache
from repository import OrderNotFoundError, OrderRepository
from schemas import Order

logger = logging.getLogger(__name__)


class OrderService:
    """Business operations on orders."""

    def __init__(self, repository: OrderRepository, cache: LRUCache):
        self.repository = repository
        self.cache = cache

    def process_new_order(self, order: Order) -> None:
        """
        Store a new order and cache it.

        Raises:
            Exception: Whatever the repository raises; the order is not cached.
        """
        logger.info("Processing new order %s", order.order_uid)
        try:
            self.repository.save_order(order)
        except Exception as e:
            logger.error("Failed to save order %s: %s", order.order_uid, e)
            raise

        self.cache.set(order)
        logger.info("Order %s processed and cached", order.order_uid)

    def get_order_by_uid(self, order_uid: str) -> Order:
        """
        Fetch an order, preferring the cache.

        Raises:
            OrderNotFoundError: If the order does not exist.
        """
        order = self.cache.get(order_uid)
        if order is not None:
            logger.info("Order %s found in cache (cache hit)", order_uid)
            return order

        logger.info("Order %s not in cache (cache miss), fetching from repository", order_uid)
        try:
            order = self.repository.get_order_by_uid(order_uid)
        except OrderNotFoundError:
            logger.warning("Order %s not found in repository", order_uid)
            raise
        except Exception as e:
            logger.error("Failed to get order %s from repository: %s", order_uid, e)
            raise

        self.cache.set(order)
        return order

    def preload_cache(self, num_orders: int) -> int:
        """
        Warm the cache with the most recent orders.

        Returns:
            Number of orders loaded.
        """
        logger.info("Preloading cache with up to %d orders", num_orders)
        try:
            orders = self.repository.get_last_n_orders(num_orders)
        except Exception as e:
            logger.error("Failed to read last orders from repository: %s", e)
            raise

        self.cache.load_batch(orders)
        logger.info("Cache preloaded with %d orders", len(orders))
        return len(orders)
