# file: order_api.py
"""
Flask HTTP API serving orders by uid.

Usage:
    python order_api.py
"""

import logging

from flask import Flask, jsonify

import config
from cache import LRUCache
from ingest import OrderIngestor
from repository import OrderNotFoundError, OrderRepository
from seed import generate_messages
from service import OrderService
from utils import setup_logging

logger = logging.getLogger(__name__)


def create_app(service: OrderService) -> Flask:
    """Build the Flask app around an OrderService."""
    app = Flask(__name__)

    @app.route("/order/", defaults={"order_uid": ""}, methods=["GET"])
    @app.route("/order/<path:order_uid>", methods=["GET"])
    def get_order_by_uid(order_uid):
        """Return the order as JSON, or an {"error": ...} body."""
        if not order_uid.strip():
            return jsonify({"error": "order_uid is required"}), 400

        try:
            order = service.get_order_by_uid(order_uid)
        except OrderNotFoundError:
            logger.info("Order %s not found", order_uid)
            return jsonify({"error": "Order not found"}), 404
        except Exception:
            logger.exception("Failed to get order %s", order_uid)
            return jsonify({"error": "Internal server error"}), 500

        return jsonify(order.to_json_dict())

    return app


def build_service(seed_count: int = config.SEED_ORDERS) -> tuple[OrderService, OrderIngestor]:
    """
    Wire repository, cache and service, seed demo orders and preload the cache.

    Args:
        seed_count: Number of demo orders to ingest.

    Returns:
        Tuple of (service, ingestor).
    """
    service = OrderService(OrderRepository(), LRUCache(config.CACHE_CAPACITY))
    ingestor = OrderIngestor(service)

    for message in generate_messages(seed_count):
        ingestor.process_message(message)
    logger.info(
        "Seeded %d orders (%d dead-lettered)", seed_count, len(ingestor.dead_letters)
    )

    try:
        service.preload_cache(config.CACHE_PRELOAD_LIMIT)
    except Exception as e:
        logger.error("Failed to preload cache: %s", e)

    return service, ingestor


def run_server() -> None:
    """Seed, preload and serve until interrupted."""
    service, _ = build_service()
    app = create_app(service)
    logger.info("Starting HTTP server on %s:%d", config.HTTP_HOST, config.HTTP_PORT)
    app.run(host=config.HTTP_HOST, port=config.HTTP_PORT)


if __name__ == "__main__":
    setup_logging()
    run_server()
