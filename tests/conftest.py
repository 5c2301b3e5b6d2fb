"""
Pytest configuration and shared fixtures for the test suite.

Provides a valid sample order, a wired OrderService and a Flask test client.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Project modules live at the repository root
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from cache import LRUCache  # noqa: E402
from order_api import create_app  # noqa: E402
from repository import OrderRepository  # noqa: E402
from schemas import Delivery, Item, Order, Payment  # noqa: E402
from service import OrderService  # noqa: E402


def make_order(order_uid: str = "b563feb7b2b84b6test", **overrides) -> Order:
    """Build a valid order; keyword overrides replace top-level fields."""
    order = Order(
        order_uid=order_uid,
        track_number="WBILMTESTTRACK",
        entry="WBIL",
        delivery=Delivery(
            name="Test Testov",
            phone="+9720000000",
            zip="2639809",
            city="Kiryat Mozkin",
            address="Ploshad Mira 15",
            region="Kraiot",
            email="test@gmail.com",
        ),
        payment=Payment(
            transaction=order_uid,
            request_id="",
            currency="USD",
            provider="wbpay",
            amount=1817,
            payment_dt=1637907727,
            bank="alpha",
            delivery_cost=1500,
            goods_total=317,
            custom_fee=0,
        ),
        items=[
            Item(
                chrt_id=9934930,
                track_number="WBILMTESTTRACK",
                price=453,
                rid="ab4219087a764ae0btest",
                name="Mascaras",
                sale=30,
                size="0",
                total_price=317,
                nm_id=2389212,
                brand="Vivienne Sabo",
                status=202,
            )
        ],
        locale="en",
        internal_signature="",
        customer_id="test",
        delivery_service="meest",
        shardkey="9",
        sm_id=99,
        date_created=datetime(2021, 11, 26, 6, 22, 19, tzinfo=timezone.utc),
        oof_shard="1",
    )
    return order.model_copy(update=overrides)


@pytest.fixture
def sample_order() -> Order:
    return make_order()


@pytest.fixture
def service() -> OrderService:
    return OrderService(OrderRepository(), LRUCache(10))


@pytest.fixture
def api_client(service):
    app = create_app(service)
    app.config["TESTING"] = True
    return app.test_client()
