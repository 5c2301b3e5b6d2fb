"""
In-memory repository tests.
"""

from datetime import datetime, timedelta, timezone

import pytest

from conftest import make_order
from repository import OrderNotFoundError, OrderRepository


def test_save_then_get_returns_copy(sample_order):
    repo = OrderRepository()
    repo.save_order(sample_order)

    got = repo.get_order_by_uid(sample_order.order_uid)
    got.items.clear()

    assert repo.get_order_by_uid(sample_order.order_uid).items


def test_save_upserts():
    repo = OrderRepository()
    repo.save_order(make_order("a"))
    repo.save_order(make_order("a", locale="ru"))

    assert repo.get_order_by_uid("a").locale == "ru"
    assert len(repo.get_last_n_orders(10)) == 1


def test_get_unknown_raises():
    with pytest.raises(OrderNotFoundError):
        OrderRepository().get_order_by_uid("nope")


def test_last_n_orders_newest_first():
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    repo = OrderRepository()
    repo.save_order(make_order("undated", date_created=None))
    for i in range(3):
        repo.save_order(make_order(f"o{i}", date_created=base + timedelta(hours=i)))

    uids = [o.order_uid for o in repo.get_last_n_orders(10)]

    assert uids == ["o2", "o1", "o0", "undated"]
    assert repo.get_last_n_orders(0) == []
