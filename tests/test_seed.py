"""
Demo data generator tests.
"""

import json
import random

from seed import generate_messages


def item_names(messages: list[str]) -> list[str]:
    return [item["name"] for m in messages for item in json.loads(m)["items"]]


def test_same_seed_gives_same_item_names():
    first = generate_messages(5, seed=7)
    random.seed()
    second = generate_messages(5, seed=7)

    assert item_names(first) == item_names(second)
    assert first == second


def test_different_seeds_give_different_orders():
    assert generate_messages(3, seed=1) != generate_messages(3, seed=2)
