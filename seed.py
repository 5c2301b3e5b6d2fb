# file: seed.py
"""
Demo order generator.

Produces reproducible fake orders as JSON messages, the same shape the order
API serves, so they can be fed through ingestion at startup.
"""

import random
import uuid
from datetime import datetime, timezone

from faker import Faker
from faker_commerce import Provider as CommerceProvider

from schemas import Delivery, Item, Order, Payment

CURRENCIES = ["USD", "EUR", "RUB"]
PROVIDERS = ["wbpay", "sbp", "cardpay"]
BANKS = ["alpha", "sber", "tinkoff"]
DELIVERY_SERVICES = ["meest", "cdek", "boxberry"]
CREATED_FROM = datetime(2024, 1, 1, tzinfo=timezone.utc)
CREATED_TO = datetime(2025, 1, 1, tzinfo=timezone.utc)


def generate_order(fake: Faker, rng: random.Random) -> Order:
    """Generate a single valid order with 1-4 items."""
    order_uid = uuid.UUID(int=rng.getrandbits(128)).hex[:19]
    track_number = "WBIL" + fake.bothify("????####").upper()

    items = []
    for _ in range(rng.randint(1, 4)):
        price = rng.randint(100, 10000)
        sale = rng.randint(0, 50)
        items.append(
            Item(
                chrt_id=rng.randint(1_000_000, 9_999_999),
                track_number=track_number,
                price=price,
                rid=uuid.UUID(int=rng.getrandbits(128)).hex[:21],
                name=fake.ecommerce_name(),
                sale=sale,
                size=str(rng.choice([0, 42, 44, 46])),
                total_price=price * (100 - sale) // 100,
                nm_id=rng.randint(1_000_000, 9_999_999),
                brand=fake.company(),
                status=202,
            )
        )

    goods_total = sum(i.total_price for i in items)
    delivery_cost = rng.randint(0, 1500)
    created = fake.date_time_between(
        start_date=CREATED_FROM, end_date=CREATED_TO, tzinfo=timezone.utc
    )

    return Order(
        order_uid=order_uid,
        track_number=track_number,
        entry="WBIL",
        delivery=Delivery(
            name=fake.name(),
            phone=fake.numerify("+97#########"),
            zip=fake.postcode(),
            city=fake.city(),
            address=fake.street_address(),
            region=fake.state(),
            email=fake.email(),
        ),
        payment=Payment(
            transaction=order_uid,
            request_id="",
            currency=rng.choice(CURRENCIES),
            provider=rng.choice(PROVIDERS),
            amount=goods_total + delivery_cost,
            payment_dt=int(created.timestamp()),
            bank=rng.choice(BANKS),
            delivery_cost=delivery_cost,
            goods_total=goods_total,
            custom_fee=0,
        ),
        items=items,
        locale=rng.choice(["en", "ru"]),
        internal_signature="",
        customer_id=fake.user_name(),
        delivery_service=rng.choice(DELIVERY_SERVICES),
        shardkey=str(rng.randint(0, 9)),
        sm_id=rng.randint(1, 100),
        date_created=created,
        oof_shard=str(rng.randint(0, 9)),
    )


def generate_messages(count: int, seed: int = 42) -> list[str]:
    """Generate `count` orders as JSON messages. Same seed, same orders."""
    fake = Faker("en_US")
    fake.add_provider(CommerceProvider)
    fake.seed_instance(seed)
    # faker_commerce draws from the module-level random
    random.seed(seed)
    rng = random.Random(seed)
    return [generate_order(fake, rng).model_dump_json() for _ in range(count)]


if __name__ == "__main__":
    messages = generate_messages(3)
    print(f"Generated {len(messages)} orders")
    print(f"Sample order: {messages[0]}")
