"""
Ingestion tests: decoding, validation and dead-lettering.
"""

from unittest.mock import MagicMock

import pytest

from ingest import OrderIngestor
from repository import OrderNotFoundError
from seed import generate_messages


def test_valid_message_is_stored(service, sample_order):
    ingestor = OrderIngestor(service)

    order = ingestor.process_message(sample_order.model_dump_json().encode())

    assert order == sample_order
    assert service.get_order_by_uid(sample_order.order_uid) == sample_order
    assert ingestor.dead_letters == []


@pytest.mark.parametrize("raw", [b"{not json", b"[1, 2, 3]", '{"sm_id": "many"}'])
def test_undecodable_message_is_dead_lettered(service, raw):
    ingestor = OrderIngestor(service)

    assert ingestor.process_message(raw) is None

    assert len(ingestor.dead_letters) == 1
    letter = ingestor.dead_letters[0]
    assert letter.error_reason == "json_unmarshal_failed"
    assert letter.error_details


def test_invalid_order_is_dead_lettered(service, sample_order):
    sample_order.payment.transaction = "mismatch"
    ingestor = OrderIngestor(service)

    assert ingestor.process_message(sample_order.model_dump_json()) is None

    letter = ingestor.dead_letters[0]
    assert letter.error_reason == "validation_failed"
    assert letter.order_uid == sample_order.order_uid
    assert "payment.transaction must equal order_uid" in letter.error_details
    with pytest.raises(OrderNotFoundError):
        service.get_order_by_uid(sample_order.order_uid)


def test_service_failure_propagates(sample_order):
    svc = MagicMock()
    svc.process_new_order.side_effect = RuntimeError("db down")
    ingestor = OrderIngestor(svc)

    with pytest.raises(RuntimeError):
        ingestor.process_message(sample_order.model_dump_json())

    assert ingestor.dead_letters == []


def test_seed_messages_are_valid_and_reproducible(service):
    messages = generate_messages(10, seed=7)
    ingestor = OrderIngestor(service)

    for message in messages:
        assert ingestor.process_message(message) is not None

    assert ingestor.dead_letters == []
    assert generate_messages(10, seed=7) == messages
