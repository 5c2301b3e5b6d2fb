# ingest.py
"""
Ingestion of incoming order messages.

Decodes a raw JSON message, validates it and hands it to the service.
Messages that can never succeed go to the dead letter queue; service errors
propagate so the caller can retry the message later.
"""

import json
import logging

from pydantic import ValidationError

from schemas import DeadLetter, Order
from service import OrderService
from validation import BadMessageError, validate_order

logger = logging.getLogger(__name__)


class OrderIngestor:
    """Feeds decoded, validated orders into an OrderService."""

    def __init__(self, service: OrderService):
        self.service = service
        self.dead_letters: list[DeadLetter] = []

    def _dead_letter(self, reason, details: str, payload: str, order_uid=None) -> None:
        logger.error("Sending message to dead letter queue (%s): %s", reason, details)
        self.dead_letters.append(
            DeadLetter(
                error_reason=reason,
                error_details=details,
                payload=payload,
                order_uid=order_uid,
            )
        )

    def process_message(self, raw: bytes | str) -> Order | None:
        """
        Process one message.

        Args:
            raw: JSON-encoded order.

        Returns:
            The stored order, or None if the message was dead-lettered.
        """
        payload = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw

        try:
            data = json.loads(payload)
            order = Order.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            self._dead_letter("json_unmarshal_failed", str(e), payload)
            return None

        try:
            validate_order(order)
        except BadMessageError as e:
            self._dead_letter("validation_failed", str(e), payload, order.order_uid)
            return None

        logger.debug("Processing new order %s", order.order_uid)
        self.service.process_new_order(order)
        return order
