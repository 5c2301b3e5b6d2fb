# validation.py
"""
Validation functions for the order service.
Checks the business rules an order must satisfy before it is stored.
"""

import logging
from email.utils import parseaddr

from schemas import Delivery, Order, Payment

logger = logging.getLogger(__name__)


class BadMessageError(Exception):
    """Raised when an order fails validation."""

    def __init__(self, errors: list[str]):
        super().__init__("bad_message: " + "; ".join(errors))
        self.errors = errors


def _blank(value: str) -> bool:
    return not value.strip()


def is_valid_email(email: str) -> bool:
    """Return True if email parses as a single address with a local part and domain."""
    _, addr = parseaddr(email)
    if not addr or addr.count("@") != 1:
        return False
    local, domain = addr.split("@")
    return bool(local) and bool(domain)


def _validate_order_fields(errors: list[str], order: Order) -> None:
    if _blank(order.order_uid):
        errors.append("order_uid is required")
    if _blank(order.track_number):
        errors.append("track_number is required")
    if _blank(order.entry):
        errors.append("entry is required")
    if _blank(order.delivery_service):
        errors.append("delivery_service is required")
    if order.date_created is None:
        errors.append("date_created is required")


def _validate_delivery(errors: list[str], delivery: Delivery) -> None:
    for field in ("name", "phone", "zip", "city", "address", "region"):
        if _blank(getattr(delivery, field)):
            errors.append(f"delivery.{field} is required")

    if _blank(delivery.email):
        errors.append("delivery.email is required")
    elif not is_valid_email(delivery.email):
        errors.append("delivery.email has invalid format")


def _validate_payment(errors: list[str], payment: Payment, order: Order) -> None:
    if _blank(payment.transaction):
        errors.append("payment.transaction is required")
    if payment.transaction != order.order_uid:
        errors.append("payment.transaction must equal order_uid")
    if _blank(payment.currency):
        errors.append("payment.currency is required")
    if _blank(payment.provider):
        errors.append("payment.provider is required")
    if payment.payment_dt <= 0:
        errors.append("payment.payment_dt must be positive")

    for field in ("amount", "delivery_cost", "goods_total", "custom_fee"):
        if getattr(payment, field) < 0:
            errors.append(f"payment.{field} must be >= 0")


def _validate_items(errors: list[str], order: Order) -> None:
    for i, item in enumerate(order.items):
        pfx = f"items[{i}]"

        if item.chrt_id <= 0:
            errors.append(f"{pfx}: chrt_id must be > 0")
        if _blank(item.track_number):
            errors.append(f"{pfx}: track_number is required")
        if item.price < 0:
            errors.append(f"{pfx}: price must be >= 0")
        if _blank(item.rid):
            errors.append(f"{pfx}: rid is required")
        if _blank(item.name):
            errors.append(f"{pfx}: name is required")
        if item.sale < 0:
            errors.append(f"{pfx}: sale must be >= 0")
        if item.total_price < 0:
            errors.append(f"{pfx}: total_price must be >= 0")
        if item.nm_id <= 0:
            errors.append(f"{pfx}: nm_id must be > 0")

        if item.track_number != order.track_number:
            errors.append(f"{pfx}: track_number must equal order.track_number")


def validate_order(order: Order) -> None:
    """
    Validate an order against the storage rules.

    Args:
        order: Order to check.

    Raises:
        BadMessageError: If any rule fails. Every violation is listed.
    """
    errors: list[str] = []
    _validate_order_fields(errors, order)
    _validate_delivery(errors, order.delivery)
    _validate_payment(errors, order.payment, order)
    _validate_items(errors, order)

    if errors:
        logger.warning(
            "Order %s failed validation: %s", order.order_uid, "; ".join(errors)
        )
        raise BadMessageError(errors)
