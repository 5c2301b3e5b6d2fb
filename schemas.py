# schemas.py
"""
Pydantic models for the order service.

Defines the order record served by the API, the dead letter records kept by
ingestion, and the blocks the lookup widget renders.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class Delivery(BaseModel):
    """Recipient and shipping address of an order."""

    name: str = ""
    phone: str = ""
    zip: str = ""
    city: str = ""
    address: str = ""
    region: str = ""
    email: str = ""


class Payment(BaseModel):
    """Payment transaction attached to an order."""

    transaction: str = Field(default="", description="Must equal the order_uid")
    request_id: str = ""
    currency: str = ""
    provider: str = ""
    amount: int = 0
    payment_dt: int = Field(default=0, description="Unix timestamp of payment")
    bank: str = ""
    delivery_cost: int = 0
    goods_total: int = 0
    custom_fee: int = 0


class Item(BaseModel):
    """Single line item within an order."""

    chrt_id: int = 0
    track_number: str = ""
    price: int = 0
    rid: str = ""
    name: str = ""
    sale: int = 0
    size: str = ""
    total_price: int = 0
    nm_id: int = 0
    brand: str = ""
    status: int = 0


class Order(BaseModel):
    """Full order record as stored and served by the order API."""

    order_uid: str = Field(default="", description="Unique order identifier")
    track_number: str = ""
    entry: str = ""
    delivery: Delivery = Field(default_factory=Delivery)
    payment: Payment = Field(default_factory=Payment)
    items: list[Item] = Field(default_factory=list)
    locale: str = ""
    internal_signature: str = ""
    customer_id: str = ""
    delivery_service: str = ""
    shardkey: str = ""
    sm_id: int = 0
    date_created: datetime | None = None
    oof_shard: str = ""

    def to_json_dict(self) -> dict:
        """
        Convert to a JSON-compatible dict for HTTP responses.

        Returns:
            Dict with snake_case keys and ISO-formatted date_created.
        """
        return self.model_dump(mode="json")


class DeadLetter(BaseModel):
    """Record of an ingested message that could not be turned into an order."""

    error_reason: Literal["json_unmarshal_failed", "validation_failed"] = Field(
        description="Category of ingestion failure"
    )
    error_details: str = Field(description="Specific reason for failure")
    payload: str = Field(description="Original message body")
    order_uid: str | None = Field(
        default=None, description="Order UID when the message could be decoded"
    )
    failed_at: datetime = Field(default_factory=datetime.now)


class ResultBlock(BaseModel):
    """Content of the widget's result area."""

    kind: Literal["error", "json"]
    text: str
