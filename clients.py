# clients.py
"""
Async HTTP client for the Order API.

A lookup either returns the decoded JSON body or raises an APIError carrying
the message the widget shows.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

import config

logger = logging.getLogger(__name__)

ORDER_NOT_FOUND = "Order not found"


class APIError(Exception):
    """Raised when an API call fails."""

    pass


class OrderLookupError(APIError):
    """Raised when an order lookup does not produce an order."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def order_url(order_uid: str, base_url: str | None = None) -> str:
    """Build the lookup URL with the uid embedded as a single path segment."""
    base = (base_url or config.ORDER_API_URL).rstrip("/")
    return f"{base}/order/{quote(order_uid, safe='')}"


def _error_message(data: Any) -> str:
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, str) and error:
            return error
    return ORDER_NOT_FOUND


async def fetch_order_async(
    order_uid: str,
    client: httpx.AsyncClient | None = None,
    base_url: str | None = None,
) -> Any:
    """
    Fetch a single order by uid from the Order API.

    No timeout and no retries are applied; the call waits until the transport
    gives up.

    Args:
        order_uid: Trimmed, non-empty order uid.
        client: Optional shared client. A temporary one is used otherwise.
        base_url: Overrides ORDER_API_URL.

    Returns:
        The decoded JSON body of a successful response.

    Raises:
        OrderLookupError: On a non-2xx response (message from the body's
            "error" field, else "Order not found"), on a body that is not JSON,
            or on a transport failure (message from the exception).
    """
    url = order_url(order_uid, base_url)
    logger.debug("Fetching order %s from %s", order_uid, url)

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=None) as own_client:
                response = await own_client.get(url)
        else:
            response = await client.get(url, timeout=None)
    except httpx.HTTPError as e:
        logger.error("Request for order %s failed: %s", order_uid, e)
        raise OrderLookupError(str(e) or type(e).__name__) from e

    try:
        data = response.json()
    except ValueError as e:
        logger.error(
            "Response for order %s is not JSON (HTTP %d): %s",
            order_uid,
            response.status_code,
            e,
        )
        raise OrderLookupError(str(e), response.status_code) from e

    if not response.is_success:
        message = _error_message(data)
        logger.warning(
            "Order %s lookup returned HTTP %d: %s",
            order_uid,
            response.status_code,
            message,
        )
        raise OrderLookupError(message, response.status_code)

    logger.info("Fetched order %s", order_uid)
    return data
