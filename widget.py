# widget.py
"""
Order Lookup Widget.

Reads an order uid, runs one lookup against the Order API and renders either
the pretty-printed order or a single error line into its result area. The UI
layers (Streamlit page, CLI) only forward triggers to it and draw the result.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from clients import APIError, fetch_order_async
from schemas import ResultBlock
from utils import pretty_json

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Please enter an Order UID"
SUBMIT_KEY = "Enter"

Fetcher = Callable[[str], Awaitable[Any]]


class ResultArea:
    """Page region holding at most one result block."""

    def __init__(self):
        self.block: ResultBlock | None = None

    def clear(self) -> None:
        self.block = None

    def show_error(self, message: str) -> None:
        self.block = ResultBlock(kind="error", text=message)

    def show_json(self, value: Any) -> None:
        self.block = ResultBlock(kind="json", text=pretty_json(value))

    @property
    def text(self) -> str:
        return self.block.text if self.block else ""


class OrderLookupWidget:
    """Lookup handler bound to a fetcher and a result area."""

    def __init__(self, fetch: Fetcher = fetch_order_async, result: ResultArea | None = None):
        self.result = result if result is not None else ResultArea()
        self._fetch = fetch
        # sequence number of the most recently started lookup
        self._latest = 0

    async def lookup(self, raw_input: str | None) -> ResultBlock | None:
        """
        Run one lookup for the given input and render the outcome.

        Never raises: every failure becomes an error block. If a newer lookup
        started while this one was waiting, its outcome is dropped.

        Args:
            raw_input: Text of the identifier field, untrimmed.

        Returns:
            The rendered block, or None if the outcome was stale.
        """
        order_uid = (raw_input or "").strip()
        self.result.clear()
        self._latest += 1
        token = self._latest

        if not order_uid:
            self.result.show_error(VALIDATION_MESSAGE)
            return self.result.block

        data, error = None, None
        try:
            data = await self._fetch(order_uid)
        except APIError as e:
            error = str(e)
        except Exception as e:
            logger.error("Lookup for order %s failed: %s", order_uid, e)
            error = str(e) or type(e).__name__

        if token != self._latest:
            logger.debug("Dropping stale result for order %s", order_uid)
            return None

        if error is not None:
            self.result.show_error(error)
        else:
            self.result.show_json(data)
        return self.result.block

    async def on_click(self, raw_input: str | None) -> ResultBlock | None:
        """Search control activated."""
        return await self.lookup(raw_input)

    async def on_key(self, key: str, raw_input: str | None) -> ResultBlock | None:
        """Key pressed in the identifier field; only the submit key triggers."""
        if key != SUBMIT_KEY:
            return None
        return await self.lookup(raw_input)


def init_widget(fetch: Fetcher | None = None) -> OrderLookupWidget:
    """Create the widget once when the page is ready."""
    logger.debug("Initializing order lookup widget")
    return OrderLookupWidget(fetch=fetch or fetch_order_async)
