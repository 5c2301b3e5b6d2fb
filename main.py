# main.py
"""
CLI entry point for the order service.

Usage:
    python main.py lookup b563feb7b2b84b6test
    python main.py serve
    python main.py --debug lookup b563feb7b2b84b6test
"""

import argparse
import asyncio
import logging
import sys

from order_api import run_server
from utils import setup_logging
from widget import init_widget


def lookup(order_uid: str) -> int:
    """Run one lookup and print the result area. Returns the exit status."""
    widget = init_widget()
    block = asyncio.run(widget.on_click(order_uid))

    if block is None or block.kind == "error":
        print(widget.result.text, file=sys.stderr)
        return 1

    print(block.text)
    return 0


def main() -> None:
    """Parse arguments and run the chosen command."""
    parser = argparse.ArgumentParser(description="Look up or serve orders.")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    lookup_parser = subparsers.add_parser("lookup", help="Fetch one order by uid")
    lookup_parser.add_argument("order_uid", help="Order UID to look up")

    subparsers.add_parser("serve", help="Run the order API with demo data")

    args = parser.parse_args()

    if args.debug:
        level = logging.DEBUG
    elif args.command == "lookup":
        level = logging.WARNING
    else:
        level = logging.INFO
    setup_logging(level=level)
    logger = logging.getLogger(__name__)

    if args.command == "lookup":
        logger.info("Looking up order: %s", args.order_uid)
        sys.exit(lookup(args.order_uid))

    run_server()


if __name__ == "__main__":
    main()
