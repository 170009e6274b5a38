"""CLI entry point for the price listing."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date

from dotenv import find_dotenv, load_dotenv

from .config import load_config
from .inventory import listing_as_json, render_listing, sample_inventory

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="shelfprice",
        description="Print the sample inventory with freshness discounts applied",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to a TOML config file",
    )
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        metavar="YYYY-MM-DD",
        help="Price the inventory as of this date instead of today",
    )
    parser.add_argument("--json", action="store_true", help="Output JSON")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    load_dotenv(find_dotenv(usecwd=True))
    config = load_config(args.config)

    level = logging.DEBUG if args.verbose else config.logging.level
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    today = args.date or config.listing.pricing_date()
    inventory = sample_inventory(today)
    logger.info("Pricing %d products as of %s", len(inventory), today)

    if args.json:
        data = {
            "date": today.isoformat(),
            "products": listing_as_json(inventory, today),
        }
        print(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        print(
            render_listing(inventory, today, heading=config.listing.heading),
            end="",
        )
