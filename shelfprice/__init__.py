"""Freshness-based discount pricing for a small perishable inventory."""

from .config import ListingConfig, LoggingConfig, ShelfConfig, load_config
from .inventory import (
    Inventory,
    listing_as_json,
    render_listing,
    sample_inventory,
)
from .money import format_money, round_money, to_money
from .products import Cereal, Dairy, Produce, ProduceCategory, Product, SoldBy

__all__ = [
    "Product",
    "Dairy",
    "Produce",
    "Cereal",
    "SoldBy",
    "ProduceCategory",
    "Inventory",
    "sample_inventory",
    "render_listing",
    "listing_as_json",
    "round_money",
    "format_money",
    "to_money",
    "ShelfConfig",
    "ListingConfig",
    "LoggingConfig",
    "load_config",
]
