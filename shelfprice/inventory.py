"""In-memory inventory and the price listing."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Iterable, Iterator

from .money import format_money
from .products import Cereal, Dairy, Produce, Product, ProduceCategory, SoldBy

logger = logging.getLogger(__name__)

DEFAULT_HEADING = "Supermarket Inventory:"


class Inventory:
    """Insertion-ordered collection of products keyed by SKU."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: dict[str, Product] = {}
        self.extend(products)

    def add(self, product: Product) -> None:
        if product.sku in self._products:
            raise ValueError(f"Duplicate SKU: {product.sku}")
        self._products[product.sku] = product
        logger.debug("Stocked %s (%s)", product.sku, product.department)

    def extend(self, products: Iterable[Product]) -> None:
        for product in products:
            self.add(product)

    def get(self, sku: str) -> Product | None:
        return self._products.get(sku)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products.values())

    def __len__(self) -> int:
        return len(self._products)


def sample_inventory(today: date | None = None) -> Inventory:
    """Build the fixed demo stock: one dairy, one produce, one cereal item."""
    today = today or date.today()
    return Inventory([
        Dairy(
            "D001", "BrandA", "Milk", 1000,
            today - timedelta(days=5), 10, "5.99",
            lactose_free=False,
        ),
        Produce(
            "P001", "BrandB", "Apple", 500,
            today - timedelta(days=3), 7, "2.99",
            sold_by=SoldBy.WEIGHT,
            category=ProduceCategory.FRUIT,
        ),
        Cereal(
            "C001", "BrandC", "Corn Flakes", 750,
            today - timedelta(days=12), 30, "4.99",
            sugar_percentage=10,
        ),
    ])


def render_listing(
    inventory: Iterable[Product],
    today: date | None = None,
    heading: str = DEFAULT_HEADING,
) -> str:
    """Format every product with its discounted price for terminal output.

    Each product takes two lines followed by a blank separator line.
    """
    today = today or date.today()
    lines: list[str] = []
    if heading:
        lines.append(heading)
        lines.append("")

    for product in inventory:
        price = product.discounted_price(today)
        lines.append(product.describe())
        lines.append(f"Discounted Price: ${format_money(price)}")
        lines.append("")

    return "\n".join(lines) + "\n"


def listing_as_json(
    inventory: Iterable[Product], today: date | None = None
) -> list[dict[str, Any]]:
    today = today or date.today()
    return [product.to_dict(today) for product in inventory]
