"""Perishable product model and per-department discount rules."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from .money import HALF_PRICE, TWENTY_OFF, apply_rate, format_money, to_money

logger = logging.getLogger(__name__)


class SoldBy(str, Enum):
    UNIT = "unit"
    WEIGHT = "weight"
    PACKAGE = "package"


class ProduceCategory(str, Enum):
    FRUIT = "Fruit"
    VEGETABLE = "Vegetable"


def _coerce_enum(enum_cls: type[Enum], value: Any, field_name: str) -> Enum:
    """Accept an enum member or its value, case-insensitively."""
    if isinstance(value, enum_cls):
        return value
    text = str(value).strip().lower()
    for member in enum_cls:
        if member.value.lower() == text:
            return member
    choices = " / ".join(m.value for m in enum_cls)
    raise ValueError(f"Invalid {field_name}: {value!r} ({choices})")


@dataclass(frozen=True)
class Product(ABC):
    """A stocked item with a shelf life and a base retail price.

    Instances are immutable. Use one of the concrete departments
    (:class:`Dairy`, :class:`Produce`, :class:`Cereal`).
    """

    sku: str
    brand: str
    product_name: str
    size: int  # grams
    date_stocked: date
    shelf_life: int  # days
    base_price: Decimal

    def __post_init__(self) -> None:
        price = to_money(self.base_price)
        if price < 0:
            raise ValueError(
                f"{self.sku}: base_price must be >= 0, got {price}"
            )
        if self.shelf_life < 0:
            raise ValueError(
                f"{self.sku}: shelf_life must be >= 0, got {self.shelf_life}"
            )
        object.__setattr__(self, "base_price", price)

    @property
    @abstractmethod
    def department(self) -> str:
        ...

    @property
    def expiry_date(self) -> date:
        return self.date_stocked + timedelta(days=self.shelf_life)

    def days_left(self, today: date | None = None) -> int:
        """Whole days until expiry; negative once expired."""
        today = today or date.today()
        return (self.expiry_date - today).days

    def discounted_price(self, today: date | None = None) -> Decimal:
        """Price after the department's freshness discount."""
        return self.base_price

    def describe(self) -> str:
        return (
            f"SKU: {self.sku}, Name: {self.product_name}, "
            f"Brand: {self.brand}, Price: ${format_money(self.base_price)}"
        )

    def __str__(self) -> str:
        return self.describe()

    def extra_fields(self) -> dict[str, Any]:
        return {}

    def to_dict(self, today: date | None = None) -> dict[str, Any]:
        """JSON-ready view of the product priced for ``today``."""
        today = today or date.today()
        return {
            "sku": self.sku,
            "department": self.department,
            "brand": self.brand,
            "product_name": self.product_name,
            "size": self.size,
            "date_stocked": self.date_stocked.isoformat(),
            "shelf_life": self.shelf_life,
            "expiry_date": self.expiry_date.isoformat(),
            "days_left": self.days_left(today),
            "base_price": format_money(self.base_price),
            "discounted_price": format_money(self.discounted_price(today)),
            **self.extra_fields(),
        }


@dataclass(frozen=True)
class Dairy(Product):
    """Milk, cheese, yogurt.  Half price with 5 or fewer days left."""

    lactose_free: bool

    @property
    def department(self) -> str:
        return "Dairy"

    def discounted_price(self, today: date | None = None) -> Decimal:
        days = self.days_left(today)
        if days <= 5:
            price = apply_rate(self.base_price, HALF_PRICE)
            logger.debug("%s: %d days left, half price %s", self.sku, days, price)
            return price
        return self.base_price

    def extra_fields(self) -> dict[str, Any]:
        return {"lactose_free": self.lactose_free}


@dataclass(frozen=True)
class Produce(Product):
    """Fruit and vegetables.

    Under 5 days left: 50% off.  5 to 10 days left: 20% off.
    """

    sold_by: SoldBy
    category: ProduceCategory

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(
            self, "sold_by", _coerce_enum(SoldBy, self.sold_by, "sold_by")
        )
        object.__setattr__(
            self,
            "category",
            _coerce_enum(ProduceCategory, self.category, "category"),
        )

    @property
    def department(self) -> str:
        return "Produce"

    def discounted_price(self, today: date | None = None) -> Decimal:
        days = self.days_left(today)
        if days < 5:
            price = apply_rate(self.base_price, HALF_PRICE)
        elif days <= 10:
            price = apply_rate(self.base_price, TWENTY_OFF)
        else:
            return self.base_price
        logger.debug("%s: %d days left, discounted to %s", self.sku, days, price)
        return price

    def extra_fields(self) -> dict[str, Any]:
        return {"sold_by": self.sold_by.value, "category": self.category.value}


@dataclass(frozen=True)
class Cereal(Product):
    """Packaged breakfast cereal.  Half price only once past expiry."""

    sugar_percentage: Decimal  # % of daily intake

    def __post_init__(self) -> None:
        super().__post_init__()
        try:
            sugar = Decimal(str(self.sugar_percentage).strip())
        except InvalidOperation:
            raise ValueError(
                f"{self.sku}: invalid sugar_percentage {self.sugar_percentage!r}"
            ) from None
        if not sugar.is_finite():
            raise ValueError(
                f"{self.sku}: invalid sugar_percentage {self.sugar_percentage!r}"
            )
        object.__setattr__(self, "sugar_percentage", sugar)

    @property
    def department(self) -> str:
        return "Cereal"

    def discounted_price(self, today: date | None = None) -> Decimal:
        today = today or date.today()
        if today > self.expiry_date:
            price = apply_rate(self.base_price, HALF_PRICE)
            logger.debug(
                "%s: expired %s, half price %s", self.sku, self.expiry_date, price
            )
            return price
        return self.base_price

    def extra_fields(self) -> dict[str, Any]:
        return {"sugar_percentage": str(self.sugar_percentage)}
