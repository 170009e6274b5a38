"""Decimal currency helpers shared by the pricing rules."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")

# Discount multipliers (fraction of the base price that is kept)
HALF_PRICE = Decimal("0.5")
TWENTY_OFF = Decimal("0.8")


def to_money(value: Decimal | int | float | str) -> Decimal:
    """Convert a price literal to ``Decimal``.

    Floats go through ``str`` first so ``5.99`` stays ``5.99`` instead of
    picking up binary noise (``5.9900000000000002131...``).

    Raises:
        ValueError: If the value is not a finite number.
    """
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, bool):
        raise ValueError(f"Invalid currency amount: {value!r}")
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Invalid currency amount: {value!r}") from None

    if not amount.is_finite():
        raise ValueError(f"Invalid currency amount: {value!r}")
    return amount


def round_money(amount: Decimal) -> Decimal:
    """Round to whole cents, ties away from zero (half-up).

    2.995 -> 3.00, 1.495 -> 1.50.
    """
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def apply_rate(amount: Decimal, rate: Decimal) -> Decimal:
    """Multiply by a keep-rate and round to cents."""
    return round_money(amount * rate)


def format_money(amount: Decimal) -> str:
    """Render an amount with exactly two decimals (no currency sign)."""
    return f"{round_money(amount):.2f}"
