"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, adapters or user input.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value cannot be read as a number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a numeric value: {value!r}")
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Not a numeric value: {value!r}") from exc


def round_cents(value: Decimal) -> Decimal:
    """Round a currency amount to cents."""
    return value.quantize(CENT)


__all__ = ["CENT", "coerce_decimal", "round_cents"]
