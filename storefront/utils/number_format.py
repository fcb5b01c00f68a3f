"""Money and quantity helpers."""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

CENTS = Decimal('0.01')


def to_decimal(value) -> Decimal:
    """
    Convert a number (int, float, str or Decimal) to Decimal.

    Floats go through ``str`` so that 99.99 stays 99.99 instead of its
    binary expansion.

    Raises:
        ValueError: if the value is not numeric.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or value is None:
        raise ValueError(f'Not a numeric value: {value!r}')
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValueError(f'Not a numeric value: {value!r}')


def round_money(value) -> Decimal:
    """Round to two decimals using half-up rounding."""
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def money_to_float(value) -> float:
    """Render a money amount for JSON output."""
    return float(round_money(value))


def is_whole_number(value) -> bool:
    """True for ints (bool excluded) and integral floats."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()
