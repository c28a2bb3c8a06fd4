"""Formatting helpers shared by the ride models and the report."""

from decimal import Decimal, ROUND_HALF_UP, localcontext

# Floats are trimmed to this many places before display rounding so that
# values such as 7.035 (stored as 7.03499...) round as written.
_NOISE_PLACES = Decimal("0.000001")
_CENTS = Decimal("0.01")

# Enough digits for the integer part of the largest float plus the trim places
_PRECISION = 320


def round_half_up(value: float) -> Decimal:
    """
    Round a float to two decimal places, halves away from zero.

    Args:
        value: The float to round

    Returns:
        Decimal: The value quantized to cents
    """
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        trimmed = Decimal(repr(value)).quantize(_NOISE_PLACES, rounding=ROUND_HALF_UP)
        return trimmed.quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_number(value: float) -> str:
    """Render a number with exactly two fractional digits."""
    return f"{round_half_up(value):.2f}"


def format_money(value: float) -> str:
    """Render a monetary value as ``$<amount>`` with two fractional digits."""
    return f"${format_number(value)}"
