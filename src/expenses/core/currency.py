#!/usr/bin/env python3
"""
Currency Handling Utilities

Amounts are held as integer cents so that totals never drift.

Currency Systems:
- Internal calculations use cents: 100 cents = $1.00
- The store document holds floating-point dollars: 12.34
- Display uses dollar strings: "$12.34"
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_CENT = Decimal("0.01")


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Example:
        cents_to_dollars_str(4599) -> "45.99"
        cents_to_dollars_str(-5) -> "-0.05"
    """
    sign = "-" if cents < 0 else ""
    dollars, remainder = divmod(abs(int(cents)), 100)
    return f"{sign}{dollars}.{remainder:02d}"


def parse_dollars_to_cents(dollars_str: str) -> int:
    """
    Parse a user-entered dollar string to cents.

    Accepts an optional "$" prefix and thousands separators. Fractions of a
    cent are rounded half-up.

    Args:
        dollars_str: String like "12.34", "$1,234.5" or "12"

    Returns:
        Amount in cents

    Raises:
        ValueError: If the string is not a finite decimal number

    Examples:
        parse_dollars_to_cents("12.34") -> 1234
        parse_dollars_to_cents("$1,234.56") -> 123456
        parse_dollars_to_cents("12.345") -> 1235
    """
    clean = dollars_str.replace("$", "").replace(",", "").strip()
    if not clean:
        raise ValueError("empty amount")

    try:
        amount = Decimal(clean)
    except InvalidOperation as e:
        raise ValueError(f"not a number: {dollars_str!r}") from e

    if not amount.is_finite():
        raise ValueError(f"not a finite number: {dollars_str!r}")

    try:
        return int((amount * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    except InvalidOperation as e:
        raise ValueError(f"amount out of range: {dollars_str!r}") from e


def dollars_to_cents(dollars: int | float) -> int:
    """
    Convert a JSON dollar number to cents.

    Goes through the shortest repr of the float so that 0.1 becomes 10 cents,
    not 9.

    Raises:
        ValueError: If the number is not finite or too large to hold in cents
    """
    amount = Decimal(repr(dollars))
    if not amount.is_finite():
        raise ValueError(f"not a finite number: {dollars!r}")

    try:
        return int(amount.quantize(_CENT, rounding=ROUND_HALF_UP) * 100)
    except InvalidOperation as e:
        raise ValueError(f"amount out of range: {dollars!r}") from e


def cents_to_dollars(cents: int) -> float:
    """Convert cents to the floating-point dollar number stored on disk."""
    return float(Decimal(cents) / 100)


def format_cents(cents: int) -> str:
    """Format cents as dollar string with $ prefix."""
    return f"${cents_to_dollars_str(cents)}"
