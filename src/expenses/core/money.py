#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
"""

from dataclasses import dataclass

from .currency import (
    cents_to_dollars,
    cents_to_dollars_str,
    dollars_to_cents,
    parse_dollars_to_cents,
)


@dataclass(frozen=True, order=True)
class Money:
    """
    Immutable money value in cents (USD).

    Examples:
        >>> coffee = Money.from_dollars("4.50")
        >>> str(coffee)
        '$4.50'
        >>> (coffee + Money.from_cents(50)).to_cents()
        500
        >>> Money.from_dollars(0.1).to_dollars()
        0.1
    """

    cents: int

    @classmethod
    def zero(cls) -> "Money":
        """Money value of $0.00."""
        return cls(cents=0)

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_dollars(cls, dollars: str | int | float) -> "Money":
        """
        Create Money from a dollar amount.

        Args:
            dollars: String like "$12.34", or a number of dollars as stored
                in the expense document

        Raises:
            ValueError: If a string amount cannot be parsed
        """
        if isinstance(dollars, str):
            return cls(cents=parse_dollars_to_cents(dollars))
        return cls(cents=dollars_to_cents(dollars))

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_dollars(self) -> float:
        """Get value as a dollar number for JSON serialization."""
        return cents_to_dollars(self.cents)

    def is_negative(self) -> bool:
        return self.cents < 0

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=self.cents - other.cents)

    def __str__(self) -> str:
        """Format as dollar string."""
        return f"${cents_to_dollars_str(self.cents)}"

    def __repr__(self) -> str:
        return f"Money(cents={self.cents})"


def sum_money(amounts) -> Money:
    """Sum an iterable of Money values, returning $0.00 when empty."""
    return sum(amounts, Money.zero())
