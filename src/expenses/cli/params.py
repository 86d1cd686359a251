"""Click parameter types for expense command options."""

import click

from ..core.money import Money


class AmountType(click.ParamType):
    """Dollar amount such as ``12.50`` or ``$1,200``, converted to Money."""

    name = "amount"

    def convert(self, value, param, ctx):
        if isinstance(value, Money):
            return value
        try:
            return Money.from_dollars(str(value))
        except ValueError:
            self.fail(f"{value!r} is not a valid amount", param, ctx)


AMOUNT = AmountType()
MONTH = click.IntRange(1, 12)
