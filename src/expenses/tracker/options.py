#!/usr/bin/env python3
"""
Typed command options.

One frozen options object per sub-command. Fields are ``None`` when the flag
was not given; ``validate()`` checks presence explicitly, so a zero amount
counts as supplied.
"""

from dataclasses import dataclass

from ..core.errors import ValidationError
from ..core.money import Money


def _check_month(month: int | None) -> None:
    if month is None:
        return
    if not 1 <= month <= 12:
        raise ValidationError(f"Month must be between 1 and 12, got {month}")


def _check_amount(amount: Money | None) -> None:
    if amount is not None and amount.is_negative():
        raise ValidationError(f"Amount must not be negative, got {amount}")


def _check_description(description: str | None) -> None:
    if description is not None and not description.strip():
        raise ValidationError("Description must not be blank")


@dataclass(frozen=True)
class AddOptions:
    description: str | None = None
    amount: Money | None = None

    def validate(self) -> None:
        if self.description is None or self.amount is None:
            raise ValidationError("Description and amount are required")
        _check_description(self.description)
        _check_amount(self.amount)


@dataclass(frozen=True)
class UpdateOptions:
    id: int | None = None
    amount: Money | None = None
    description: str | None = None

    def validate(self) -> None:
        if self.id is None:
            raise ValidationError("ID is required")
        if self.amount is None and self.description is None:
            raise ValidationError("At least one of amount or description is required")
        _check_description(self.description)
        _check_amount(self.amount)


@dataclass(frozen=True)
class DeleteOptions:
    id: int | None = None

    def validate(self) -> None:
        if self.id is None:
            raise ValidationError("ID is required")


@dataclass(frozen=True)
class ListOptions:
    """Optional month/year filter for listing."""

    month: int | None = None
    year: int | None = None

    def validate(self) -> None:
        _check_month(self.month)


@dataclass(frozen=True)
class SummaryOptions:
    month: int | None = None
    year: int | None = None

    def validate(self) -> None:
        if self.month is None:
            raise ValidationError("Month is required")
        _check_month(self.month)
