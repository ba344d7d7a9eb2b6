"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from coffeeshop.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount.

    Uses Decimal so menu prices and order totals add up exactly.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


def json_number(value: Decimal) -> int | float:
    """Whole amounts stay integers in JSON (49, not 49.0)."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class Rating:
    """A star rating between MIN_RATING and MAX_RATING inclusive."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Rating must be an integer, got {type(self.value).__name__}"
            )
        if not MIN_RATING <= self.value <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}"
            )

    def __str__(self) -> str:
        return f"{self.value}/{MAX_RATING}"


@dataclass(frozen=True)
class EmailAddress:
    """An email address normalised to lower case.

    Only the presence of an "@" is checked; deliverability is the mail
    server's problem.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or "@" not in self.value:
            raise ValidationError("Valid email address is required")

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def of(raw: str | None) -> EmailAddress:
        return EmailAddress((raw or "").strip().lower())
