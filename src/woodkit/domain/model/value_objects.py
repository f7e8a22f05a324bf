"""Value Objects and monetary helpers shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.

Every monetary rounding in the project goes through ``round_money`` or
``round_whole`` so that the client preview, the order handler and the
admin preview can never disagree on a charged amount.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from woodkit.domain.exceptions import ValidationError

CENT = Decimal("0.01")
UNIT = Decimal("1")
ZERO = Decimal("0")

SUPPORTED_CURRENCIES = ("NIS", "USD", "EUR")
CURRENCY_SYMBOLS = {"NIS": "₪", "USD": "$", "EUR": "€"}


# --- Rounding -----------------------------------------------------------------


def to_decimal(value: str | float | int | Decimal) -> Decimal:
    """Coerce a number to a finite Decimal without inheriting float noise."""
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid numeric value: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid numeric value: {value!r}")
    return result


def is_number(value: object) -> bool:
    """True for finite int/float/Decimal values. Booleans are not numbers here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return False


def round_money(value: Decimal) -> Decimal:
    """Round to 2 decimal places, half away from zero."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def round_whole(value: Decimal) -> Decimal:
    """Round to whole currency units, half away from zero."""
    return value.quantize(UNIT, rounding=ROUND_HALF_UP)


# --- Value objects ------------------------------------------------------------


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount with currency.

    Used for order amounts. Signed intermediate values such as a size
    adjustment stay plain Decimals inside a PriceBreakdown.
    """

    amount: Decimal
    currency: str = "NIS"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < ZERO:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if self.currency not in SUPPORTED_CURRENCIES:
            raise ValidationError(f"Unsupported currency: {self.currency}")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def scaled(self, rate: Decimal) -> Money:
        """Multiply by a rate (e.g. a tax rate), rounded to cents."""
        return Money(round_money(self.amount * rate), self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{CURRENCY_SYMBOLS[self.currency]}{self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = "NIS") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(to_decimal(amount), currency)

    @staticmethod
    def zero(currency: str = "NIS") -> Money:
        return Money(Decimal("0.00"), currency)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

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
