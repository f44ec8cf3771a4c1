"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from hospops.domain.exceptions import ValidationError

CURRENCY_SYMBOL = "₹"

_CENT = Decimal("0.01")

# (threshold, suffix) for the abbreviated dashboard form, largest first.
_COMPACT_UNITS = (
    (Decimal("10000000"), "Cr"),
    (Decimal("100000"), "L"),
    (Decimal("1000"), "K"),
)


def group_indian(amount: Decimal) -> str:
    """Format *amount* to 2 places with Indian digit grouping (12,34,567.50)."""
    quantized = amount.quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if quantized < 0 else ""
    whole, _, fraction = f"{abs(quantized):.2f}".partition(".")

    head, tail = whole[:-3], whole[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    groups.append(tail)
    return f"{sign}{','.join(groups)}.{fraction}"


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  The amount is kept at full
    precision; rounding to paise only happens when the value is rendered.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __sub__(self, other: Money) -> Money:
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result)

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{CURRENCY_SYMBOL}{group_indian(self.amount)}"

    def compact(self) -> str:
        """Abbreviated form used on summary cards, e.g. ``₹2.50 L``."""
        for threshold, suffix in _COMPACT_UNITS:
            if self.amount >= threshold:
                scaled = (self.amount / threshold).quantize(_CENT, rounding=ROUND_HALF_UP)
                return f"{CURRENCY_SYMBOL}{scaled} {suffix}"
        return f"{CURRENCY_SYMBOL}{self.amount.quantize(_CENT, rounding=ROUND_HALF_UP)}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

