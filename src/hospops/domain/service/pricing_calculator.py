"""Domain service: Pricing Calculator.

Turns order lines plus pricing parameters into a complete price
breakdown.  Pure: no I/O, no hidden state, inputs are never mutated.

The whole call is validated before anything is computed, so an invalid
value anywhere fails the call without producing a partial result.
Amounts stay exact ``Decimal`` values throughout; rounding is left to
whoever displays them.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

from hospops.domain.exceptions import InvalidInputError
from hospops.domain.model.pricing import (
    Number,
    OfferRule,
    OrderLine,
    PricingResult,
    TaxComponent,
    TaxLine,
)

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")

DEFAULT_TAX_NAME = "Tax"


def compute_totals(
    lines: Sequence[OrderLine],
    taxes: Number | Sequence[TaxComponent],
    shipping_fee: Number,
    offer: OfferRule | None = None,
) -> PricingResult:
    """Compute subtotal, offer discount, tax, shipping and total.

    ``taxes`` is either a single percentage or an ordered sequence of
    named components (e.g. SGST + CGST); each component is levied on the
    discounted subtotal.
    """
    # Phase 1: validate everything
    priced = [_validate_line(index, line) for index, line in enumerate(lines)]
    components = _validate_taxes(taxes)
    shipping = _decimal(shipping_fee, "shipping_fee")
    _require_non_negative(shipping, "shipping_fee")
    if offer is not None:
        _validate_offer(offer)

    # Phase 2: compute
    subtotal = sum(
        (_subtotal(qty, price, disc) for qty, price, disc in priced), _ZERO
    )
    total_quantity = sum(qty for qty, _, _ in priced)

    applied_offer = None
    offer_discount = _ZERO
    if offer is not None and total_quantity >= offer.minimum_quantity:
        applied_offer = offer
        offer_discount = subtotal * _decimal(offer.discount_rate, "discount_rate") / _HUNDRED

    discounted = subtotal - offer_discount
    tax_lines = tuple(
        TaxLine(name=name, rate=rate, amount=discounted * rate / _HUNDRED)
        for name, rate in components
    )
    tax = sum((t.amount for t in tax_lines), _ZERO)

    return PricingResult(
        subtotal=subtotal,
        offer_discount=offer_discount,
        discounted_subtotal=discounted,
        taxes=tax_lines,
        tax=tax,
        shipping=shipping,
        total=discounted + tax + shipping,
        offer=applied_offer,
    )


def line_subtotal(line: OrderLine, line_index: int | None = None) -> Decimal:
    """``quantity * unit_price * (1 - discount_percent / 100)`` for one line."""
    return _subtotal(*_validate_line(line_index, line))


def balance_due(total: Number, paid: Number) -> Decimal:
    """Outstanding amount on an order; negative when it has been overpaid."""
    total_amount = _decimal(total, "total")
    paid_amount = _decimal(paid, "paid_amount")
    _require_non_negative(total_amount, "total")
    _require_non_negative(paid_amount, "paid_amount")
    return total_amount - paid_amount


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _subtotal(quantity: int, unit_price: Decimal, discount: Decimal) -> Decimal:
    return quantity * unit_price * (1 - discount / _HUNDRED)


def _validate_line(
    index: int | None, line: OrderLine
) -> tuple[int, Decimal, Decimal]:
    quantity = line.quantity
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidInputError("quantity", f"must be an integer, got {quantity!r}", index)
    if quantity < 0:
        raise InvalidInputError("quantity", f"cannot be negative, got {quantity}", index)

    unit_price = _decimal(line.unit_price, "unit_price", index)
    _require_non_negative(unit_price, "unit_price", index)

    discount = _decimal(line.discount_percent, "discount_percent", index)
    _require_percentage(discount, "discount_percent", index)

    return quantity, unit_price, discount


def _validate_taxes(
    taxes: Number | Sequence[TaxComponent],
) -> list[tuple[str, Decimal]]:
    if isinstance(taxes, (int, float, Decimal)) and not isinstance(taxes, bool):
        taxes = [TaxComponent(DEFAULT_TAX_NAME, taxes)]

    components: list[tuple[str, Decimal]] = []
    for component in taxes:
        rate = _decimal(component.rate, f"tax rate '{component.name}'")
        _require_non_negative(rate, f"tax rate '{component.name}'")
        components.append((component.name, rate))
    return components


def _validate_offer(offer: OfferRule) -> None:
    minimum = offer.minimum_quantity
    if isinstance(minimum, bool) or not isinstance(minimum, int) or minimum < 0:
        raise InvalidInputError(
            "minimum_quantity", f"must be a non-negative integer, got {minimum!r}"
        )
    rate = _decimal(offer.discount_rate, "discount_rate")
    _require_percentage(rate, "discount_rate")


def _decimal(value: Number, field: str, index: int | None = None) -> Decimal:
    if isinstance(value, bool):
        raise InvalidInputError(field, f"must be a number, got {value!r}", index)
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidInputError(field, f"must be a number, got {value!r}", index)
    if not result.is_finite():
        raise InvalidInputError(field, f"must be finite, got {value!r}", index)
    return result


def _require_non_negative(value: Decimal, field: str, index: int | None = None) -> None:
    if value < _ZERO:
        raise InvalidInputError(field, f"cannot be negative, got {value}", index)


def _require_percentage(value: Decimal, field: str, index: int | None = None) -> None:
    if not _ZERO <= value <= _HUNDRED:
        raise InvalidInputError(field, f"must be between 0 and 100, got {value}", index)
