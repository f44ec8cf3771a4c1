"""Pricing inputs and outputs.

Plain immutable containers.  Range checks live in the pricing calculator,
which knows the line index of each value and can report it; these classes
only describe shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

Number = int | float | Decimal


@dataclass(frozen=True)
class OrderLine:
    """One product/quantity/price row of a purchase or sales order."""

    quantity: int
    unit_price: Number
    discount_percent: Number = 0


@dataclass(frozen=True)
class OfferRule:
    """Volume discount on the whole order once enough units are ordered."""

    name: str
    minimum_quantity: int
    discount_rate: Number


@dataclass(frozen=True)
class TaxComponent:
    name: str
    rate: Number


@dataclass(frozen=True)
class TaxLine:
    """One computed row of the tax breakdown."""

    name: str
    rate: Decimal
    amount: Decimal


@dataclass(frozen=True)
class PricingResult:
    """Full price breakdown of an order.

    Amounts are exact Decimals; round them only for display.
    """

    subtotal: Decimal
    offer_discount: Decimal
    discounted_subtotal: Decimal
    taxes: tuple[TaxLine, ...]
    tax: Decimal
    shipping: Decimal
    total: Decimal
    offer: OfferRule | None = None


@dataclass(frozen=True)
class PricingProfile:
    """Tax components, shipping fee and offer policy for one order kind."""

    taxes: tuple[TaxComponent, ...]
    shipping_fee: Decimal
    offers_enabled: bool = False
