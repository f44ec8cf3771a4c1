"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one requested line (SKU, name, quantity, price, discount)."""

    sku: str
    name: str
    quantity: int
    unit_price: str
    discount_percent: str = "0"


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line item as displayed to the user."""

    sku: str
    name: str
    quantity: int
    unit_price: str  # formatted, e.g. "₹1,250.00"
    discount_percent: str
    line_subtotal: str
    received: int
    damaged: int
    missing: int
    status: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    kind: str
    reference: str
    counterparty: str
    status: str
    items: list[OrderItemDTO]
    paid_amount: str
    created_at: str


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: one row of the order list."""

    id: int
    kind: str
    reference: str
    counterparty: str
    status: str
    line_count: int
    total: str


@dataclass(frozen=True)
class TaxLineDTO:
    name: str
    rate: str
    amount: str


@dataclass(frozen=True)
class QuoteDTO:
    """Output: price breakdown of an order, rounded for display."""

    order_id: int
    reference: str
    subtotal: str
    offer_name: str | None
    offer_discount: str
    discounted_subtotal: str
    taxes: list[TaxLineDTO]
    tax: str
    shipping: str
    total: str
    paid: str
    balance_due: str


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: receiving sheet after counts were applied."""

    order_id: int
    reference: str
    status: str
    items: list[OrderItemDTO]
    ordered: int
    received: int
    damaged: int
    missing: int
