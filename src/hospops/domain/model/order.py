"""Order aggregate — purchase orders, sales orders and stock transfers.

The Order is an aggregate root that owns its line items.  Prices and
receiving counts are the source of truth; line and order statuses are
cached projections refreshed through the fulfillment resolver whenever
counts change, and have no setter of their own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from hospops.domain.exceptions import ValidationError
from hospops.domain.model.fulfillment import (
    FulfillmentLine,
    LineStatus,
    OrderFulfillmentStatus,
)
from hospops.domain.model.pricing import OrderLine
from hospops.domain.model.value_objects import Money
from hospops.domain.service.fulfillment_resolver import (
    aggregate_statuses,
    resolve_line_status,
)
from hospops.domain.service.pricing_calculator import line_subtotal


class OrderKind(Enum):
    PURCHASE = "PURCHASE"
    SALES = "SALES"
    TRANSFER = "TRANSFER"

    @property
    def prefix(self) -> str:
        return {"PURCHASE": "PO", "SALES": "SO", "TRANSFER": "ST"}[self.value]


@dataclass(frozen=True)
class ReceiptCount:
    """Counts typed in by the receiving-desk operator for one SKU."""

    received: int | None = None
    damaged: int | None = None
    missing: int | None = None


@dataclass
class OrderItem:
    """One line of an order: what was ordered, at what price, and what arrived.

    ``quantity``, ``unit_price`` and ``discount_percent`` are fixed at
    creation.  The receiving counts change during inspection; ``status``
    follows them.
    """

    sku: str
    name: str
    quantity: int
    unit_price: Money
    discount_percent: Decimal = Decimal("0")
    received_quantity: int | None = None
    damaged_quantity: int | None = None
    missing_quantity: int | None = None
    status: LineStatus = LineStatus.PENDING

    @property
    def pricing_line(self) -> OrderLine:
        return OrderLine(
            quantity=self.quantity,
            unit_price=self.unit_price.amount,
            discount_percent=self.discount_percent,
        )

    @property
    def fulfillment_line(self) -> FulfillmentLine:
        return FulfillmentLine(
            ordered_quantity=self.quantity,
            received_quantity=self.received_quantity,
            damaged_quantity=self.damaged_quantity,
            missing_quantity=self.missing_quantity,
        )

    @property
    def line_subtotal(self) -> Money:
        return Money(line_subtotal(self.pricing_line))


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_LINE_ITEMS = 50


@dataclass
class Order:
    """Aggregate root for orders of every kind.

    Use the ``Order.create()`` factory for new orders, which enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    kind: OrderKind
    counterparty: str
    items: list[OrderItem]
    reference: str = ""
    paid_amount: Money = field(default_factory=Money.zero)
    fulfillment_status: OrderFulfillmentStatus = OrderFulfillmentStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        kind: OrderKind,
        counterparty: str,
        items: list[OrderItem],
        reference: str = "",
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not counterparty or not counterparty.strip():
            raise ValidationError(f"{kind.value.title()} order needs a counterparty")

        if not items:
            raise ValidationError("Order must contain at least one item")

        if len(items) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")

        seen: set[str] = set()
        for index, item in enumerate(items):
            if item.sku in seen:
                raise ValidationError(f"Duplicate SKU '{item.sku}' in order")
            seen.add(item.sku)
            if isinstance(item.quantity, int) and item.quantity <= 0:
                raise ValidationError(f"Quantity for '{item.name}' must be positive")
            # Raises InvalidInputError naming the line and field.
            line_subtotal(item.pricing_line, index)

        order = Order(
            id=None,
            kind=kind,
            counterparty=counterparty.strip(),
            items=list(items),
            reference=reference.strip(),
        )
        order.refresh_status()
        return order

    # --- Receiving ------------------------------------------------------------

    def record_receipt(self, counts: dict[str, ReceiptCount]) -> None:
        """Apply counted quantities per SKU and re-derive every status.

        A ``None`` slot keeps whatever was entered for it earlier.  All
        counts are checked before any item changes, so one bad entry
        leaves the order as it was.
        """
        if not counts:
            raise ValidationError("Must specify at least one item to receive")

        updates: list[tuple[OrderItem, FulfillmentLine, LineStatus]] = []
        for sku, count in counts.items():
            index, item = self._find_item(sku)
            line = FulfillmentLine(
                ordered_quantity=item.quantity,
                received_quantity=_merged(count.received, item.received_quantity),
                damaged_quantity=_merged(count.damaged, item.damaged_quantity),
                missing_quantity=_merged(count.missing, item.missing_quantity),
            )
            updates.append((item, line, resolve_line_status(line, index)))

        for item, line, status in updates:
            item.received_quantity = line.received_quantity
            item.damaged_quantity = line.damaged_quantity
            item.missing_quantity = line.missing_quantity
            item.status = status

        self.refresh_status()

    def refresh_status(self) -> None:
        """Recompute line and order statuses from the stored counts."""
        for index, item in enumerate(self.items):
            item.status = resolve_line_status(item.fulfillment_line, index)
        self.fulfillment_status = aggregate_statuses([item.status for item in self.items])

    # --- Payments -------------------------------------------------------------

    def record_payment(self, amount: Money) -> None:
        if amount.amount <= 0:
            raise ValidationError("Payment amount must be positive")
        self.paid_amount = self.paid_amount + amount

    # --- Computed properties --------------------------------------------------

    @property
    def pricing_lines(self) -> list[OrderLine]:
        return [item.pricing_line for item in self.items]

    @property
    def fulfillment_lines(self) -> list[FulfillmentLine]:
        return [item.fulfillment_line for item in self.items]

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def display_reference(self) -> str:
        if self.reference:
            return self.reference
        if self.id is None:
            return f"{self.kind.prefix}-NEW"
        return f"{self.kind.prefix}-{self.created_at.year}-{self.id:03d}"

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, sku: str) -> tuple[int, OrderItem]:
        for index, item in enumerate(self.items):
            if item.sku.lower() == sku.lower():
                return index, item
        raise ValidationError(f"SKU '{sku}' not found in this order")


def _merged(entered: int | None, stored: int | None) -> int | None:
    return stored if entered is None else entered
