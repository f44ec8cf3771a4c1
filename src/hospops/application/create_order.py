"""Application service: Create Order use case.

Builds the line items from the requested specs and lets the Order
aggregate validate all business rules before anything is persisted.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from hospops.application.dto import OrderDTO, OrderItemSpec
from hospops.application.mappers import order_to_dto
from hospops.domain.exceptions import ValidationError
from hospops.domain.model.order import Order, OrderItem, OrderKind
from hospops.domain.model.value_objects import Money
from hospops.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        kind: OrderKind,
        counterparty: str,
        item_specs: list[OrderItemSpec],
        reference: str = "",
    ) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Build OrderItems from the specs (prices parsed as Decimal).
        2. Let the Order aggregate validate all business rules.
        3. Persist and return a DTO.
        """
        items = [self._build_item(spec) for spec in item_specs]

        order = Order.create(
            kind=kind, counterparty=counterparty, items=items, reference=reference
        )
        order = self._order_repo.create(order)
        logger.info(
            "Created %s order #%s for %s with %d line(s)",
            kind.value, order.id, order.counterparty, len(order.items),
        )
        return order_to_dto(order)

    @staticmethod
    def _build_item(spec: OrderItemSpec) -> OrderItem:
        if not spec.sku or not spec.sku.strip():
            raise ValidationError("Every item needs a SKU")
        try:
            discount = Decimal(str(spec.discount_percent))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(
                f"Invalid discount for '{spec.sku}': {spec.discount_percent!r}"
            ) from exc
        return OrderItem(
            sku=spec.sku.strip(),
            name=(spec.name or spec.sku).strip(),
            quantity=spec.quantity,
            unit_price=Money.of(spec.unit_price),
            discount_percent=discount,
        )
