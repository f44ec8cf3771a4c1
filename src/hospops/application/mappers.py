"""Domain -> DTO mapping shared by the query and command handlers."""

from __future__ import annotations

from decimal import Decimal

from hospops.application.dto import OrderDTO, OrderItemDTO
from hospops.domain.model.order import Order, OrderItem
from hospops.domain.model.value_objects import CURRENCY_SYMBOL, group_indian


def item_to_dto(item: OrderItem) -> OrderItemDTO:
    line = item.fulfillment_line
    return OrderItemDTO(
        sku=item.sku,
        name=item.name,
        quantity=item.quantity,
        unit_price=str(item.unit_price),
        discount_percent=format_rate(item.discount_percent),
        line_subtotal=str(item.line_subtotal),
        received=line.prefilled_received,
        damaged=item.damaged_quantity or 0,
        missing=item.missing_quantity or 0,
        status=item.status.value,
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        kind=order.kind.value,
        reference=order.display_reference,
        counterparty=order.counterparty,
        status=order.fulfillment_status.value,
        items=[item_to_dto(item) for item in order.items],
        paid_amount=str(order.paid_amount),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def format_amount(amount: Decimal) -> str:
    """Signed currency display; negative balances read as ``-₹500.00``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{group_indian(abs(amount))}"


def format_rate(rate: Decimal) -> str:
    return f"{rate.normalize():f}%"
