"""Application service: Record Receipt use case.

Applies the counts entered at the receiving desk to an order.  The Order
aggregate re-derives every line status and the overall status from the
counts; this handler only loads, delegates and persists.
"""

from __future__ import annotations

import logging

from hospops.application.dto import ReceiptDTO
from hospops.application.mappers import item_to_dto
from hospops.domain.exceptions import EntityNotFoundError
from hospops.domain.model.order import ReceiptCount
from hospops.domain.repository.order_repository import OrderRepository
from hospops.domain.service.fulfillment_resolver import summarize_receipt

logger = logging.getLogger(__name__)


class RecordReceiptHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, counts: dict[str, ReceiptCount]) -> ReceiptDTO:
        """Record counted quantities for an order.

        Args:
            order_id: The order being received.
            counts: Mapping of SKU -> counts typed in by the operator.
        """
        order = self._order_repo.get(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.record_receipt(counts)
        order = self._order_repo.update(order_id, {"items": order.items})
        logger.info(
            "Recorded receipt for order #%s (%d SKU(s)) -> %s",
            order_id, len(counts), order.fulfillment_status.value,
        )

        totals = summarize_receipt(order.fulfillment_lines)
        return ReceiptDTO(
            order_id=order_id,
            reference=order.display_reference,
            status=order.fulfillment_status.value,
            items=[item_to_dto(item) for item in order.items],
            ordered=totals.ordered,
            received=totals.received,
            damaged=totals.damaged,
            missing=totals.missing,
        )
