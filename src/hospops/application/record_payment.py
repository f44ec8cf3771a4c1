"""Application service: Record Payment use case."""

from __future__ import annotations

import logging

from hospops.domain.exceptions import EntityNotFoundError
from hospops.domain.model.value_objects import Money
from hospops.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class RecordPaymentHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, amount: str) -> str:
        """Add a payment to the order and return the new paid total."""
        order = self._order_repo.get(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.record_payment(Money.of(amount))
        order = self._order_repo.update(order_id, {"paid_amount": order.paid_amount})
        logger.info("Order #%s paid amount now %s", order_id, order.paid_amount)
        return str(order.paid_amount)
