"""Application service: List Orders use case (query)."""

from __future__ import annotations

from collections.abc import Mapping

from hospops.application.dto import OrderSummaryDTO
from hospops.application.mappers import format_amount
from hospops.domain.model.order import OrderKind
from hospops.domain.model.pricing import PricingProfile
from hospops.domain.repository.order_repository import OrderRepository
from hospops.domain.service.pricing_calculator import compute_totals


class ListOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        profiles: Mapping[OrderKind, PricingProfile],
    ) -> None:
        self._order_repo = order_repo
        self._profiles = profiles

    def handle(self, kind: OrderKind | None = None) -> list[OrderSummaryDTO]:
        """List orders, optionally of one kind, with their list-price totals.

        Totals here never include an offer; quoting an order shows the
        discounted figure.
        """
        rows: list[OrderSummaryDTO] = []
        for order in self._order_repo.list():
            if kind is not None and order.kind is not kind:
                continue
            profile = self._profiles[order.kind]
            result = compute_totals(order.pricing_lines, profile.taxes, profile.shipping_fee)
            rows.append(
                OrderSummaryDTO(
                    id=order.id,  # type: ignore[arg-type]
                    kind=order.kind.value,
                    reference=order.display_reference,
                    counterparty=order.counterparty,
                    status=order.fulfillment_status.value,
                    line_count=len(order.items),
                    total=format_amount(result.total),
                )
            )
        return rows
