"""Application service: Quote Order use case (query).

Picks the pricing profile for the order kind, optionally selects an
offer, and runs the pricing calculator over the stored lines.  The
breakdown is rounded only when mapped to the DTO.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from hospops.application.dto import QuoteDTO, TaxLineDTO
from hospops.application.mappers import format_amount, format_rate
from hospops.application.offers import OFFER_CATALOG, find_offer, select_best_offer
from hospops.domain.exceptions import EntityNotFoundError, ValidationError
from hospops.domain.model.order import Order, OrderKind
from hospops.domain.model.pricing import OfferRule, PricingProfile, PricingResult
from hospops.domain.repository.order_repository import OrderRepository
from hospops.domain.service.pricing_calculator import balance_due, compute_totals

logger = logging.getLogger(__name__)


class QuoteOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        profiles: Mapping[OrderKind, PricingProfile],
        offers: Sequence[OfferRule] = OFFER_CATALOG,
    ) -> None:
        self._order_repo = order_repo
        self._profiles = profiles
        self._offers = offers

    def handle(
        self,
        order_id: int,
        offer_name: str | None = None,
        best_offer: bool = False,
    ) -> QuoteDTO:
        """Price an order.

        Args:
            order_id: The order to price.
            offer_name: Apply this catalog offer (if its minimum is met).
            best_offer: Apply the best eligible catalog offer instead.
        """
        order = self._order_repo.get(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        profile = self._profiles[order.kind]
        offer = self._choose_offer(order, profile, offer_name, best_offer)

        result = compute_totals(
            order.pricing_lines, profile.taxes, profile.shipping_fee, offer
        )
        logger.debug(
            "Quoted order #%s: subtotal=%s offer=%s total=%s",
            order_id, result.subtotal, offer.name if offer else None, result.total,
        )
        return self._to_dto(order, result)

    def _choose_offer(
        self,
        order: Order,
        profile: PricingProfile,
        offer_name: str | None,
        best_offer: bool,
    ) -> OfferRule | None:
        if offer_name is None and not best_offer:
            return None
        if not profile.offers_enabled:
            raise ValidationError(
                f"Offers do not apply to {order.kind.value.lower()} orders"
            )
        if offer_name is not None:
            return find_offer(offer_name, self._offers)
        return select_best_offer(order.total_quantity, self._offers)

    @staticmethod
    def _to_dto(order: Order, result: PricingResult) -> QuoteDTO:
        return QuoteDTO(
            order_id=order.id,  # type: ignore[arg-type]
            reference=order.display_reference,
            subtotal=format_amount(result.subtotal),
            offer_name=result.offer.name if result.offer else None,
            offer_discount=format_amount(result.offer_discount),
            discounted_subtotal=format_amount(result.discounted_subtotal),
            taxes=[
                TaxLineDTO(
                    name=line.name,
                    rate=format_rate(line.rate),
                    amount=format_amount(line.amount),
                )
                for line in result.taxes
            ],
            tax=format_amount(result.tax),
            shipping=format_amount(result.shipping),
            total=format_amount(result.total),
            paid=str(order.paid_amount),
            balance_due=format_amount(balance_due(result.total, order.paid_amount.amount)),
        )
