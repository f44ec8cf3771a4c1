"""Offer catalog and caller-side offer selection.

The pricing calculator evaluates exactly one offer per call and never
ranks them; picking which offer to pass in happens here.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from hospops.domain.exceptions import EntityNotFoundError
from hospops.domain.model.pricing import OfferRule

OFFER_CATALOG: tuple[OfferRule, ...] = (
    OfferRule(name="Bulk Discount 10%", minimum_quantity=100, discount_rate=Decimal("10")),
    OfferRule(name="Early Bird 5%", minimum_quantity=1, discount_rate=Decimal("5")),
    OfferRule(name="Seasonal Offer 15%", minimum_quantity=50, discount_rate=Decimal("15")),
)


def find_offer(name: str, offers: Sequence[OfferRule] = OFFER_CATALOG) -> OfferRule:
    for offer in offers:
        if offer.name.lower() == name.strip().lower():
            return offer
    raise EntityNotFoundError(f"Offer not found: '{name}'")


def select_best_offer(
    total_quantity: int, offers: Sequence[OfferRule] = OFFER_CATALOG
) -> OfferRule | None:
    """Highest-rate offer whose minimum quantity is met; earlier entries win ties."""
    best: OfferRule | None = None
    for offer in offers:
        if total_quantity < offer.minimum_quantity:
            continue
        if best is None or Decimal(str(offer.discount_rate)) > Decimal(str(best.discount_rate)):
            best = offer
    return best
