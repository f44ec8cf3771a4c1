from decimal import Decimal

import pytest

from hospops.domain.model.order import OrderKind
from hospops.domain.model.pricing import PricingProfile, TaxComponent


@pytest.fixture
def profiles() -> dict[OrderKind, PricingProfile]:
    return {
        OrderKind.PURCHASE: PricingProfile(
            taxes=(TaxComponent("GST", Decimal("18")),),
            shipping_fee=Decimal("500"),
            offers_enabled=True,
        ),
        OrderKind.SALES: PricingProfile(
            taxes=(TaxComponent("SGST", Decimal("9")), TaxComponent("CGST", Decimal("9"))),
            shipping_fee=Decimal("200"),
        ),
        OrderKind.TRANSFER: PricingProfile(taxes=(), shipping_fee=Decimal("0")),
    }
