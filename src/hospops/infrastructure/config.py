"""Runtime settings, read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

from hospops.domain.model.order import OrderKind
from hospops.domain.model.pricing import PricingProfile, TaxComponent

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def _get_decimal(name: str, fallback: str) -> Decimal:
    raw_value = os.getenv(name, fallback)
    try:
        value = Decimal(raw_value)
    except InvalidOperation:
        raise RuntimeError(f"{name} must be a number, got {raw_value!r}")
    if not value.is_finite() or value < 0:
        raise RuntimeError(f"{name} must be a non-negative number, got {raw_value!r}")
    return value


def _get_taxes(name: str, fallback: str) -> tuple[TaxComponent, ...]:
    """Parse ``NAME:RATE,NAME:RATE``; an empty value means no tax."""
    raw_value = os.getenv(name, fallback)
    components: list[TaxComponent] = []
    for pair in raw_value.split(","):
        pair = pair.strip()
        if not pair:
            continue
        tax_name, sep, rate = pair.rpartition(":")
        if not sep or not tax_name.strip():
            raise RuntimeError(f"{name}: expected NAME:RATE, got {pair!r}")
        try:
            value = Decimal(rate.strip())
        except InvalidOperation:
            raise RuntimeError(f"{name}: invalid rate in {pair!r}")
        if not value.is_finite() or value < 0:
            raise RuntimeError(f"{name}: rate must be a non-negative number, got {pair!r}")
        components.append(TaxComponent(tax_name.strip(), value))
    return tuple(components)


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str = "WARNING"
    profiles: dict[OrderKind, PricingProfile] = field(default_factory=dict)

    def profile_for(self, kind: OrderKind) -> PricingProfile:
        return self.profiles[kind]


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_settings() -> Settings:
    load_dotenv(_PROJECT_ROOT / ".env")

    log_level = os.getenv("HOSPOPS_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise RuntimeError(f"HOSPOPS_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")

    return Settings(
        data_dir=Path(os.getenv("HOSPOPS_DATA_DIR", str(_PROJECT_ROOT / "data"))),
        log_level=log_level,
        profiles={
            OrderKind.PURCHASE: PricingProfile(
                taxes=_get_taxes("HOSPOPS_PURCHASE_TAXES", "GST:18"),
                shipping_fee=_get_decimal("HOSPOPS_PURCHASE_SHIPPING", "500"),
                offers_enabled=True,
            ),
            OrderKind.SALES: PricingProfile(
                taxes=_get_taxes("HOSPOPS_SALES_TAXES", "SGST:9,CGST:9"),
                shipping_fee=_get_decimal("HOSPOPS_SALES_SHIPPING", "200"),
            ),
            OrderKind.TRANSFER: PricingProfile(
                taxes=(),
                shipping_fee=_get_decimal("HOSPOPS_TRANSFER_SHIPPING", "0"),
            ),
        },
    )
