"""Tests for environment-driven settings."""

from decimal import Decimal

import pytest

from hospops.domain.model.order import OrderKind
from hospops.domain.model.pricing import TaxComponent
from hospops.infrastructure.config import load_settings

_VARS = (
    "HOSPOPS_DATA_DIR",
    "HOSPOPS_LOG_LEVEL",
    "HOSPOPS_PURCHASE_TAXES",
    "HOSPOPS_PURCHASE_SHIPPING",
    "HOSPOPS_SALES_TAXES",
    "HOSPOPS_SALES_SHIPPING",
    "HOSPOPS_TRANSFER_SHIPPING",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the picture.
    monkeypatch.setattr("hospops.infrastructure.config.load_dotenv", lambda *a, **k: False)


class TestLoadSettings:

    def test_defaults(self):
        settings = load_settings()
        assert settings.log_level == "WARNING"
        purchase = settings.profile_for(OrderKind.PURCHASE)
        assert purchase.taxes == (TaxComponent("GST", Decimal("18")),)
        assert purchase.shipping_fee == Decimal("500")
        assert purchase.offers_enabled
        sales = settings.profile_for(OrderKind.SALES)
        assert [t.name for t in sales.taxes] == ["SGST", "CGST"]
        assert sales.shipping_fee == Decimal("200")
        assert not sales.offers_enabled
        assert settings.profile_for(OrderKind.TRANSFER).taxes == ()

    def test_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOSPOPS_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("HOSPOPS_LOG_LEVEL", "debug")
        monkeypatch.setenv("HOSPOPS_PURCHASE_TAXES", "GST:12")
        monkeypatch.setenv("HOSPOPS_SALES_SHIPPING", "0")
        settings = load_settings()
        assert settings.data_dir == tmp_path
        assert settings.log_level == "DEBUG"
        assert settings.profile_for(OrderKind.PURCHASE).taxes == (TaxComponent("GST", Decimal("12")),)
        assert settings.profile_for(OrderKind.SALES).shipping_fee == Decimal("0")

    def test_empty_taxes_means_untaxed(self, monkeypatch):
        monkeypatch.setenv("HOSPOPS_SALES_TAXES", "")
        assert load_settings().profile_for(OrderKind.SALES).taxes == ()

    @pytest.mark.parametrize(
        "name, value, message",
        [
            ("HOSPOPS_PURCHASE_TAXES", "GST18", "expected NAME:RATE"),
            ("HOSPOPS_SALES_TAXES", "SGST:nine", "invalid rate"),
            ("HOSPOPS_PURCHASE_TAXES", "GST:-5", "non-negative"),
            ("HOSPOPS_SALES_TAXES", "SGST:9,CGST:nan", "non-negative"),
            ("HOSPOPS_PURCHASE_TAXES", "GST:Infinity", "non-negative"),
            ("HOSPOPS_PURCHASE_SHIPPING", "-1", "non-negative"),
            ("HOSPOPS_SALES_SHIPPING", "lots", "must be a number"),
            ("HOSPOPS_LOG_LEVEL", "LOUD", "must be one of"),
        ],
    )
    def test_malformed_values_rejected(self, monkeypatch, name, value, message):
        monkeypatch.setenv(name, value)
        with pytest.raises(RuntimeError, match=message):
            load_settings()
