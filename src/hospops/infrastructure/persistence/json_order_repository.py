"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from hospops.domain.exceptions import EntityNotFoundError
from hospops.domain.model.order import Order, OrderItem, OrderKind
from hospops.domain.model.value_objects import Money
from hospops.domain.repository.order_repository import OrderRepository, apply_patch

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def list(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def get(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def create(self, order: Order) -> Order:
        orders = self._load_raw()
        order.id = max((o["id"] for o in orders), default=0) + 1
        orders.append(self._to_raw(order))
        self._persist_raw(orders)
        return order

    def update(self, order_id: int, patch: Mapping[str, Any]) -> Order:
        orders = self._load_raw()
        for i, raw in enumerate(orders):
            if raw["id"] == order_id:
                order = self._to_domain(raw)
                apply_patch(order, patch)
                orders[i] = self._to_raw(order)
                self._persist_raw(orders)
                return order
        raise EntityNotFoundError(f"Order #{order_id} not found")

    def delete(self, order_id: int) -> None:
        orders = self._load_raw()
        remaining = [raw for raw in orders if raw["id"] != order_id]
        if len(remaining) == len(orders):
            raise EntityNotFoundError(f"Order #{order_id} not found")
        self._persist_raw(remaining)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "kind": order.kind.value,
            "reference": order.reference,
            "counterparty": order.counterparty,
            "status": order.fulfillment_status.value,
            "paid_amount": str(order.paid_amount.amount),
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "sku": item.sku,
                    "name": item.name,
                    "quantity": item.quantity,
                    "unit_price": str(item.unit_price.amount),
                    "discount_percent": str(item.discount_percent),
                    "received_quantity": item.received_quantity,
                    "damaged_quantity": item.damaged_quantity,
                    "missing_quantity": item.missing_quantity,
                    "status": item.status.value,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderItem(
                sku=i["sku"],
                name=i["name"],
                quantity=i["quantity"],
                unit_price=Money(Decimal(i["unit_price"])),
                discount_percent=Decimal(i.get("discount_percent", "0")),
                received_quantity=i.get("received_quantity"),
                damaged_quantity=i.get("damaged_quantity"),
                missing_quantity=i.get("missing_quantity"),
            )
            for i in raw["items"]
        ]
        order = Order(
            id=raw["id"],
            kind=OrderKind(raw["kind"]),
            counterparty=raw["counterparty"],
            items=items,
            reference=raw.get("reference", ""),
            paid_amount=Money(Decimal(raw.get("paid_amount", "0"))),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
        # Stored statuses are only a snapshot for other readers of the file;
        # the counts are authoritative.
        order.refresh_status()
        return order

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
        logger.debug("Wrote %d order(s) to %s", len(orders), self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
