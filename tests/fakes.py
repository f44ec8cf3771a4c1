"""In-memory fake repositories for testing.

These implement the same abstract interface as the JSON repository
but keep everything in a dict. No file I/O, no side effects.  Orders are
copied on the way in and out so a test only sees changes that went
through ``create`` / ``update``, as with the real store.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from hospops.domain.exceptions import EntityNotFoundError
from hospops.domain.model.order import Order
from hospops.domain.repository.order_repository import OrderRepository, apply_patch


class FakeOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        for order in orders or []:
            self.create(order)

    def list(self) -> list[Order]:
        return [copy.deepcopy(o) for o in self._store.values()]

    def get(self, order_id: int) -> Order | None:
        order = self._store.get(order_id)
        return copy.deepcopy(order) if order is not None else None

    def create(self, order: Order) -> Order:
        order.id = self._next_id
        self._next_id += 1
        self._store[order.id] = copy.deepcopy(order)
        return order

    def update(self, order_id: int, patch: Mapping[str, Any]) -> Order:
        stored = self._store.get(order_id)
        if stored is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        apply_patch(stored, copy.deepcopy(dict(patch)))
        return copy.deepcopy(stored)

    def delete(self, order_id: int) -> None:
        if self._store.pop(order_id, None) is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
