"""Abstract repository for Order aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from hospops.domain.exceptions import ValidationError
from hospops.domain.model.order import MAX_LINE_ITEMS, Order, OrderItem
from hospops.domain.model.value_objects import Money

# Fields a patch may touch.  Statuses are derived from the item counts and
# cannot be patched.
PATCHABLE_FIELDS = frozenset({"counterparty", "reference", "items", "paid_amount"})


class OrderRepository(ABC):

    @abstractmethod
    def list(self) -> list[Order]:
        """Return every stored order, oldest first."""

    @abstractmethod
    def get(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def create(self, order: Order) -> Order:
        """Persist a new order, assigning the next ID."""

    @abstractmethod
    def update(self, order_id: int, patch: Mapping[str, Any]) -> Order:
        """Apply *patch* to a stored order and return the updated order.

        Raises EntityNotFoundError for an unknown ID and ValidationError
        for a field outside ``PATCHABLE_FIELDS`` or a value of the wrong shape.
        """

    @abstractmethod
    def delete(self, order_id: int) -> None:
        """Remove an order.  Raises EntityNotFoundError for an unknown ID."""


def apply_patch(order: Order, patch: Mapping[str, Any]) -> None:
    """Shared patch semantics for every repository implementation.

    Every value is checked before the order changes.
    """
    unknown = sorted(set(patch) - PATCHABLE_FIELDS)
    if unknown:
        raise ValidationError(f"Cannot patch order field(s): {', '.join(unknown)}")
    checked = {name: _check_value(name, value) for name, value in patch.items()}
    for name, value in checked.items():
        setattr(order, name, value)
    order.refresh_status()


def _check_value(name: str, value: Any) -> Any:
    if name == "paid_amount":
        if not isinstance(value, Money):
            raise ValidationError(f"paid_amount must be Money, got {type(value).__name__}")
        return value
    if name == "items":
        if not isinstance(value, list) or not value:
            raise ValidationError("items must be a non-empty list")
        if len(value) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")
        if not all(isinstance(item, OrderItem) for item in value):
            raise ValidationError("items must contain OrderItem entries only")
        return value
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string, got {type(value).__name__}")
    # A blank reference falls back to the generated one.
    if name == "counterparty" and not value.strip():
        raise ValidationError("counterparty cannot be blank")
    return value.strip()
