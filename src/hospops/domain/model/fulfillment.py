"""Receiving-desk types: counted quantities and the statuses derived from them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LineStatus(Enum):
    PENDING = "pending"
    FULFILLED = "fulfilled"
    PARTIAL = "partial"
    DAMAGED = "damaged"
    MISSING = "missing"


class OrderFulfillmentStatus(Enum):
    PENDING = "Pending"
    PARTIALLY_FULFILLED = "Partially Fulfilled"
    FULFILLED = "Fulfilled"


@dataclass(frozen=True)
class FulfillmentLine:
    """Counts entered for one order line.

    ``None`` means the operator has not entered that count yet.  The
    ordered quantity is fixed when the order is created.
    """

    ordered_quantity: int
    received_quantity: int | None = None
    damaged_quantity: int | None = None
    missing_quantity: int | None = None

    @property
    def is_untouched(self) -> bool:
        return (
            self.received_quantity is None
            and self.damaged_quantity is None
            and self.missing_quantity is None
        )

    @property
    def prefilled_received(self) -> int:
        """What the receiving form shows before anything is typed."""
        if self.received_quantity is None:
            return self.ordered_quantity
        return self.received_quantity


@dataclass(frozen=True)
class ReceiptTotals:
    ordered: int
    received: int
    damaged: int
    missing: int
