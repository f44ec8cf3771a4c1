"""Domain service: Fulfillment Resolver.

Derives the status of each received order line, and of the order as a
whole, purely from the counted quantities.  Status is never stored as
independent state: callers re-run these functions whenever a count
changes and treat the result as a projection of the counts.
"""

from __future__ import annotations

from collections.abc import Sequence

from hospops.domain.exceptions import InvalidInputError
from hospops.domain.model.fulfillment import (
    FulfillmentLine,
    LineStatus,
    OrderFulfillmentStatus,
    ReceiptTotals,
)

_DEVIATIONS = frozenset({LineStatus.PARTIAL, LineStatus.DAMAGED, LineStatus.MISSING})


def resolve_line_status(
    line: FulfillmentLine, line_index: int | None = None
) -> LineStatus:
    """Return the status of a single line.

    Branches are tried in order and the first match wins, so a full
    receipt with any damaged or missing units falls through to
    ``partial``.
    """
    ordered, received, damaged, missing = _validated_counts(line, line_index)

    if line.is_untouched:
        return LineStatus.PENDING

    if received == ordered and damaged == 0 and missing == 0:
        return LineStatus.FULFILLED
    if received == 0 and (damaged > 0 or missing > 0):
        # Damaged wins when both are non-zero; kept for compatibility with
        # existing receiving records.
        return LineStatus.DAMAGED if damaged > 0 else LineStatus.MISSING
    if received < ordered or damaged > 0 or missing > 0:
        return LineStatus.PARTIAL
    return LineStatus.PENDING


def resolve_order_status(lines: Sequence[FulfillmentLine]) -> OrderFulfillmentStatus:
    """Aggregate line statuses into one order-level status.

    An order with no lines is ``Pending``, never vacuously fulfilled.
    """
    statuses = [resolve_line_status(line, i) for i, line in enumerate(lines)]
    return aggregate_statuses(statuses)


def aggregate_statuses(statuses: Sequence[LineStatus]) -> OrderFulfillmentStatus:
    if statuses and all(s is LineStatus.FULFILLED for s in statuses):
        return OrderFulfillmentStatus.FULFILLED
    if any(s in _DEVIATIONS for s in statuses):
        return OrderFulfillmentStatus.PARTIALLY_FULFILLED
    return OrderFulfillmentStatus.PENDING


def summarize_receipt(lines: Sequence[FulfillmentLine]) -> ReceiptTotals:
    """Sum ordered / received / damaged / missing across a receiving sheet.

    Unentered counts contribute what the form displays for them.
    """
    ordered = received = damaged = missing = 0
    for index, line in enumerate(lines):
        o, r, d, m = _validated_counts(line, index)
        ordered += o
        received += r
        damaged += d
        missing += m
    return ReceiptTotals(ordered=ordered, received=received, damaged=damaged, missing=missing)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _validated_counts(
    line: FulfillmentLine, index: int | None
) -> tuple[int, int, int, int]:
    ordered = line.ordered_quantity
    if not _is_int(ordered) or ordered <= 0:
        raise InvalidInputError(
            "ordered_quantity", f"must be a positive integer, got {ordered!r}", index
        )

    counts = []
    for field, value in (
        ("received_quantity", line.received_quantity),
        ("damaged_quantity", line.damaged_quantity),
        ("missing_quantity", line.missing_quantity),
    ):
        if value is None:
            counts.append(None)
            continue
        if not _is_int(value):
            raise InvalidInputError(field, f"must be an integer, got {value!r}", index)
        if value < 0:
            raise InvalidInputError(field, f"cannot be negative, got {value}", index)
        if value > ordered:
            raise InvalidInputError(
                field, f"{value} exceeds ordered quantity {ordered}", index
            )
        counts.append(value)

    received, damaged, missing = counts
    return (
        ordered,
        line.prefilled_received if received is None else received,
        damaged or 0,
        missing or 0,
    )


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
