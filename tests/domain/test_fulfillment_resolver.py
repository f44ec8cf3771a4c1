"""Unit tests for the fulfillment resolver."""

import pytest

from hospops.domain.exceptions import InvalidInputError
from hospops.domain.model.fulfillment import (
    FulfillmentLine,
    LineStatus,
    OrderFulfillmentStatus,
    ReceiptTotals,
)
from hospops.domain.service.fulfillment_resolver import (
    aggregate_statuses,
    resolve_line_status,
    resolve_order_status,
    summarize_receipt,
)


def _line(ordered=10, received=None, damaged=None, missing=None) -> FulfillmentLine:
    return FulfillmentLine(ordered, received, damaged, missing)


# ── resolve_line_status ──────────────────────────────────────────────────────


class TestResolveLineStatus:

    def test_untouched_line_is_pending(self):
        assert resolve_line_status(_line()) is LineStatus.PENDING

    def test_exact_match_fulfilled(self):
        assert resolve_line_status(_line(10, 10, 0, 0)) is LineStatus.FULFILLED

    def test_short_receipt_partial(self):
        assert resolve_line_status(_line(10, 7, 0, 0)) is LineStatus.PARTIAL

    def test_full_receipt_with_damage_is_partial(self):
        assert resolve_line_status(_line(10, 10, 1, 0)) is LineStatus.PARTIAL

    def test_full_receipt_with_missing_is_partial(self):
        assert resolve_line_status(_line(10, 10, 0, 2)) is LineStatus.PARTIAL

    def test_nothing_received_all_damaged(self):
        assert resolve_line_status(_line(10, 0, 10, 0)) is LineStatus.DAMAGED

    def test_nothing_received_all_missing(self):
        assert resolve_line_status(_line(10, 0, 0, 10)) is LineStatus.MISSING

    def test_damaged_wins_tie_break(self):
        assert resolve_line_status(_line(10, 0, 3, 3)) is LineStatus.DAMAGED

    def test_nothing_received_nothing_reported_is_partial(self):
        assert resolve_line_status(_line(10, 0, 0, 0)) is LineStatus.PARTIAL

    def test_unentered_received_reads_as_ordered(self):
        # Operator only typed a damaged count; received stays prefilled.
        assert resolve_line_status(_line(10, damaged=2)) is LineStatus.PARTIAL

    def test_unentered_damage_and_missing_read_as_zero(self):
        assert resolve_line_status(_line(10, received=10)) is LineStatus.FULFILLED

    def test_idempotent(self):
        line = _line(10, 4, 3, 3)
        assert resolve_line_status(line) is resolve_line_status(line)


class TestResolveLineStatusInvalid:

    def test_negative_received_rejected(self):
        with pytest.raises(InvalidInputError, match="received_quantity") as info:
            resolve_line_status(_line(10, -1, 0, 0))
        assert info.value.field == "received_quantity"

    def test_negative_damaged_rejected(self):
        with pytest.raises(InvalidInputError, match="cannot be negative"):
            resolve_line_status(_line(10, 5, -2, 0))

    def test_count_above_ordered_rejected(self):
        with pytest.raises(InvalidInputError, match="exceeds ordered quantity 10"):
            resolve_line_status(_line(10, 11, 0, 0))

    def test_missing_above_ordered_rejected(self):
        with pytest.raises(InvalidInputError, match="missing_quantity"):
            resolve_line_status(_line(10, 0, 0, 12))

    def test_zero_ordered_rejected(self):
        with pytest.raises(InvalidInputError, match="ordered_quantity"):
            resolve_line_status(_line(0))

    def test_non_integer_count_rejected(self):
        with pytest.raises(InvalidInputError, match="must be an integer"):
            resolve_line_status(_line(10, 2.5, 0, 0))

    def test_line_index_reported(self):
        with pytest.raises(InvalidInputError, match="on line 1"):
            resolve_order_status([_line(10, 10, 0, 0), _line(10, -1, 0, 0)])


# ── resolve_order_status ─────────────────────────────────────────────────────


class TestResolveOrderStatus:

    def test_all_fulfilled(self):
        lines = [_line(10, 10, 0, 0), _line(5, 5, 0, 0)]
        assert resolve_order_status(lines) is OrderFulfillmentStatus.FULFILLED

    def test_fulfilled_and_partial(self):
        lines = [_line(10, 10, 0, 0), _line(5, 3, 0, 0)]
        assert resolve_order_status(lines) is OrderFulfillmentStatus.PARTIALLY_FULFILLED

    def test_any_damaged_line(self):
        lines = [_line(10, 10, 0, 0), _line(5, 0, 5, 0)]
        assert resolve_order_status(lines) is OrderFulfillmentStatus.PARTIALLY_FULFILLED

    def test_all_pending(self):
        assert resolve_order_status([_line(), _line(5)]) is OrderFulfillmentStatus.PENDING

    def test_fulfilled_and_pending_is_pending(self):
        lines = [_line(10, 10, 0, 0), _line(5)]
        assert resolve_order_status(lines) is OrderFulfillmentStatus.PENDING

    def test_empty_order_is_pending(self):
        assert resolve_order_status([]) is OrderFulfillmentStatus.PENDING

    def test_aggregate_from_statuses(self):
        statuses = [LineStatus.FULFILLED, LineStatus.MISSING]
        assert aggregate_statuses(statuses) is OrderFulfillmentStatus.PARTIALLY_FULFILLED


# ── summarize_receipt ────────────────────────────────────────────────────────


class TestSummarizeReceipt:

    def test_totals(self):
        lines = [_line(10, 8, 2, 0), _line(5, 0, 0, 5), _line(3)]
        assert summarize_receipt(lines) == ReceiptTotals(
            ordered=18, received=11, damaged=2, missing=5
        )

    def test_empty(self):
        assert summarize_receipt([]) == ReceiptTotals(0, 0, 0, 0)
