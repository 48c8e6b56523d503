"""Tests for queue serving and receipt reporting."""

import pandas as pd
import pytest

from fuel_station.core.customer import Customer
from fuel_station.core.forecourt import (
    RECEIPT_COLUMNS,
    receipts_to_frame,
    serve_queue,
    summarize,
)
from fuel_station.core.vehicle import Vehicle


def _sample_queue() -> list[Customer]:
    """Return three customers: fill-up, budget-limited and sub-minimum."""
    return [
        Customer(money=1000.0, vehicle=Vehicle(max_tank_capacity=50.0, fuel_remains=10.0)),
        Customer(money=100.0, vehicle=Vehicle(max_tank_capacity=50.0, fuel_remains=10.0)),
        Customer(money=30.0, vehicle=Vehicle(max_tank_capacity=50.0, fuel_remains=48.0)),
    ]


def test_serve_queue_fills_each_customer() -> None:
    """Each customer is filled in order with its own requested amount."""
    queue = _sample_queue()
    receipts = serve_queue(queue, 20.0, [None, 30.0, 5.0])

    assert [r.poured for r in receipts] == [True, True, False]
    assert queue[0].vehicle.fuel_remains == pytest.approx(50.0)
    assert queue[0].money == pytest.approx(200.0)
    assert queue[1].vehicle.fuel_remains == pytest.approx(15.0)
    assert queue[1].money == pytest.approx(0.0)
    assert queue[2].vehicle.fuel_remains == 48.0
    assert queue[2].money == 30.0


def test_serve_queue_without_amounts_fills_to_full() -> None:
    """Without amounts every customer asks for a full tank."""
    queue = _sample_queue()
    receipts = serve_queue(queue, 20.0)
    assert receipts[0].liters == pytest.approx(40.0)
    assert receipts[1].liters == pytest.approx(5.0)
    assert receipts[2].poured is False


def test_serve_queue_rejects_mismatched_amounts() -> None:
    """A length mismatch raises before anyone is served."""
    queue = _sample_queue()
    with pytest.raises(ValueError, match="amounts has 2 entries"):
        serve_queue(queue, 20.0, [None, 10.0])
    assert queue[0].money == 1000.0


def test_receipts_to_frame_columns() -> None:
    """The receipt table has one row per fill and the fixed columns."""
    receipts = serve_queue(_sample_queue(), 20.0, [None, 30.0, 5.0])
    frame = receipts_to_frame(receipts)
    assert isinstance(frame, pd.DataFrame)
    assert list(frame.columns) == list(RECEIPT_COLUMNS)
    assert len(frame) == 3
    assert frame["cost"].tolist() == pytest.approx([800.0, 100.0, 0.0])


def test_summarize_totals() -> None:
    """Totals count served fills, liters and revenue."""
    receipts = serve_queue(_sample_queue(), 20.0, [None, 30.0, 5.0])
    totals = summarize(receipts)
    assert totals == {
        "customers": 3,
        "served": 2,
        "liters": 45.0,
        "revenue": 900.0,
    }


def test_summarize_empty_queue() -> None:
    """An empty queue summarises to zeros."""
    totals = summarize([])
    assert totals["customers"] == 0
    assert totals["served"] == 0
    assert totals["liters"] == 0.0
    assert totals["revenue"] == 0.0
