"""Queue serving and receipt reporting for the fuel station engine."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import pandas as pd

from fuel_station.core.customer import Customer
from fuel_station.core.policy import PumpPolicy
from fuel_station.core.pump import FillReceipt, fill_tank

logger = logging.getLogger(__name__)

RECEIPT_COLUMNS: tuple[str, ...] = ("requested", "liters", "cost", "poured")


def serve_queue(
    customers: Sequence[Customer],
    fuel_price: float,
    amounts: Sequence[float | None] | None = None,
    policy: PumpPolicy | None = None,
) -> list[FillReceipt]:
    """Serve every customer in order at a single pump price.

    Args:
        customers: Customers in arrival order; each is mutated in place.
        fuel_price: Price per liter applied to the whole queue.
        amounts: Optional per-customer requested liters, parallel to
            *customers*.  ``None`` entries fill that tank to full.
        policy: Rounding policy passed to every fill.

    Returns:
        One :class:`FillReceipt` per customer, in queue order.

    Raises:
        ValueError: If *amounts* does not match *customers* in length.
    """
    if amounts is None:
        amounts = [None] * len(customers)
    if len(amounts) != len(customers):
        raise ValueError(
            f"amounts has {len(amounts)} entries but the queue has "
            f"{len(customers)} customers"
        )

    receipts: list[FillReceipt] = [
        fill_tank(customer, fuel_price, amount, policy)
        for customer, amount in zip(customers, amounts)
    ]

    served = sum(1 for r in receipts if r.poured)
    logger.info("Served %d of %d customers at %s", served, len(receipts), fuel_price)
    return receipts


def receipts_to_frame(receipts: Sequence[FillReceipt]) -> pd.DataFrame:
    """Tabulate receipts, one row per fill, in queue order."""
    rows = [
        {
            "requested": r.requested,
            "liters": r.liters,
            "cost": r.cost,
            "poured": r.poured,
        }
        for r in receipts
    ]
    return pd.DataFrame(rows, columns=list(RECEIPT_COLUMNS))


def summarize(receipts: Sequence[FillReceipt]) -> dict[str, Any]:
    """Aggregate totals over a served queue.

    Returns:
        Dictionary containing:
            customers -- Number of receipts (int).
            served    -- Number of fills that poured fuel (int).
            liters    -- Total liters poured (float, 1 dp).
            revenue   -- Total charged (float, 2 dp).
    """
    frame = receipts_to_frame(receipts)
    return {
        "customers": len(frame),
        "served": int(frame["poured"].sum()),
        "liters": round(float(frame["liters"].sum()), 1),
        "revenue": round(float(frame["cost"].sum()), 2),
    }
