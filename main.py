"""CLI entrypoint for the fuel station pump engine."""

from __future__ import annotations

import logging
import sys

from fuel_station import __version__
from fuel_station.config import load_demo_queue, load_policy
from fuel_station.core.forecourt import receipts_to_frame, serve_queue, summarize


def main() -> None:
    """Serve the demo forecourt queue and print the receipts."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print(f"Fuel Station Pump Engine v{__version__}")
    print("=" * 56)

    # -- Load configuration ---------------------------------------------------
    policy = load_policy()
    fuel_price, customers, amounts = load_demo_queue()
    print(
        f"\nPolicy: step={policy.liter_step} L, min pour={policy.min_pour} L, "
        f"currency step={policy.currency_step}"
    )
    print(f"Price : {fuel_price:.2f} per liter")
    print(f"Queue : {len(customers)} customers")
    print("-" * 56)

    # -- Serve the queue ------------------------------------------------------
    receipts = serve_queue(customers, fuel_price, amounts, policy)
    frame = receipts_to_frame(receipts)
    frame["fuel_after"] = [c.vehicle.fuel_remains for c in customers]
    frame["money_after"] = [c.money for c in customers]
    print()
    print(frame.to_string(index_names=False))

    totals = summarize(receipts)
    print(
        f"\nServed {totals['served']}/{totals['customers']} customers, "
        f"{totals['liters']:.1f} L for {totals['revenue']:.2f}"
    )
    full = sum(1 for c in customers if c.vehicle.is_full)
    print(f"Tanks full after service: {full}/{len(customers)}")


if __name__ == "__main__":
    sys.exit(main() or 0)
