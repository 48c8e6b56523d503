"""Core pump modules for the fuel station engine."""

from fuel_station.core.customer import Customer
from fuel_station.core.forecourt import receipts_to_frame, serve_queue, summarize
from fuel_station.core.policy import DEFAULT_POLICY, PumpPolicy
from fuel_station.core.pump import FillReceipt, fill_tank
from fuel_station.core.vehicle import Vehicle

__all__ = [
    "Customer",
    "DEFAULT_POLICY",
    "FillReceipt",
    "PumpPolicy",
    "Vehicle",
    "fill_tank",
    "receipts_to_frame",
    "serve_queue",
    "summarize",
]
