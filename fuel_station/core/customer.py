"""Customer model for the fuel station engine."""

from __future__ import annotations

from dataclasses import dataclass

from fuel_station.core.vehicle import Vehicle


@dataclass
class Customer:
    """A paying customer and the vehicle they bring to the pump.

    Attributes:
        money: Available funds in currency units (>= 0.0).
        vehicle: The customer's vehicle.
    """

    money: float
    vehicle: Vehicle

    def __post_init__(self) -> None:
        if self.money < 0.0:
            raise ValueError("money must be >= 0.0.")
