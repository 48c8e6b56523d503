"""Pump rounding policy for the fuel station engine."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PumpPolicy:
    """Rounding and threshold constants applied by every fill.

    Attributes:
        liter_step: Granularity the poured volume is truncated to, in liters.
        min_pour: Smallest volume the pump will dispense, in liters.
        currency_step: Granularity the charged cost is rounded to.
    """

    liter_step: float = 0.1
    min_pour: float = 2.0
    currency_step: float = 0.01

    def __post_init__(self) -> None:
        """Validate policy parameters."""
        if self.liter_step <= 0.0:
            raise ValueError("liter_step must be > 0.0.")
        if self.min_pour < 0.0:
            raise ValueError("min_pour must be >= 0.0.")
        if self.currency_step <= 0.0:
            raise ValueError("currency_step must be > 0.0.")

    @property
    def liter_quantum(self) -> Decimal:
        return Decimal(str(self.liter_step))

    @property
    def currency_quantum(self) -> Decimal:
        return Decimal(str(self.currency_step))


DEFAULT_POLICY = PumpPolicy()
