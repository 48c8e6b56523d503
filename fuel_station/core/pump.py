"""Fuel pump transaction logic for the fuel station engine.

A fill pours the smallest of three bounds: the volume the customer asked
for, the free space left in the tank and the volume the customer can pay
for.  The result is truncated to the policy's liter step, and anything
below the minimum pour is refused without touching the customer's state.
The charged cost is rounded half-up to the policy's currency step.

Arithmetic runs on ``Decimal`` values built from ``str(value)`` so that
truncation and rounding see the figures as written (``10.99`` stays
``10.99`` instead of ``10.9899999...``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal

from fuel_station.core.customer import Customer
from fuel_station.core.policy import DEFAULT_POLICY, PumpPolicy

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FillReceipt:
    """Outcome of a single fill.

    Attributes:
        requested: Liters asked for (the free space when no amount was given).
        liters: Liters actually poured, a multiple of the liter step.
        cost: Amount charged to the customer, rounded half-up to the
            currency step.  When that rounding would exceed the balance the
            charge is capped at the balance, which need not be a whole cent.
        poured: False when the fill was refused below the minimum pour.
    """

    requested: float
    liters: float
    cost: float
    poured: bool


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _dec(value: float) -> Decimal:
    return Decimal(str(value))


def _to_step(value: Decimal, step: Decimal, rounding: str) -> Decimal:
    """Round *value* to a whole multiple of *step* using *rounding*."""
    return (value / step).to_integral_value(rounding=rounding) * step


# ---------------------------------------------------------------------------
# Fill operation
# ---------------------------------------------------------------------------


def fill_tank(
    customer: Customer,
    fuel_price: float,
    amount: float | None = None,
    policy: PumpPolicy | None = None,
) -> FillReceipt:
    """Pour fuel into the customer's vehicle and charge for it.

    The poured volume is ``min(requested, free space, money / fuel_price)``
    truncated to ``policy.liter_step``.  If that is below
    ``policy.min_pour`` nothing changes.  Otherwise the vehicle's
    ``fuel_remains`` grows by the poured volume and the customer's
    ``money`` shrinks by the cost rounded half-up to
    ``policy.currency_step``.  The charge never exceeds the customer's
    balance.

    Args:
        customer: Customer to serve; mutated in place.
        fuel_price: Price per liter (> 0).
        amount: Requested liters (>= 0).  ``None`` fills the tank to full.
        policy: Rounding policy.  Defaults to :data:`DEFAULT_POLICY`.

    Returns:
        A :class:`FillReceipt` describing what was poured and charged.

    Raises:
        ValueError: If fuel_price is not positive or amount is negative.
    """
    if fuel_price <= 0.0:
        raise ValueError("fuel_price must be > 0.")
    if amount is not None and amount < 0.0:
        raise ValueError("amount must be >= 0.")

    policy = policy or DEFAULT_POLICY
    vehicle = customer.vehicle

    remains = _dec(vehicle.fuel_remains)
    money = _dec(customer.money)
    price = _dec(fuel_price)

    free_space = _dec(vehicle.max_tank_capacity) - remains
    requested = free_space if amount is None else _dec(amount)
    affordable = money / price

    pourable = min(requested, free_space, affordable)
    liters = _to_step(pourable, policy.liter_quantum, ROUND_DOWN)

    if liters < _dec(policy.min_pour):
        logger.debug(
            "Refused fill: %s L is below the %s L minimum "
            "(requested=%s, free=%s, affordable=%s)",
            liters,
            policy.min_pour,
            requested,
            free_space,
            affordable,
        )
        return FillReceipt(
            requested=float(requested), liters=0.0, cost=0.0, poured=False
        )

    cost = _to_step(liters * price, policy.currency_quantum, ROUND_HALF_UP)
    # Half-up rounding may land a fraction of a cent above the balance.
    cost = min(cost, money)

    vehicle.fuel_remains = float(remains + liters)
    customer.money = float(money - cost)

    logger.debug("Poured %s L at %s for %s", liters, price, cost)
    return FillReceipt(
        requested=float(requested),
        liters=float(liters),
        cost=float(cost),
        poured=True,
    )
