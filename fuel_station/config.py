"""Configuration loader for the fuel station engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from fuel_station.core.customer import Customer
from fuel_station.core.policy import PumpPolicy
from fuel_station.core.vehicle import Vehicle

logger = logging.getLogger(__name__)

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
STATION_PATH: Path = DATA_DIR / "station.yaml"

_POLICY_FIELDS: tuple[str, ...] = ("liter_step", "min_pour", "currency_step")
_CUSTOMER_FIELDS: tuple[str, ...] = ("money", "max_tank_capacity", "fuel_remains")


def _read_station_file(path: Path | None) -> dict[str, Any]:
    station_path = path or STATION_PATH
    if not station_path.exists():
        raise FileNotFoundError(f"Station file not found: {station_path}")

    with open(station_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, dict):
        raise ValueError(f"Station file {station_path} must contain a mapping")
    logger.info("Loaded station configuration from %s", station_path)
    return data


def _numeric(value: Any, where: str) -> float:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{where} must be numeric, got {type(value).__name__}")
    return float(value)


def load_policy(path: Path | None = None) -> PumpPolicy:
    """Load the pump rounding policy from the station YAML file.

    Fields absent from the ``policy`` block keep their defaults.

    Args:
        path: Optional override for the station file path.

    Returns:
        The configured :class:`PumpPolicy`.

    Raises:
        FileNotFoundError: If the station file does not exist.
        ValueError: If the policy block is not a mapping, or a policy field
            is non-numeric or out of range.
    """
    data = _read_station_file(path)
    section = data.get("policy") or {}
    if not isinstance(section, dict):
        raise ValueError(
            f"policy block must be a mapping, got {type(section).__name__}"
        )

    kwargs: dict[str, float] = {}
    for field in _POLICY_FIELDS:
        if field in section:
            kwargs[field] = _numeric(section[field], f"policy.{field}")

    return PumpPolicy(**kwargs)


def load_demo_queue(
    path: Path | None = None,
) -> tuple[float, list[Customer], list[float | None]]:
    """Load the demo forecourt queue from the station YAML file.

    Args:
        path: Optional override for the station file path.

    Returns:
        Tuple of ``(fuel_price, customers, amounts)``.  ``amounts`` is
        parallel to ``customers``; entries without an ``amount`` are
        ``None`` (fill to full).

    Raises:
        FileNotFoundError: If the station file does not exist.
        ValueError: If the demo block is missing, the customer list is not
            a list, or any customer entry is not a mapping, is missing
            fields or has out-of-range values.
    """
    data = _read_station_file(path)
    demo = data.get("demo")
    if not isinstance(demo, dict):
        raise ValueError("Station file is missing the 'demo' block")
    if "fuel_price" not in demo:
        raise ValueError("demo block is missing required field 'fuel_price'")

    fuel_price = _numeric(demo["fuel_price"], "demo.fuel_price")
    customers: list[Customer] = []
    amounts: list[float | None] = []

    entries = demo.get("customers") or []
    if not isinstance(entries, list):
        raise ValueError(
            f"demo.customers must be a list, got {type(entries).__name__}"
        )

    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(
                f"Customer entry {idx} must be a mapping, got {type(entry).__name__}"
            )
        for field in _CUSTOMER_FIELDS:
            if field not in entry:
                raise ValueError(
                    f"Customer entry {idx} is missing required field '{field}'"
                )

        vehicle = Vehicle(
            max_tank_capacity=_numeric(
                entry["max_tank_capacity"], f"customer {idx} max_tank_capacity"
            ),
            fuel_remains=_numeric(entry["fuel_remains"], f"customer {idx} fuel_remains"),
        )
        customers.append(
            Customer(money=_numeric(entry["money"], f"customer {idx} money"), vehicle=vehicle)
        )
        amount = entry.get("amount")
        amounts.append(None if amount is None else _numeric(amount, f"customer {idx} amount"))

    return fuel_price, customers, amounts
