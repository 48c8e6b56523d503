"""Vehicle tank model for the fuel station engine."""


class Vehicle:
    """Fuel tank state of a customer's vehicle.

    Attributes:
        max_tank_capacity: Tank volume in liters.
        fuel_remains: Fuel currently in the tank in liters.
    """

    __slots__ = ("max_tank_capacity", "fuel_remains")

    def __init__(self, max_tank_capacity: float, fuel_remains: float = 0.0):
        """Initialise tank state.

        Args:
            max_tank_capacity: Tank volume in liters. Must be > 0.
            fuel_remains: Initial fuel level. Defaults to an empty tank.

        Raises:
            ValueError: If constraints are violated.
        """
        if max_tank_capacity <= 0.0:
            raise ValueError("max_tank_capacity must be > 0.")
        if fuel_remains < 0.0:
            raise ValueError("fuel_remains must be >= 0.")
        if fuel_remains > max_tank_capacity:
            raise ValueError("fuel_remains must be <= max_tank_capacity.")
        self.max_tank_capacity: float = max_tank_capacity
        self.fuel_remains: float = fuel_remains

    @property
    def free_space(self) -> float:
        """Liters that fit before the tank is full."""
        return self.max_tank_capacity - self.fuel_remains

    @property
    def is_full(self) -> bool:
        return self.fuel_remains >= self.max_tank_capacity

    def __repr__(self) -> str:
        return (
            f"Vehicle(max_tank_capacity={self.max_tank_capacity!r}, "
            f"fuel_remains={self.fuel_remains!r})"
        )
