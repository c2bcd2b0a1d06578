"""Capability contracts for vehicles.

A vehicle kind implements zero or more of these contracts. Each contract
works on a small state record embedded in the vehicle (a fuel tank, a
passenger cabin, a cargo hold, a maintenance record), so the state lives
next to the vehicle's identity rather than in a class hierarchy.

Typical usage:
    class Car(Vehicle, FuelConsumable, PassengerCarrier, Maintainable):
        def __init__(self, vehicle_id: str, model: str, max_speed: float):
            super().__init__(vehicle_id, model, max_speed)
            self.fuel_tank = FuelTank()
            self.cabin = PassengerCabin(capacity=5)
            self.maintenance = MaintenanceRecord()
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from fleetops.core.logging_system import get_logger
from fleetops.vehicles.errors import (
    InsufficientFuelError,
    InvalidOperationError,
    OverloadError,
)

logger = get_logger(__name__)

# Same threshold for every kind; checked on every call, never cached.
MAINTENANCE_MILEAGE_THRESHOLD_KM = 10_000.0


class Capability(Enum):
    """Optional behaviour a vehicle kind may implement."""

    FUEL = "fuel"
    PASSENGERS = "passengers"
    CARGO = "cargo"
    MAINTENANCE = "maintenance"


@dataclass
class FuelTank:
    """Fuel on board, in litres.

    The tank has no upper bound. It can never go below zero: drawing more
    than is available raises instead of clamping.

    Attributes:
        level: Current fuel quantity (litres)
    """

    level: float = 0.0

    def add(self, amount: float) -> None:
        """Add fuel to the tank.

        Args:
            amount: Litres to add (must be positive).

        Raises:
            InvalidOperationError: If amount is not positive.
        """
        if amount <= 0:
            raise InvalidOperationError("Refuel amount must be positive.")
        self.level += amount

    def draw(self, amount: float) -> float:
        """Remove fuel from the tank.

        Args:
            amount: Litres to remove.

        Returns:
            The amount removed.

        Raises:
            InsufficientFuelError: If amount exceeds the current level.
        """
        if amount > self.level:
            raise InsufficientFuelError(
                f"Cannot consume {amount:.2f} L of fuel, only {self.level:.2f} L available."
            )
        self.level -= amount
        return amount

    def restore(self, level: float) -> None:
        """Set the level directly (used when loading a saved fleet)."""
        if level < 0:
            raise ValueError(f"Fuel level cannot be negative: {level}")
        self.level = level


@dataclass
class PassengerCabin:
    """Passenger seats.

    Attributes:
        capacity: Number of seats
        current: Passengers currently aboard
    """

    capacity: int
    current: int = 0

    def board(self, count: int) -> None:
        if count < 0:
            raise InvalidOperationError("Passenger count cannot be negative.")
        if self.current + count > self.capacity:
            raise OverloadError(
                f"Passenger capacity exceeded: {self.current + count} > {self.capacity}."
            )
        self.current += count

    def disembark(self, count: int) -> None:
        if count < 0:
            raise InvalidOperationError("Passenger count cannot be negative.")
        if count > self.current:
            raise InvalidOperationError(
                f"Cannot disembark {count} passengers, only {self.current} aboard."
            )
        self.current -= count

    def restore(self, current: int) -> None:
        """Set the passenger count directly (used when loading a saved fleet)."""
        if not 0 <= current <= self.capacity:
            raise ValueError(f"Passenger count {current} outside 0..{self.capacity}")
        self.current = current


@dataclass
class CargoHold:
    """Cargo space, in kilograms.

    Attributes:
        capacity: Maximum cargo weight (kg)
        current: Cargo currently loaded (kg)
    """

    capacity: float
    current: float = 0.0

    def load(self, weight: float) -> None:
        if weight < 0:
            raise InvalidOperationError("Cargo weight cannot be negative.")
        if self.current + weight > self.capacity:
            raise OverloadError(
                f"Cargo capacity exceeded: {self.current + weight:.1f} kg > {self.capacity:.1f} kg."
            )
        self.current += weight

    def unload(self, weight: float) -> None:
        if weight < 0:
            raise InvalidOperationError("Cargo weight cannot be negative.")
        if weight > self.current:
            raise InvalidOperationError(
                f"Cannot unload {weight:.1f} kg, only {self.current:.1f} kg loaded."
            )
        self.current -= weight

    def restore(self, current: float) -> None:
        """Set the loaded weight directly (used when loading a saved fleet)."""
        if not 0 <= current <= self.capacity:
            raise ValueError(f"Cargo weight {current} outside 0..{self.capacity}")
        self.current = current

    def load_ratio(self) -> float:
        """Fraction of capacity in use (0.0 when capacity is zero)."""
        if self.capacity <= 0:
            return 0.0
        return self.current / self.capacity


@dataclass
class MaintenanceRecord:
    """Manual maintenance flag.

    Attributes:
        scheduled: True once maintenance has been requested by hand
    """

    scheduled: bool = False


class FuelConsumable(ABC):
    """Contract for vehicles that burn fuel.

    Implementations provide a ``fuel_tank`` record and an efficiency curve.
    Fuel needed for a distance is ``distance / efficiency``.
    """

    fuel_tank: FuelTank

    @abstractmethod
    def calculate_fuel_efficiency(self) -> float:
        """Distance per litre (km/L) in the current state."""

    def fuel_needed(self, distance: float) -> float:
        """Litres required to cover a distance.

        Returns 0.0 when efficiency is zero (no fuel is burned).
        """
        efficiency = self.calculate_fuel_efficiency()
        if efficiency <= 0:
            return 0.0
        return distance / efficiency

    def refuel(self, amount: float) -> None:
        """Add fuel.

        Raises:
            InvalidOperationError: If amount is not positive.
        """
        self.fuel_tank.add(amount)
        logger.debug("Refueled %s with %.1f L (now %.1f L)", self, amount, self.fuel_tank.level)

    def get_fuel_level(self) -> float:
        return self.fuel_tank.level

    def consume_fuel(self, distance: float) -> float:
        """Burn the fuel needed for a distance.

        Args:
            distance: Distance travelled (km).

        Returns:
            Litres consumed.

        Raises:
            InvalidOperationError: If distance is not positive.
            InsufficientFuelError: If the tank holds less than is needed.
        """
        if distance <= 0:
            raise InvalidOperationError("Distance must be positive.")
        return self.fuel_tank.draw(self.fuel_needed(distance))


class PassengerCarrier(ABC):
    """Contract for vehicles with passenger seats."""

    cabin: PassengerCabin

    def board_passengers(self, count: int) -> None:
        """Board passengers.

        Raises:
            OverloadError: If the cabin would exceed capacity.
        """
        self.cabin.board(count)

    def disembark_passengers(self, count: int) -> None:
        """Disembark passengers.

        Raises:
            InvalidOperationError: If fewer passengers are aboard.
        """
        self.cabin.disembark(count)

    @property
    def passenger_capacity(self) -> int:
        return self.cabin.capacity

    @property
    def current_passengers(self) -> int:
        return self.cabin.current


class CargoCarrier(ABC):
    """Contract for vehicles with a cargo hold."""

    cargo_hold: CargoHold

    def load_cargo(self, weight: float) -> None:
        """Load cargo.

        Raises:
            OverloadError: If the hold would exceed capacity.
        """
        self.cargo_hold.load(weight)

    def unload_cargo(self, weight: float) -> None:
        """Unload cargo.

        Raises:
            InvalidOperationError: If less cargo is loaded.
        """
        self.cargo_hold.unload(weight)

    @property
    def cargo_capacity(self) -> float:
        return self.cargo_hold.capacity

    @property
    def current_cargo(self) -> float:
        return self.cargo_hold.current


class Maintainable(ABC):
    """Contract for vehicles that track maintenance.

    Maintenance is needed when it was scheduled by hand, or when mileage
    is above MAINTENANCE_MILEAGE_THRESHOLD_KM. Performing maintenance only
    clears the manual flag, so a high-mileage vehicle keeps reporting.
    """

    maintenance: MaintenanceRecord

    @property
    @abstractmethod
    def current_mileage(self) -> float:
        """Odometer reading (km)."""

    def schedule_maintenance(self) -> None:
        self.maintenance.scheduled = True

    def needs_maintenance(self) -> bool:
        return (
            self.maintenance.scheduled
            or self.current_mileage > MAINTENANCE_MILEAGE_THRESHOLD_KM
        )

    def perform_maintenance(self) -> None:
        self.maintenance.scheduled = False
        logger.info("Maintenance performed on %s", self)


CAPABILITY_INTERFACES: dict[Capability, type] = {
    Capability.FUEL: FuelConsumable,
    Capability.PASSENGERS: PassengerCarrier,
    Capability.CARGO: CargoCarrier,
    Capability.MAINTENANCE: Maintainable,
}
