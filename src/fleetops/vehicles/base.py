"""Base class for all vehicle kinds.

A vehicle has an identity (id, model, max speed), an odometer, and a
category that decides its journey-time overhead. Optional behaviour
(fuel, passengers, cargo, maintenance) comes from the capability
contracts in ``fleetops.vehicles.capabilities``.

Typical usage:
    class Car(Vehicle, FuelConsumable, PassengerCarrier, Maintainable):
        kind = "Car"
        category = VehicleCategory.LAND

        def calculate_fuel_efficiency(self) -> float:
            return 15.0
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from fleetops.core.logging_system import get_logger
from fleetops.vehicles.capabilities import (
    CAPABILITY_INTERFACES,
    Capability,
    FuelConsumable,
)
from fleetops.vehicles.errors import InvalidOperationError, VehicleConstructionError
from fleetops.vehicles.fields import format_float, parse_float

logger = get_logger(__name__)


class VehicleCategory(Enum):
    """Travel medium of a vehicle."""

    LAND = "land"
    AIR = "air"
    WATER = "water"


# Multiplier applied to distance / max_speed
JOURNEY_TIME_FACTORS: dict[VehicleCategory, float] = {
    VehicleCategory.LAND: 1.10,  # traffic, stops
    VehicleCategory.AIR: 0.95,  # direct routing
    VehicleCategory.WATER: 1.15,  # currents, port approach
}


class Vehicle(ABC):
    """Abstract vehicle.

    Subclasses set ``kind`` (the name used in the saved fleet file),
    ``category`` and ``csv_field_count``, and implement the efficiency
    curve and the CSV row conversion.

    Attributes:
        kind: Type name written as the first CSV field
        category: Land, air or water
        csv_field_count: Number of fields in this kind's CSV row
        journey_verb: Phrase used when logging a journey
    """

    kind: ClassVar[str] = "Vehicle"
    category: ClassVar[VehicleCategory]
    csv_field_count: ClassVar[int]
    journey_verb: ClassVar[str] = "travelled"

    def __init__(self, vehicle_id: str, model: str, max_speed: float) -> None:
        """Create a vehicle with zero mileage.

        Args:
            vehicle_id: Identity key, must not be empty or blank.
            model: Free-text model name.
            max_speed: Top speed in km/h, must be positive.

        Raises:
            VehicleConstructionError: If the id is blank or max_speed is not positive.
        """
        if vehicle_id is None or not str(vehicle_id).strip():
            raise VehicleConstructionError("Vehicle ID cannot be empty.")
        if max_speed <= 0:
            raise VehicleConstructionError(f"Max speed must be positive, got {max_speed}.")

        self._id = str(vehicle_id)
        self._model = model
        self._max_speed = float(max_speed)
        self._mileage = 0.0

    @property
    def id(self) -> str:
        return self._id

    @property
    def key(self) -> str:
        """Case-insensitive identity key."""
        return self._id.casefold()

    @property
    def model(self) -> str:
        return self._model

    @property
    def max_speed(self) -> float:
        return self._max_speed

    @property
    def current_mileage(self) -> float:
        return self._mileage

    @property
    def capabilities(self) -> frozenset[Capability]:
        """Capabilities this vehicle implements."""
        return frozenset(
            capability
            for capability, interface in CAPABILITY_INTERFACES.items()
            if isinstance(self, interface)
        )

    def has_capability(self, capability: Capability) -> bool:
        return capability in self.capabilities

    def matches_id(self, vehicle_id: str) -> bool:
        """Compare ids case-insensitively."""
        return self.key == vehicle_id.casefold()

    def move(self, distance: float) -> None:
        """Travel a distance.

        Fuel-burning vehicles consume ``distance / efficiency`` litres first;
        if the tank cannot cover it, nothing changes.

        Args:
            distance: Distance in km (must be positive).

        Raises:
            InvalidOperationError: If distance is not positive.
            InsufficientFuelError: If there is not enough fuel.
        """
        if distance <= 0:
            raise InvalidOperationError("Distance must be positive.")

        if isinstance(self, FuelConsumable):
            self.consume_fuel(distance)

        self._mileage += distance
        logger.info("%s %s %s %.1f km", self.kind, self.id, self.journey_verb, distance)

    @abstractmethod
    def calculate_fuel_efficiency(self) -> float:
        """Distance per litre (km/L) in the current state; 0 if no fuel is burned."""

    def estimate_journey_time(self, distance: float) -> float:
        """Estimated hours to cover a distance, with category overhead."""
        return distance / self._max_speed * JOURNEY_TIME_FACTORS[self.category]

    @abstractmethod
    def to_csv_row(self) -> list[str]:
        """Fields of this vehicle's row in the saved fleet file."""

    @classmethod
    @abstractmethod
    def from_csv_row(cls, row: list[str]) -> "Vehicle":
        """Rebuild a vehicle from the fields written by ``to_csv_row``.

        Raises:
            ValueError: If a field is malformed.
            FleetError: If the identity or state is invalid.
        """

    def _identity_fields(self) -> list[str]:
        return [self.kind, self._id, self._model, format_float(self._max_speed)]

    @classmethod
    def _parse_identity(cls, row: list[str]) -> tuple[str, str, float]:
        """Validate the row length and parse id, model and max speed."""
        if len(row) != cls.csv_field_count:
            raise ValueError(
                f"{cls.kind} row needs {cls.csv_field_count} fields, got {len(row)}"
            )
        return row[1], row[2], parse_float(row[3], "maxSpeed")

    def describe(self) -> str:
        """Human-readable summary of identity and mileage."""
        return "\n".join(
            [
                "--- Vehicle Info ---",
                f"ID: {self._id}",
                f"Type: {self.kind}",
                f"Model: {self._model}",
                f"Max Speed: {self._max_speed:.1f} km/h",
                f"Current Mileage: {self._mileage:.1f} km",
            ]
        )

    def display_info(self) -> None:
        print(self.describe())

    def __str__(self) -> str:
        return f"{self.kind} {self._id}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id!r}, model={self._model!r}, "
            f"max_speed={self._max_speed}, mileage={self._mileage})"
        )
