"""Fleet registry: the owner of all vehicles in a fleet.

The registry enforces case-insensitive id uniqueness, runs bulk
operations over vehicles of mixed kinds, builds reports and persists the
fleet to CSV.

Bulk operations (journeys, refueling) run each vehicle independently: a
failure on one vehicle is logged and returned as an OperationFailure,
and the loop moves on to the next vehicle.

Typical usage:
    fleet = FleetRegistry()
    fleet.add(Car("C-001", "Toyota Camry", 180))
    fleet.refuel_all(50)
    failures = fleet.start_all_journeys(100)
    print(fleet.generate_report())
    fleet.save_to_file("my_fleet.csv")
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from fleetops.core.logging_system import get_logger
from fleetops.core.registry import RegistryError, VehicleKindRegistry, default_kind_registry
from fleetops.fleet.report import FleetReport, build_report, format_report
from fleetops.fleet.storage import LoadResult, read_fleet_file, write_fleet_file
from fleetops.vehicles import (
    CAPABILITY_INTERFACES,
    Capability,
    FleetError,
    FuelConsumable,
    InvalidOperationError,
    Maintainable,
    Vehicle,
)

logger = get_logger(__name__)

SearchSelector = Capability | type | str


@dataclass
class OperationFailure:
    """A vehicle that failed during a bulk operation.

    Attributes:
        vehicle_id: Identifier of the vehicle
        error: The error raised for that vehicle
    """

    vehicle_id: str
    error: FleetError

    @property
    def message(self) -> str:
        return str(self.error)


class FleetRegistry:
    """Ordered collection of vehicles with unique ids.

    Vehicles keep insertion order until ``sort_by_efficiency`` reorders
    them. Accessors return copies, so callers cannot change membership
    except through ``add``, ``remove`` and ``load_from_file``.

    Examples:
        >>> fleet = FleetRegistry()
        >>> fleet.add(Truck("T-001", "Volvo FH16", 140))
        >>> fleet.add(Truck("t-001", "Scania R500", 130))
        Traceback (most recent call last):
        ...
        InvalidOperationError: Duplicate vehicle ID: t-001. Cannot add vehicle.
    """

    def __init__(self, kind_registry: VehicleKindRegistry | None = None) -> None:
        """Initialize an empty fleet.

        Args:
            kind_registry: Kinds recognized when loading and searching by name.
                Defaults to the built-in kinds.
        """
        self._vehicles: list[Vehicle] = []
        self._kind_registry = kind_registry or default_kind_registry()

    def __len__(self) -> int:
        return len(self._vehicles)

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(list(self._vehicles))

    def __contains__(self, vehicle_id: object) -> bool:
        return isinstance(vehicle_id, str) and self._find(vehicle_id) is not None

    @property
    def vehicles(self) -> tuple[Vehicle, ...]:
        """Vehicles in current order."""
        return tuple(self._vehicles)

    def _find(self, vehicle_id: str) -> Vehicle | None:
        for vehicle in self._vehicles:
            if vehicle.matches_id(vehicle_id):
                return vehicle
        return None

    def add(self, vehicle: Vehicle) -> None:
        """Add a vehicle to the end of the fleet.

        Raises:
            InvalidOperationError: If a vehicle with the same id (ignoring
                case) is already in the fleet.
        """
        if self._find(vehicle.id) is not None:
            raise InvalidOperationError(f"Duplicate vehicle ID: {vehicle.id}. Cannot add vehicle.")

        self._vehicles.append(vehicle)
        logger.info("Vehicle %s added to the fleet", vehicle.id)

    def remove(self, vehicle_id: str) -> Vehicle:
        """Remove a vehicle by id (case-insensitive).

        Returns:
            The removed vehicle.

        Raises:
            InvalidOperationError: If no vehicle matches.
        """
        vehicle = self._find(vehicle_id)
        if vehicle is None:
            raise InvalidOperationError(f"Vehicle with ID {vehicle_id} not found. Cannot remove.")

        self._vehicles.remove(vehicle)
        logger.info("Vehicle %s removed from the fleet", vehicle.id)
        return vehicle

    def get(self, vehicle_id: str) -> Vehicle:
        """Look up a vehicle by id (case-insensitive).

        Raises:
            InvalidOperationError: If no vehicle matches.
        """
        vehicle = self._find(vehicle_id)
        if vehicle is None:
            raise InvalidOperationError(f"Vehicle with ID {vehicle_id} not found.")
        return vehicle

    def start_all_journeys(self, distance: float) -> list[OperationFailure]:
        """Move every vehicle the same distance.

        Args:
            distance: Journey distance in km.

        Returns:
            One failure per vehicle that could not make the journey
            (e.g. non-positive distance, not enough fuel).
        """
        logger.info("Starting all journeys for %.1f km", distance)
        failures = []

        for vehicle in list(self._vehicles):
            try:
                vehicle.move(distance)
            except FleetError as e:
                logger.warning("Could not complete journey for vehicle %s: %s", vehicle.id, e)
                failures.append(OperationFailure(vehicle.id, e))

        logger.info(
            "All journeys concluded: %d succeeded, %d failed",
            len(self._vehicles) - len(failures),
            len(failures),
        )
        return failures

    def refuel_all(self, amount: float) -> list[OperationFailure]:
        """Refuel every fuel-burning vehicle with the same amount.

        Returns:
            One failure per vehicle that refused fuel (e.g. sailing ships,
            non-positive amount).
        """
        failures = []

        for vehicle in self.search(Capability.FUEL):
            try:
                vehicle.refuel(amount)
            except FleetError as e:
                logger.warning("Could not refuel vehicle %s: %s", vehicle.id, e)
                failures.append(OperationFailure(vehicle.id, e))

        logger.info("Refueling complete: %d failed", len(failures))
        return failures

    def maintain_all(self) -> list[Vehicle]:
        """Service every vehicle that needs maintenance.

        Returns:
            The vehicles that were serviced.
        """
        serviced = self.vehicles_needing_maintenance()
        for vehicle in serviced:
            vehicle.perform_maintenance()

        logger.info("Maintenance checks complete: %d serviced", len(serviced))
        return serviced

    def total_fuel_consumption(self, distance: float) -> float:
        """Fuel the whole fleet would burn over a distance.

        Vehicles with zero efficiency (sailing ships) burn nothing.

        Raises:
            InvalidOperationError: If distance is not positive.
        """
        if distance <= 0:
            raise InvalidOperationError("Distance must be positive.")

        return sum(vehicle.fuel_needed(distance) for vehicle in self.search(Capability.FUEL))

    def search(self, selector: SearchSelector) -> list[Vehicle]:
        """Find vehicles by kind or capability.

        Args:
            selector: A Capability, a vehicle class or capability contract
                (e.g. ``Truck``, ``CargoCarrier``), or a name such as
                ``"car"``, ``"cargoship"``, ``"fuelconsumable"`` or ``"cargo"``.

        Returns:
            Matching vehicles in fleet order.

        Raises:
            InvalidOperationError: If a name matches no kind or capability.
        """
        interface = self._resolve_selector(selector)
        return [vehicle for vehicle in self._vehicles if isinstance(vehicle, interface)]

    def _resolve_selector(self, selector: SearchSelector) -> type:
        if isinstance(selector, Capability):
            return CAPABILITY_INTERFACES[selector]
        if isinstance(selector, type):
            return selector

        name = selector.strip().casefold()
        try:
            return self._kind_registry.get(name)
        except RegistryError:
            pass

        for capability, interface in CAPABILITY_INTERFACES.items():
            if name in (capability.value, interface.__name__.casefold()):
                return interface

        raise InvalidOperationError(f"Unknown vehicle type or capability: {selector}")

    def vehicles_needing_maintenance(self) -> list[Vehicle]:
        return [
            vehicle
            for vehicle in self._vehicles
            if isinstance(vehicle, Maintainable) and vehicle.needs_maintenance()
        ]

    def sort_by_efficiency(self) -> None:
        """Order the fleet by descending fuel efficiency; ties keep their order."""
        self._vehicles.sort(key=lambda vehicle: vehicle.calculate_fuel_efficiency(), reverse=True)

    def build_report(self) -> FleetReport:
        return build_report(self._vehicles)

    def generate_report(self) -> str:
        """Fleet report as text (a fixed message for an empty fleet)."""
        return format_report(self.build_report())

    def save_to_file(self, path: str | Path) -> bool:
        """Save the fleet, one CSV row per vehicle in current order.

        Returns:
            True if saved. Write failures are logged and return False;
            the previous file, if any, is left intact.
        """
        try:
            write_fleet_file(path, self._vehicles)
        except OSError as e:
            logger.error("Error saving fleet to %s: %s", path, e)
            return False

        logger.info("Fleet of %d vehicles saved to %s", len(self._vehicles), path)
        return True

    def load_from_file(self, path: str | Path) -> LoadResult:
        """Replace the fleet with the contents of a saved file.

        Malformed rows are skipped and listed in the result. The fleet is
        not cleared before the file is opened: if the file cannot be read
        at all, the current fleet is kept unchanged and ``result.ok`` is
        False. Only a successful read replaces the contents.

        Returns:
            LoadResult describing what was loaded and skipped.
        """
        result = read_fleet_file(path, self._kind_registry)
        if not result.ok:
            return result

        self._vehicles = list(result.vehicles)
        logger.info(
            "Fleet loaded from %s: %d vehicles, %d lines skipped",
            path,
            len(result.vehicles),
            len(result.skipped),
        )
        return result
