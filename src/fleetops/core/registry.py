"""Registry of vehicle kinds by name.

Maps the type name written in the first field of a saved fleet row to the
class that rebuilds it, so new kinds can be plugged in without touching
the loader.

Typical usage example:
    from fleetops.core.registry import VehicleKindRegistry

    registry = VehicleKindRegistry()
    registry.register(Car)
    car = registry.create_from_row(["Car", "C-001", "Camry", "180.0", ...])
"""

from fleetops.core.logging_system import get_logger
from fleetops.vehicles import VEHICLE_KINDS, Vehicle

logger = get_logger(__name__)


class RegistryError(Exception):
    """Raised when registry operations fail."""


class VehicleKindRegistry:
    """Registry of vehicle classes keyed by their ``kind`` name.

    Lookups are case-insensitive; ``create_from_row`` uses the exact
    (case-sensitive) name stored in the file.

    Examples:
        >>> registry = VehicleKindRegistry()
        >>> registry.register(Truck)
        >>> registry.get("truck") is Truck
        True
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._kinds: dict[str, type[Vehicle]] = {}

    def register(self, vehicle_class: type[Vehicle]) -> None:
        """Register a vehicle class under its ``kind`` name.

        Args:
            vehicle_class: Concrete Vehicle subclass.

        Raises:
            RegistryError: If the name is already registered.
        """
        key = vehicle_class.kind.casefold()
        if key in self._kinds:
            raise RegistryError(f"Vehicle kind already registered: {vehicle_class.kind}")

        self._kinds[key] = vehicle_class
        logger.debug("Registered vehicle kind: %s -> %s", vehicle_class.kind, vehicle_class.__name__)

    def unregister(self, name: str) -> None:
        """Unregister a vehicle kind.

        Raises:
            RegistryError: If name is not registered.
        """
        key = name.casefold()
        if key not in self._kinds:
            raise RegistryError(f"Vehicle kind not registered: {name}")

        del self._kinds[key]
        logger.debug("Unregistered vehicle kind: %s", name)

    def get(self, name: str) -> type[Vehicle]:
        """Get the class registered for a kind name (case-insensitive).

        Raises:
            RegistryError: If name is not registered.
        """
        try:
            return self._kinds[name.casefold()]
        except KeyError:
            raise RegistryError(f"Vehicle kind not registered: {name}") from None

    def is_registered(self, name: str) -> bool:
        return name.casefold() in self._kinds

    def list_kinds(self) -> list[str]:
        """Registered kind names, in registration order."""
        return [vehicle_class.kind for vehicle_class in self._kinds.values()]

    def create_from_row(self, row: list[str]) -> Vehicle:
        """Rebuild a vehicle from a saved fleet row.

        Args:
            row: CSV fields; the first one is the kind name.

        Returns:
            The reconstructed vehicle.

        Raises:
            RegistryError: If the row is empty or its kind is unknown.
            ValueError: If a field is malformed.
            FleetError: If the vehicle's identity or state is invalid.
        """
        if not row:
            raise RegistryError("Empty row")

        vehicle_class = self._kinds.get(row[0].casefold())
        if vehicle_class is None or vehicle_class.kind != row[0]:
            raise RegistryError(f"Unknown vehicle type: {row[0]}")

        return vehicle_class.from_csv_row(row)

    def clear(self) -> None:
        """Remove all registered kinds."""
        self._kinds.clear()


def default_kind_registry() -> VehicleKindRegistry:
    """Registry holding all built-in vehicle kinds."""
    registry = VehicleKindRegistry()
    for vehicle_class in VEHICLE_KINDS:
        registry.register(vehicle_class)
    return registry
