"""Cargo ship, motor or sail."""

from fleetops.vehicles.base import Vehicle, VehicleCategory
from fleetops.vehicles.capabilities import (
    CargoCarrier,
    CargoHold,
    FuelConsumable,
    FuelTank,
    Maintainable,
    MaintenanceRecord,
)
from fleetops.vehicles.errors import InvalidOperationError
from fleetops.vehicles.fields import format_bool, format_float, parse_bool, parse_float


class CargoShip(Vehicle, CargoCarrier, Maintainable, FuelConsumable):
    """Ocean cargo ship.

    A motor ship burns fuel at 4.0 km/L and starts with a full bunker of
    50,000 L. A sailing ship burns nothing: its efficiency is 0, it
    cannot be refueled, and consuming fuel is a no-op.

    The saved row has no fuel field, so a reloaded motor ship starts
    again with its initial bunker.

    CSV row:
        CargoShip,id,model,maxSpeed,hasSail,cargoCapacity,currentCargo
    """

    kind = "CargoShip"
    category = VehicleCategory.WATER
    csv_field_count = 7
    journey_verb = "sailed with cargo for"

    MOTOR_EFFICIENCY_KM_PER_L = 4.0
    INITIAL_BUNKER_L = 50000.0
    DEFAULT_CARGO_CAPACITY_KG = 50000.0

    def __init__(
        self,
        vehicle_id: str,
        model: str,
        max_speed: float,
        has_sail: bool,
        cargo_capacity: float = DEFAULT_CARGO_CAPACITY_KG,
    ) -> None:
        super().__init__(vehicle_id, model, max_speed)
        self.has_sail = has_sail
        self.fuel_tank = FuelTank(level=0.0 if has_sail else self.INITIAL_BUNKER_L)
        self.cargo_hold = CargoHold(capacity=cargo_capacity)
        self.maintenance = MaintenanceRecord()

    def calculate_fuel_efficiency(self) -> float:
        return 0.0 if self.has_sail else self.MOTOR_EFFICIENCY_KM_PER_L

    def refuel(self, amount: float) -> None:
        if self.has_sail:
            raise InvalidOperationError("Cannot refuel a sailing vessel.")
        super().refuel(amount)

    def consume_fuel(self, distance: float) -> float:
        if self.has_sail and distance > 0:
            return 0.0
        return super().consume_fuel(distance)

    def to_csv_row(self) -> list[str]:
        return self._identity_fields() + [
            format_bool(self.has_sail),
            format_float(self.cargo_hold.capacity),
            format_float(self.cargo_hold.current),
        ]

    @classmethod
    def from_csv_row(cls, row: list[str]) -> "CargoShip":
        vehicle_id, model, max_speed = cls._parse_identity(row)
        ship = cls(
            vehicle_id,
            model,
            max_speed,
            has_sail=parse_bool(row[4], "hasSail"),
            cargo_capacity=parse_float(row[5], "cargoCapacity"),
        )
        ship.cargo_hold.restore(parse_float(row[6], "currentCargo"))
        return ship
