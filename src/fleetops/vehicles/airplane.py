"""Passenger and freight airplane."""

from fleetops.vehicles.base import Vehicle, VehicleCategory
from fleetops.vehicles.capabilities import (
    CargoCarrier,
    CargoHold,
    FuelConsumable,
    FuelTank,
    Maintainable,
    MaintenanceRecord,
    PassengerCabin,
    PassengerCarrier,
)
from fleetops.vehicles.fields import format_float, format_int, parse_float, parse_int


class Airplane(Vehicle, FuelConsumable, PassengerCarrier, CargoCarrier, Maintainable):
    """Airliner with a passenger cabin and a cargo hold.

    Air travel uses direct routing, so journey estimates are 5% shorter
    than distance / max_speed.

    CSV row:
        Airplane,id,model,maxSpeed,maxAltitude,fuelLevel,passengerCapacity,
        currentPassengers,cargoCapacity,currentCargo

    Examples:
        >>> plane = Airplane("A-001", "Boeing 747", 900, 35000)
        >>> plane.estimate_journey_time(900)
        0.95
    """

    kind = "Airplane"
    category = VehicleCategory.AIR
    csv_field_count = 10
    journey_verb = "flew"

    EFFICIENCY_KM_PER_L = 5.0
    DEFAULT_PASSENGER_CAPACITY = 200
    DEFAULT_CARGO_CAPACITY_KG = 10000.0

    def __init__(
        self,
        vehicle_id: str,
        model: str,
        max_speed: float,
        max_altitude: float,
        passenger_capacity: int = DEFAULT_PASSENGER_CAPACITY,
        cargo_capacity: float = DEFAULT_CARGO_CAPACITY_KG,
    ) -> None:
        super().__init__(vehicle_id, model, max_speed)
        self.max_altitude = float(max_altitude)  # feet
        self.fuel_tank = FuelTank()
        self.cabin = PassengerCabin(capacity=passenger_capacity)
        self.cargo_hold = CargoHold(capacity=cargo_capacity)
        self.maintenance = MaintenanceRecord()

    def calculate_fuel_efficiency(self) -> float:
        return self.EFFICIENCY_KM_PER_L

    def to_csv_row(self) -> list[str]:
        return self._identity_fields() + [
            format_float(self.max_altitude),
            format_float(self.fuel_tank.level),
            format_int(self.cabin.capacity),
            format_int(self.cabin.current),
            format_float(self.cargo_hold.capacity),
            format_float(self.cargo_hold.current),
        ]

    @classmethod
    def from_csv_row(cls, row: list[str]) -> "Airplane":
        vehicle_id, model, max_speed = cls._parse_identity(row)
        plane = cls(
            vehicle_id,
            model,
            max_speed,
            max_altitude=parse_float(row[4], "maxAltitude"),
            passenger_capacity=parse_int(row[6], "passengerCapacity"),
            cargo_capacity=parse_float(row[8], "cargoCapacity"),
        )
        plane.fuel_tank.restore(parse_float(row[5], "fuelLevel"))
        plane.cabin.restore(parse_int(row[7], "currentPassengers"))
        plane.cargo_hold.restore(parse_float(row[9], "currentCargo"))
        return plane
