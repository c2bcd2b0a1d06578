"""City and coach bus."""

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


class Bus(Vehicle, FuelConsumable, PassengerCarrier, CargoCarrier, Maintainable):
    """Six-wheeled bus carrying passengers and luggage.

    CSV row:
        Bus,id,model,maxSpeed,numWheels,fuelLevel,passengerCapacity,
        currentPassengers,cargoCapacity,currentCargo
    """

    kind = "Bus"
    category = VehicleCategory.LAND
    csv_field_count = 10
    journey_verb = "carried passengers and cargo for"

    EFFICIENCY_KM_PER_L = 10.0
    DEFAULT_WHEELS = 6
    DEFAULT_PASSENGER_CAPACITY = 50
    DEFAULT_CARGO_CAPACITY_KG = 500.0

    def __init__(
        self,
        vehicle_id: str,
        model: str,
        max_speed: float,
        num_wheels: int = DEFAULT_WHEELS,
        passenger_capacity: int = DEFAULT_PASSENGER_CAPACITY,
        cargo_capacity: float = DEFAULT_CARGO_CAPACITY_KG,
    ) -> None:
        super().__init__(vehicle_id, model, max_speed)
        self.num_wheels = num_wheels
        self.fuel_tank = FuelTank()
        self.cabin = PassengerCabin(capacity=passenger_capacity)
        self.cargo_hold = CargoHold(capacity=cargo_capacity)
        self.maintenance = MaintenanceRecord()

    def calculate_fuel_efficiency(self) -> float:
        return self.EFFICIENCY_KM_PER_L

    def to_csv_row(self) -> list[str]:
        return self._identity_fields() + [
            format_int(self.num_wheels),
            format_float(self.fuel_tank.level),
            format_int(self.cabin.capacity),
            format_int(self.cabin.current),
            format_float(self.cargo_hold.capacity),
            format_float(self.cargo_hold.current),
        ]

    @classmethod
    def from_csv_row(cls, row: list[str]) -> "Bus":
        vehicle_id, model, max_speed = cls._parse_identity(row)
        bus = cls(
            vehicle_id,
            model,
            max_speed,
            num_wheels=parse_int(row[4], "numWheels"),
            passenger_capacity=parse_int(row[6], "passengerCapacity"),
            cargo_capacity=parse_float(row[8], "cargoCapacity"),
        )
        bus.fuel_tank.restore(parse_float(row[5], "fuelLevel"))
        bus.cabin.restore(parse_int(row[7], "currentPassengers"))
        bus.cargo_hold.restore(parse_float(row[9], "currentCargo"))
        return bus
