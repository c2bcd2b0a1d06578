"""Passenger car."""

from fleetops.vehicles.base import Vehicle, VehicleCategory
from fleetops.vehicles.capabilities import (
    FuelConsumable,
    FuelTank,
    Maintainable,
    MaintenanceRecord,
    PassengerCabin,
    PassengerCarrier,
)
from fleetops.vehicles.fields import format_float, format_int, parse_float, parse_int


class Car(Vehicle, FuelConsumable, PassengerCarrier, Maintainable):
    """Four-wheeled passenger car.

    CSV row:
        Car,id,model,maxSpeed,numWheels,fuelLevel,passengerCapacity,currentPassengers

    Examples:
        >>> car = Car("C-001", "Toyota Camry", 180)
        >>> car.refuel(20)
        >>> car.move(150)  # burns 10 L at 15 km/L
        >>> car.get_fuel_level()
        10.0
    """

    kind = "Car"
    category = VehicleCategory.LAND
    csv_field_count = 8
    journey_verb = "drove"

    EFFICIENCY_KM_PER_L = 15.0
    DEFAULT_WHEELS = 4
    DEFAULT_PASSENGER_CAPACITY = 5

    def __init__(
        self,
        vehicle_id: str,
        model: str,
        max_speed: float,
        num_wheels: int = DEFAULT_WHEELS,
        passenger_capacity: int = DEFAULT_PASSENGER_CAPACITY,
    ) -> None:
        super().__init__(vehicle_id, model, max_speed)
        self.num_wheels = num_wheels
        self.fuel_tank = FuelTank()
        self.cabin = PassengerCabin(capacity=passenger_capacity)
        self.maintenance = MaintenanceRecord()

    def calculate_fuel_efficiency(self) -> float:
        return self.EFFICIENCY_KM_PER_L

    def to_csv_row(self) -> list[str]:
        return self._identity_fields() + [
            format_int(self.num_wheels),
            format_float(self.fuel_tank.level),
            format_int(self.cabin.capacity),
            format_int(self.cabin.current),
        ]

    @classmethod
    def from_csv_row(cls, row: list[str]) -> "Car":
        vehicle_id, model, max_speed = cls._parse_identity(row)
        car = cls(
            vehicle_id,
            model,
            max_speed,
            num_wheels=parse_int(row[4], "numWheels"),
            passenger_capacity=parse_int(row[6], "passengerCapacity"),
        )
        car.fuel_tank.restore(parse_float(row[5], "fuelLevel"))
        car.cabin.restore(parse_int(row[7], "currentPassengers"))
        return car
