"""Vehicle kinds and capability contracts.

Each kind combines the abstract Vehicle with the capabilities it supports:
    - Car: fuel, passengers, maintenance
    - Truck: fuel, cargo, maintenance
    - Bus: fuel, passengers, cargo, maintenance
    - Airplane: fuel, passengers, cargo, maintenance
    - CargoShip: cargo, maintenance, fuel (motor ships only)
"""

from fleetops.vehicles.airplane import Airplane
from fleetops.vehicles.base import JOURNEY_TIME_FACTORS, Vehicle, VehicleCategory
from fleetops.vehicles.bus import Bus
from fleetops.vehicles.capabilities import (
    CAPABILITY_INTERFACES,
    MAINTENANCE_MILEAGE_THRESHOLD_KM,
    Capability,
    CargoCarrier,
    FuelConsumable,
    Maintainable,
    PassengerCarrier,
)
from fleetops.vehicles.car import Car
from fleetops.vehicles.cargo_ship import CargoShip
from fleetops.vehicles.errors import (
    FleetError,
    InsufficientFuelError,
    InvalidOperationError,
    OverloadError,
    VehicleConstructionError,
)
from fleetops.vehicles.truck import Truck

VEHICLE_KINDS: tuple[type[Vehicle], ...] = (Car, Truck, Bus, Airplane, CargoShip)

__all__ = [
    "Airplane",
    "Bus",
    "CAPABILITY_INTERFACES",
    "Capability",
    "Car",
    "CargoCarrier",
    "CargoShip",
    "FleetError",
    "FuelConsumable",
    "InsufficientFuelError",
    "InvalidOperationError",
    "JOURNEY_TIME_FACTORS",
    "MAINTENANCE_MILEAGE_THRESHOLD_KM",
    "Maintainable",
    "OverloadError",
    "PassengerCarrier",
    "Truck",
    "VEHICLE_KINDS",
    "Vehicle",
    "VehicleCategory",
    "VehicleConstructionError",
]
