"""Demonstration fleet."""

from fleetops.fleet import FleetRegistry
from fleetops.vehicles import Airplane, Bus, Car, CargoShip, Truck, Vehicle


def demo_vehicles() -> list[Vehicle]:
    """One vehicle of each kind, plus a sailing ship."""
    return [
        Car("C-001", "Toyota Camry", 180),
        Truck("T-001", "Volvo FH16", 140),
        Bus("B-001", "Mercedes-Benz Tourismo", 150),
        Airplane("A-001", "Boeing 747", 900, 35000),
        CargoShip("S-001", "Emma Maersk", 45, has_sail=False),
        CargoShip("S-002", "The Black Pearl", 30, has_sail=True),
    ]


def build_demo_fleet() -> FleetRegistry:
    """A fresh registry holding the demonstration vehicles."""
    fleet = FleetRegistry()
    for vehicle in demo_vehicles():
        fleet.add(vehicle)
    return fleet
