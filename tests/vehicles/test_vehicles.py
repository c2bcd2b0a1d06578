"""Tests for the concrete vehicle kinds."""

import pytest

from fleetops.vehicles import (
    Airplane,
    Bus,
    Capability,
    Car,
    CargoShip,
    FuelConsumable,
    InsufficientFuelError,
    InvalidOperationError,
    Truck,
    VehicleCategory,
    VehicleConstructionError,
)


class TestVehicleIdentity:
    """Test construction and identity rules shared by all kinds."""

    @pytest.mark.parametrize("vehicle_id", ["", "   ", None])
    def test_blank_id_is_rejected(self, vehicle_id) -> None:
        with pytest.raises(VehicleConstructionError):
            Car(vehicle_id, "Camry", 180)

    def test_construction_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            Truck("", "FH16", 140)

    def test_non_positive_max_speed_is_rejected(self) -> None:
        with pytest.raises(VehicleConstructionError):
            Bus("B-001", "Tourismo", 0)

    def test_id_is_read_only(self) -> None:
        car = Car("C-001", "Camry", 180)
        with pytest.raises(AttributeError):
            car.id = "C-002"  # type: ignore[misc]

    def test_matches_id_ignores_case(self) -> None:
        car = Car("C-001", "Camry", 180)
        assert car.matches_id("c-001")
        assert not car.matches_id("C-002")

    def test_new_vehicle_has_zero_mileage(self) -> None:
        assert Airplane("A-001", "747", 900, 35000).current_mileage == 0.0

    def test_describe_lists_identity(self) -> None:
        text = Car("C-001", "Toyota Camry", 180).describe()
        assert "ID: C-001" in text
        assert "Model: Toyota Camry" in text
        assert "Max Speed: 180.0 km/h" in text
        assert "Current Mileage: 0.0 km" in text


class TestMove:
    """Test journeys and fuel accounting."""

    @pytest.mark.parametrize("distance", [0.0, -10.0])
    def test_non_positive_distance_changes_nothing(self, distance: float) -> None:
        car = Car("C-001", "Camry", 180)
        car.refuel(10)

        with pytest.raises(InvalidOperationError):
            car.move(distance)

        assert car.current_mileage == 0.0
        assert car.get_fuel_level() == 10.0

    def test_move_consumes_distance_over_efficiency(self) -> None:
        car = Car("C-001", "Camry", 180)
        car.refuel(20)

        car.move(150)

        assert car.get_fuel_level() == pytest.approx(10.0)
        assert car.current_mileage == pytest.approx(150.0)

    def test_insufficient_fuel_changes_nothing(self) -> None:
        bus = Bus("B-001", "Tourismo", 150)
        bus.refuel(5)

        with pytest.raises(InsufficientFuelError):
            bus.move(51)  # needs 5.1 L

        assert bus.get_fuel_level() == 5.0
        assert bus.current_mileage == 0.0

    def test_mileage_accumulates(self) -> None:
        plane = Airplane("A-001", "747", 900, 35000)
        plane.refuel(100)
        plane.move(100)
        plane.move(200)
        assert plane.current_mileage == pytest.approx(300.0)
        assert plane.get_fuel_level() == pytest.approx(40.0)

    def test_consume_fuel_returns_amount(self) -> None:
        plane = Airplane("A-001", "747", 900, 35000)
        plane.refuel(50)
        assert plane.consume_fuel(100) == pytest.approx(20.0)
        assert plane.get_fuel_level() == pytest.approx(30.0)


class TestJourneyTime:
    """Test category-dependent journey estimates."""

    def test_land_overhead(self) -> None:
        assert Car("C-001", "Camry", 100).estimate_journey_time(100) == pytest.approx(1.10)

    def test_air_speed_up(self) -> None:
        assert Airplane("A-001", "747", 900, 35000).estimate_journey_time(900) == pytest.approx(0.95)

    def test_water_overhead(self) -> None:
        ship = CargoShip("S-001", "Emma Maersk", 50, has_sail=False)
        assert ship.estimate_journey_time(100) == pytest.approx(2.30)

    def test_estimate_does_not_move(self) -> None:
        truck = Truck("T-001", "FH16", 140)
        truck.estimate_journey_time(500)
        assert truck.current_mileage == 0.0


class TestKinds:
    """Test per-kind parameters and capability sets."""

    def test_car(self) -> None:
        car = Car("C-001", "Camry", 180)
        assert car.category is VehicleCategory.LAND
        assert car.num_wheels == 4
        assert car.calculate_fuel_efficiency() == 15.0
        assert car.passenger_capacity == 5
        assert car.capabilities == {Capability.FUEL, Capability.PASSENGERS, Capability.MAINTENANCE}

    def test_truck(self) -> None:
        truck = Truck("T-001", "FH16", 140)
        assert truck.num_wheels == 8
        assert truck.cargo_capacity == 5000.0
        assert truck.capabilities == {Capability.FUEL, Capability.CARGO, Capability.MAINTENANCE}

    def test_bus(self) -> None:
        bus = Bus("B-001", "Tourismo", 150)
        assert bus.num_wheels == 6
        assert bus.calculate_fuel_efficiency() == 10.0
        assert bus.passenger_capacity == 50
        assert bus.cargo_capacity == 500.0
        assert len(bus.capabilities) == 4

    def test_airplane(self) -> None:
        plane = Airplane("A-001", "747", 900, 35000)
        assert plane.category is VehicleCategory.AIR
        assert plane.max_altitude == 35000.0
        assert plane.calculate_fuel_efficiency() == 5.0
        assert plane.passenger_capacity == 200
        assert plane.cargo_capacity == 10000.0

    def test_cargo_ship(self) -> None:
        ship = CargoShip("S-001", "Emma Maersk", 45, has_sail=False)
        assert ship.category is VehicleCategory.WATER
        assert ship.cargo_capacity == 50000.0
        assert ship.calculate_fuel_efficiency() == 4.0
        assert ship.get_fuel_level() == 50000.0
        assert not ship.has_capability(Capability.PASSENGERS)


class TestTruckEfficiency:
    """Test the load-dependent efficiency curve."""

    def test_half_load_keeps_base_efficiency(self) -> None:
        truck = Truck("T-001", "FH16", 140)
        truck.load_cargo(2500)
        assert truck.calculate_fuel_efficiency() == pytest.approx(8.0)

    def test_heavy_load_degrades_efficiency(self) -> None:
        truck = Truck("T-001", "FH16", 140)
        truck.load_cargo(3000)
        assert truck.calculate_fuel_efficiency() == pytest.approx(7.2)

    def test_heavy_load_fuel_for_72_km(self) -> None:
        truck = Truck("T-001", "FH16", 140)
        truck.load_cargo(3000)
        truck.refuel(25)

        truck.move(72)

        assert truck.get_fuel_level() == pytest.approx(15.0)

    def test_truck_without_hold_keeps_base_efficiency(self) -> None:
        truck = Truck("T-002", "Canter", 110, cargo_capacity=0.0)
        assert truck.calculate_fuel_efficiency() == pytest.approx(8.0)

    def test_unloading_restores_efficiency(self) -> None:
        truck = Truck("T-001", "FH16", 140)
        truck.load_cargo(3000)
        truck.unload_cargo(1000)
        assert truck.calculate_fuel_efficiency() == pytest.approx(8.0)


class TestCargoShip:
    """Test motor and sailing ships."""

    def test_sailing_ship_cannot_refuel(self) -> None:
        ship = CargoShip("S-002", "The Black Pearl", 30, has_sail=True)
        with pytest.raises(InvalidOperationError, match="sailing"):
            ship.refuel(10)
        assert ship.get_fuel_level() == 0.0

    def test_sailing_ship_moves_without_fuel(self) -> None:
        ship = CargoShip("S-002", "The Black Pearl", 30, has_sail=True)
        ship.move(50)
        assert ship.current_mileage == pytest.approx(50.0)
        assert ship.get_fuel_level() == 0.0

    def test_sailing_ship_consume_fuel_is_noop(self) -> None:
        ship = CargoShip("S-002", "The Black Pearl", 30, has_sail=True)
        assert ship.consume_fuel(1000) == 0.0
        assert ship.calculate_fuel_efficiency() == 0.0

    def test_sailing_ship_is_still_fuel_consumable(self) -> None:
        """The contract is implemented; sailing only changes its behaviour."""
        assert isinstance(CargoShip("S-002", "Pearl", 30, has_sail=True), FuelConsumable)

    def test_motor_ship_burns_fuel(self) -> None:
        ship = CargoShip("S-001", "Emma Maersk", 45, has_sail=False)
        ship.move(400)
        assert ship.get_fuel_level() == pytest.approx(49900.0)

    def test_motor_ship_refuel(self) -> None:
        ship = CargoShip("S-001", "Emma Maersk", 45, has_sail=False)
        ship.refuel(100)
        assert ship.get_fuel_level() == pytest.approx(50100.0)

    def test_motor_ship_rejects_non_positive_refuel(self) -> None:
        ship = CargoShip("S-001", "Emma Maersk", 45, has_sail=False)
        with pytest.raises(InvalidOperationError):
            ship.refuel(0)
