"""Tests for FleetRegistry."""

import pytest

from fleetops.fleet import EMPTY_FLEET_MESSAGE, FleetRegistry
from fleetops.vehicles import (
    Airplane,
    Bus,
    Capability,
    Car,
    CargoCarrier,
    CargoShip,
    InsufficientFuelError,
    InvalidOperationError,
    Truck,
)


class TestMembership:
    """Test add, remove and lookup."""

    def test_duplicate_id_is_rejected(self) -> None:
        fleet = FleetRegistry()
        fleet.add(Car("C-001", "Toyota Camry", 180))

        with pytest.raises(InvalidOperationError):
            fleet.add(Car("C-001", "Toyota Camry", 180))

        assert len(fleet) == 1

    def test_duplicate_detection_ignores_case(self) -> None:
        fleet = FleetRegistry()
        fleet.add(Truck("T-001", "FH16", 140))

        with pytest.raises(InvalidOperationError):
            fleet.add(Bus("t-001", "Tourismo", 150))

    def test_add_preserves_insertion_order(self, mixed_fleet: FleetRegistry) -> None:
        assert [v.id for v in mixed_fleet] == ["C-001", "T-001", "B-001", "A-001", "S-001", "S-002"]

    def test_remove_ignores_case(self, mixed_fleet: FleetRegistry) -> None:
        removed = mixed_fleet.remove("b-001")

        assert removed.id == "B-001"
        assert "B-001" not in mixed_fleet
        assert len(mixed_fleet) == 5

    def test_remove_unknown_id(self, mixed_fleet: FleetRegistry) -> None:
        with pytest.raises(InvalidOperationError):
            mixed_fleet.remove("X-999")
        assert len(mixed_fleet) == 6

    def test_get_ignores_case(self, mixed_fleet: FleetRegistry) -> None:
        assert mixed_fleet.get("a-001").model == "Boeing 747"
        with pytest.raises(InvalidOperationError):
            mixed_fleet.get("nope")

    def test_vehicles_view_is_a_copy(self, mixed_fleet: FleetRegistry) -> None:
        view = list(mixed_fleet.vehicles)
        view.clear()
        assert len(mixed_fleet) == 6


class TestBulkOperations:
    """Test per-vehicle failure isolation in bulk operations."""

    def test_journeys_continue_after_failures(self, mixed_fleet: FleetRegistry) -> None:
        """Only the motor ship has fuel; every other fuel burner fails."""
        failures = mixed_fleet.start_all_journeys(100)

        failed_ids = [f.vehicle_id for f in failures]
        assert failed_ids == ["C-001", "T-001", "B-001", "A-001"]
        assert all(isinstance(f.error, InsufficientFuelError) for f in failures)
        assert mixed_fleet.get("S-001").current_mileage == pytest.approx(100.0)
        assert mixed_fleet.get("S-002").current_mileage == pytest.approx(100.0)

    def test_journeys_succeed_after_refuel(self, mixed_fleet: FleetRegistry) -> None:
        mixed_fleet.refuel_all(50)

        failures = mixed_fleet.start_all_journeys(100)

        assert failures == []
        assert mixed_fleet.get("C-001").get_fuel_level() == pytest.approx(50 - 100 / 15)
        assert sum(v.current_mileage for v in mixed_fleet) == pytest.approx(600.0)

    def test_non_positive_journey_fails_for_every_vehicle(self, mixed_fleet: FleetRegistry) -> None:
        failures = mixed_fleet.start_all_journeys(0)

        assert len(failures) == 6
        assert all(isinstance(f.error, InvalidOperationError) for f in failures)

    def test_refuel_all_reports_sailing_ship(self, mixed_fleet: FleetRegistry) -> None:
        failures = mixed_fleet.refuel_all(30)

        assert [f.vehicle_id for f in failures] == ["S-002"]
        assert "sailing" in failures[0].message
        assert mixed_fleet.get("C-001").get_fuel_level() == pytest.approx(30.0)
        assert mixed_fleet.get("S-001").get_fuel_level() == pytest.approx(50030.0)

    def test_bulk_failures_are_logged(self, mixed_fleet: FleetRegistry, caplog) -> None:
        mixed_fleet.refuel_all(30)
        assert "Could not refuel vehicle S-002" in caplog.text

    def test_maintain_all_services_only_vehicles_in_need(self) -> None:
        fleet = FleetRegistry()
        car = Car("C-001", "Camry", 180)
        truck = Truck("T-001", "FH16", 140)
        fleet.add(car)
        fleet.add(truck)
        car.schedule_maintenance()

        serviced = fleet.maintain_all()

        assert serviced == [car]
        assert not car.needs_maintenance()
        assert fleet.vehicles_needing_maintenance() == []


class TestQueries:
    """Test search, fuel estimates and sorting."""

    def test_total_fuel_consumption_skips_sailing_ship(self, mixed_fleet: FleetRegistry) -> None:
        expected = 120 / 15 + 120 / 8 + 120 / 10 + 120 / 5 + 120 / 4
        assert mixed_fleet.total_fuel_consumption(120) == pytest.approx(expected)

    def test_total_fuel_consumption_rejects_non_positive(self, mixed_fleet: FleetRegistry) -> None:
        with pytest.raises(InvalidOperationError):
            mixed_fleet.total_fuel_consumption(0)

    def test_search_by_capability(self, mixed_fleet: FleetRegistry) -> None:
        passenger_ids = [v.id for v in mixed_fleet.search(Capability.PASSENGERS)]
        assert passenger_ids == ["C-001", "B-001", "A-001"]

    def test_search_by_contract_class(self, mixed_fleet: FleetRegistry) -> None:
        cargo_ids = [v.id for v in mixed_fleet.search(CargoCarrier)]
        assert cargo_ids == ["T-001", "B-001", "A-001", "S-001", "S-002"]

    def test_search_by_kind_class(self, mixed_fleet: FleetRegistry) -> None:
        assert [v.id for v in mixed_fleet.search(CargoShip)] == ["S-001", "S-002"]

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("car", ["C-001"]),
            ("CargoShip", ["S-001", "S-002"]),
            ("FuelConsumable", ["C-001", "T-001", "B-001", "A-001", "S-001", "S-002"]),
            ("maintainable", ["C-001", "T-001", "B-001", "A-001", "S-001", "S-002"]),
            ("passengercarrier", ["C-001", "B-001", "A-001"]),
            ("cargo", ["T-001", "B-001", "A-001", "S-001", "S-002"]),
        ],
    )
    def test_search_by_name(self, mixed_fleet: FleetRegistry, name: str, expected: list[str]) -> None:
        assert [v.id for v in mixed_fleet.search(name)] == expected

    def test_search_unknown_name(self, mixed_fleet: FleetRegistry) -> None:
        with pytest.raises(InvalidOperationError):
            mixed_fleet.search("hovercraft")

    def test_vehicles_needing_maintenance_uses_mileage(self) -> None:
        fleet = FleetRegistry()
        ship = CargoShip("S-002", "Pearl", 30, has_sail=True)
        fleet.add(ship)
        fleet.add(Car("C-001", "Camry", 180))

        ship.move(10_001)

        assert fleet.vehicles_needing_maintenance() == [ship]

    def test_sort_by_efficiency_descending_and_stable(self) -> None:
        fleet = FleetRegistry()
        fleet.add(CargoShip("S-002", "Pearl", 30, has_sail=True))  # 0.0
        fleet.add(Bus("B-001", "Tourismo", 150))  # 10.0
        fleet.add(Car("C-001", "Camry", 180))  # 15.0
        fleet.add(Airplane("A-001", "747", 900, 35000))  # 5.0
        fleet.add(Bus("B-002", "Citaro", 90))  # 10.0

        fleet.sort_by_efficiency()

        assert [v.id for v in fleet] == ["C-001", "B-001", "B-002", "A-001", "S-002"]


class TestReport:
    """Test report generation through the registry."""

    def test_empty_fleet_message(self) -> None:
        assert FleetRegistry().generate_report() == EMPTY_FLEET_MESSAGE

    def test_report_contents(self, mixed_fleet: FleetRegistry) -> None:
        mixed_fleet.get("T-001").schedule_maintenance()

        report = mixed_fleet.build_report()

        assert report.total_vehicles == 6
        assert report.counts_by_kind == {
            "Airplane": 1,
            "Bus": 1,
            "Car": 1,
            "CargoShip": 2,
            "Truck": 1,
        }
        assert report.average_efficiency == pytest.approx((15 + 8 + 10 + 5 + 4) / 5)
        assert report.total_mileage == 0.0
        assert [e.vehicle_id for e in report.maintenance_due] == ["T-001"]

    def test_report_text(self, mixed_fleet: FleetRegistry) -> None:
        text = mixed_fleet.generate_report()

        assert "Total Vehicles: 6" in text
        assert "  - CargoShip: 2" in text
        assert "Average Fuel Efficiency: 8.40 km/l" in text
        assert "All vehicles are in good condition." in text
