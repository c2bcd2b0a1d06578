"""Pytest configuration and fixtures for all tests."""

import pytest
import yaml

from fleetops.core.logging_system import initialize_logging, shutdown_logging
from fleetops.fleet import FleetRegistry
from fleetops.vehicles import Airplane, Bus, Car, CargoShip, Truck


@pytest.fixture(scope="session", autouse=True)
def test_logging(tmp_path_factory):
    """Send all log output to a temporary directory for the session."""
    log_dir = tmp_path_factory.mktemp("logs")
    config_path = log_dir / "logging.yaml"
    config_path.write_text(
        yaml.safe_dump(
            {
                "log_dir": str(log_dir),
                "console": {"enabled": False},
                "combined_log": {"filename": "test.log"},
            }
        ),
        encoding="utf-8",
    )
    initialize_logging(config_path, use_platform_dir=False)

    yield log_dir

    shutdown_logging()


@pytest.fixture
def mixed_fleet() -> FleetRegistry:
    """One vehicle of each kind, plus a sailing ship."""
    fleet = FleetRegistry()
    fleet.add(Car("C-001", "Toyota Camry", 180))
    fleet.add(Truck("T-001", "Volvo FH16", 140))
    fleet.add(Bus("B-001", "Mercedes-Benz Tourismo", 150))
    fleet.add(Airplane("A-001", "Boeing 747", 900, 35000))
    fleet.add(CargoShip("S-001", "Emma Maersk", 45, has_sail=False))
    fleet.add(CargoShip("S-002", "The Black Pearl", 30, has_sail=True))
    return fleet
