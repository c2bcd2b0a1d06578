"""FleetOps - fleet management from the command line.

Each command loads the fleet file, applies one operation, and saves the
file again if the fleet changed.

Typical usage:
    fleetops demo
    fleetops add car C-002 "Honda Civic" 170
    fleetops refuel 40
    fleetops journey 120
    fleetops report
    fleetops search cargocarrier
"""

import argparse
import sys
from pathlib import Path

from fleetops.core.config import ConfigError, ConfigLoader, FleetSettings
from fleetops.core.logging_system import get_logger, initialize_logging, shutdown_logging
from fleetops.core.resource_path import get_config_path
from fleetops.demo import build_demo_fleet
from fleetops.fleet import FleetRegistry, OperationFailure
from fleetops.vehicles import (
    Airplane,
    Bus,
    Car,
    CargoShip,
    FleetError,
    Truck,
    Vehicle,
)

logger = get_logger(__name__)

MUTATING_COMMANDS = {"demo", "add", "remove", "journey", "refuel", "maintain", "sort"}


class FleetOpsApp:
    """Runs one command against the fleet stored in the data file."""

    def __init__(self, settings: FleetSettings) -> None:
        self.settings = settings
        self.fleet = FleetRegistry()

    def load(self) -> None:
        """Load the data file if it exists; start empty otherwise."""
        if not self.settings.data_file.exists():
            logger.info("No fleet file at %s, starting with an empty fleet", self.settings.data_file)
            return

        result = self.fleet.load_from_file(self.settings.data_file)
        for record in result.skipped:
            print(f"Skipped line {record.line_number}: {record.reason}", file=sys.stderr)

    def save(self) -> bool:
        if not self.fleet.save_to_file(self.settings.data_file):
            print(f"Could not save fleet to {self.settings.data_file}", file=sys.stderr)
            return False
        return True

    def run(self, args: argparse.Namespace) -> int:
        """Execute a parsed command.

        Returns:
            Exit code (0 for success, 1 if the operation failed).
        """
        if args.command == "demo":
            return self._demo()

        self.load()
        handler = getattr(self, f"_cmd_{args.command}")
        code = handler(args)

        if code == 0 and args.command in MUTATING_COMMANDS and not self.save():
            return 1
        return code

    def _demo(self) -> int:
        self.fleet = build_demo_fleet()
        _print_failures("Refuel", self.fleet.refuel_all(self.settings.default_refuel_l))
        _print_failures("Journey", self.fleet.start_all_journeys(self.settings.default_distance_km))
        print(self.fleet.generate_report())
        if not self.save():
            return 1
        print(f"Demo fleet has been saved to {self.settings.data_file}")
        return 0

    def _cmd_list(self, args: argparse.Namespace) -> int:
        if len(self.fleet) == 0:
            print("The fleet is empty.")
        for vehicle in self.fleet:
            vehicle.display_info()
        return 0

    def _cmd_add(self, args: argparse.Namespace) -> int:
        self.fleet.add(build_vehicle(args))
        print(f"Vehicle {args.id} added to the fleet.")
        return 0

    def _cmd_remove(self, args: argparse.Namespace) -> int:
        vehicle = self.fleet.remove(args.id)
        print(f"Vehicle {vehicle.id} removed from the fleet.")
        return 0

    def _cmd_journey(self, args: argparse.Namespace) -> int:
        distance = args.distance if args.distance is not None else self.settings.default_distance_km
        _print_failures("Journey", self.fleet.start_all_journeys(distance))
        print(f"All journeys of {distance:.1f} km concluded.")
        return 0

    def _cmd_refuel(self, args: argparse.Namespace) -> int:
        amount = args.amount if args.amount is not None else self.settings.default_refuel_l
        _print_failures("Refuel", self.fleet.refuel_all(amount))
        print("Refueling complete.")
        return 0

    def _cmd_maintain(self, args: argparse.Namespace) -> int:
        serviced = self.fleet.maintain_all()
        print(f"Maintenance performed on {len(serviced)} vehicle(s).")
        return 0

    def _cmd_report(self, args: argparse.Namespace) -> int:
        print(self.fleet.generate_report())
        return 0

    def _cmd_search(self, args: argparse.Namespace) -> int:
        results = self.fleet.search(args.selector)
        print(f"--- Found {len(results)} vehicle(s) of type {args.selector} ---")
        for vehicle in results:
            vehicle.display_info()
        return 0

    def _cmd_maintenance(self, args: argparse.Namespace) -> int:
        due = self.fleet.vehicles_needing_maintenance()
        if not due:
            print("No vehicles currently need maintenance.")
            return 0
        print(f"--- {len(due)} vehicle(s) need maintenance ---")
        for vehicle in due:
            vehicle.display_info()
        return 0

    def _cmd_sort(self, args: argparse.Namespace) -> int:
        self.fleet.sort_by_efficiency()
        for vehicle in self.fleet:
            print(f"{vehicle.id}: {vehicle.calculate_fuel_efficiency():.2f} km/l")
        return 0

    def _cmd_fuel_estimate(self, args: argparse.Namespace) -> int:
        total = self.fleet.total_fuel_consumption(args.distance)
        print(f"Fuel needed for {args.distance:.1f} km: {total:.2f} L")
        return 0


def build_vehicle(args: argparse.Namespace) -> Vehicle:
    """Create a vehicle from ``add`` command arguments.

    Raises:
        FleetError: If the arguments do not describe a valid vehicle.
    """
    kind = args.kind.lower()
    if kind == "car":
        return Car(args.id, args.model, args.max_speed)
    if kind == "truck":
        return Truck(args.id, args.model, args.max_speed)
    if kind == "bus":
        return Bus(args.id, args.model, args.max_speed)
    if kind == "airplane":
        if args.max_altitude is None:
            raise FleetError("An airplane needs --max-altitude.")
        return Airplane(args.id, args.model, args.max_speed, args.max_altitude)
    return CargoShip(args.id, args.model, args.max_speed, has_sail=args.sail)


def _print_failures(operation: str, failures: list[OperationFailure]) -> None:
    for failure in failures:
        print(f"{operation} failed for vehicle {failure.vehicle_id}: {failure.message}", file=sys.stderr)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="FleetOps - Fleet Management")
    parser.add_argument("--config", type=Path, help="Fleet configuration YAML file")
    parser.add_argument("--data-file", type=Path, help="Fleet CSV file (overrides configuration)")

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("demo", help="Create, exercise and save a demonstration fleet")
    commands.add_parser("list", help="Show every vehicle")

    add = commands.add_parser("add", help="Add a vehicle")
    add.add_argument("kind", choices=["car", "truck", "bus", "airplane", "cargoship"], type=str.lower)
    add.add_argument("id")
    add.add_argument("model")
    add.add_argument("max_speed", type=float, help="Max speed (km/h)")
    add.add_argument("--max-altitude", type=float, help="Max altitude (ft), airplanes only")
    add.add_argument("--sail", action="store_true", help="Sailing vessel, cargo ships only")

    remove = commands.add_parser("remove", help="Remove a vehicle")
    remove.add_argument("id")

    journey = commands.add_parser("journey", help="Send every vehicle on a journey")
    journey.add_argument("distance", type=float, nargs="?", help="Distance (km)")

    refuel = commands.add_parser("refuel", help="Refuel every fuel-burning vehicle")
    refuel.add_argument("amount", type=float, nargs="?", help="Fuel per vehicle (L)")

    commands.add_parser("maintain", help="Service every vehicle that needs it")
    commands.add_parser("report", help="Print the fleet report")

    search = commands.add_parser("search", help="Find vehicles by type or capability")
    search.add_argument("selector", help="e.g. Car, Truck, FuelConsumable, CargoCarrier")

    commands.add_parser("maintenance", help="List vehicles needing maintenance")
    commands.add_parser("sort", help="Sort the fleet by fuel efficiency")

    estimate = commands.add_parser("fuel-estimate", help="Fuel the fleet needs for a distance")
    estimate.add_argument("distance", type=float, help="Distance (km)")

    args = parser.parse_args(argv)
    args.command = args.command.replace("-", "_")
    return args


def load_settings(args: argparse.Namespace) -> FleetSettings:
    """Read settings from --config or config/fleetops.yaml, if present.

    Raises:
        ConfigError: If the configuration file is invalid.
    """
    config_path = args.config or get_config_path("fleetops.yaml")
    if args.config is not None or config_path.exists():
        settings = FleetSettings.from_config(ConfigLoader.load(config_path))
    else:
        settings = FleetSettings()

    if args.data_file is not None:
        settings.data_file = args.data_file
    return settings


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success).
    """
    args = parse_args(argv)

    logging_config = get_config_path("logging.yaml")
    if logging_config.exists():
        initialize_logging(logging_config, use_platform_dir=True)
    else:
        initialize_logging(use_platform_dir=True)

    try:
        app = FleetOpsApp(load_settings(args))
        return app.run(args)
    except (FleetError, ConfigError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.exception("Fatal error: %s", e)
        return 1
    finally:
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())
