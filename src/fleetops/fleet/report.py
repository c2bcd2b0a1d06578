"""Fleet summary report.

``build_report`` aggregates the fleet into a FleetReport; ``format_report``
renders it as text for the console.
"""

from dataclasses import dataclass, field
from typing import Sequence

from fleetops.vehicles import FuelConsumable, Maintainable, Vehicle

EMPTY_FLEET_MESSAGE = "Fleet Report: The fleet is currently empty."

REPORT_RULE = "=" * 46


@dataclass
class MaintenanceEntry:
    """A vehicle that needs maintenance.

    Attributes:
        vehicle_id: Vehicle identifier
        mileage: Odometer reading (km)
    """

    vehicle_id: str
    mileage: float


@dataclass
class FleetReport:
    """Aggregated fleet statistics.

    Attributes:
        total_vehicles: Number of vehicles in the fleet
        counts_by_kind: Kind name -> count, sorted by kind name
        average_efficiency: Mean km/L over fuel-burning vehicles with
            positive efficiency (0.0 if there are none)
        total_mileage: Sum of all odometer readings (km)
        maintenance_due: Vehicles needing maintenance, in fleet order
    """

    total_vehicles: int = 0
    counts_by_kind: dict[str, int] = field(default_factory=dict)
    average_efficiency: float = 0.0
    total_mileage: float = 0.0
    maintenance_due: list[MaintenanceEntry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.total_vehicles == 0


def build_report(vehicles: Sequence[Vehicle]) -> FleetReport:
    """Aggregate statistics over a fleet."""
    counts: dict[str, int] = {}
    for vehicle in vehicles:
        counts[vehicle.kind] = counts.get(vehicle.kind, 0) + 1

    efficiencies = []
    for vehicle in vehicles:
        if isinstance(vehicle, FuelConsumable):
            efficiency = vehicle.calculate_fuel_efficiency()
            if efficiency > 0:
                efficiencies.append(efficiency)
    average_efficiency = sum(efficiencies) / len(efficiencies) if efficiencies else 0.0

    maintenance_due = [
        MaintenanceEntry(vehicle.id, vehicle.current_mileage)
        for vehicle in vehicles
        if isinstance(vehicle, Maintainable) and vehicle.needs_maintenance()
    ]

    return FleetReport(
        total_vehicles=len(vehicles),
        counts_by_kind=dict(sorted(counts.items())),
        average_efficiency=average_efficiency,
        total_mileage=sum(vehicle.current_mileage for vehicle in vehicles),
        maintenance_due=maintenance_due,
    )


def format_report(report: FleetReport) -> str:
    """Render a report as console text.

    An empty fleet renders as EMPTY_FLEET_MESSAGE rather than a table of
    zeros.
    """
    if report.is_empty:
        return EMPTY_FLEET_MESSAGE

    lines = [
        "================ FLEET REPORT ================",
        f"Total Vehicles: {report.total_vehicles}",
        "",
        "Vehicles by Type:",
    ]
    lines.extend(f"  - {kind}: {count}" for kind, count in report.counts_by_kind.items())
    lines += [
        "",
        f"Average Fuel Efficiency: {report.average_efficiency:.2f} km/l",
        f"Total Fleet Mileage: {report.total_mileage:.1f} km",
        "",
        "Maintenance Status:",
    ]

    if report.maintenance_due:
        lines.append(f"  Vehicles needing maintenance: {len(report.maintenance_due)}")
        lines.extend(
            f"    - ID: {entry.vehicle_id}, Mileage: {entry.mileage:.1f} km"
            for entry in report.maintenance_due
        )
    else:
        lines.append("  All vehicles are in good condition.")

    lines.append(REPORT_RULE)
    return "\n".join(lines)
