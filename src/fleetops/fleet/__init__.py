"""Fleet registry, reporting and persistence."""

from fleetops.fleet.manager import FleetRegistry, OperationFailure
from fleetops.fleet.report import EMPTY_FLEET_MESSAGE, FleetReport, MaintenanceEntry
from fleetops.fleet.storage import LoadResult, SkippedRecord

__all__ = [
    "EMPTY_FLEET_MESSAGE",
    "FleetRegistry",
    "FleetReport",
    "LoadResult",
    "MaintenanceEntry",
    "OperationFailure",
    "SkippedRecord",
]
