"""Error taxonomy for vehicle and fleet operations.

Single-item operations raise these to the caller. Bulk fleet operations
catch them per vehicle and report them as failures instead of aborting.
"""


class FleetError(Exception):
    """Base class for all fleet and vehicle errors."""


class InvalidOperationError(FleetError):
    """Raised when an operation's precondition is violated.

    Examples: non-positive distance or fuel amount, duplicate or unknown
    vehicle id, unloading more cargo than is loaded, refueling a sailing ship.
    """


class InsufficientFuelError(FleetError):
    """Raised when the fuel on board cannot cover the requested consumption."""


class OverloadError(FleetError):
    """Raised when boarding or loading would exceed capacity."""


class VehicleConstructionError(FleetError, ValueError):
    """Raised when a vehicle is created with invalid identity data."""
