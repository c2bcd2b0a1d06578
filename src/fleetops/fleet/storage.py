"""Flat-file persistence for a fleet.

One CSV row per vehicle, no header. The first field names the vehicle
kind, which selects the rule used to rebuild the row (see each kind's
``from_csv_row``). Fields are written with minimal quoting: a model name
containing a comma or a line break is quoted rather than splitting the row,
and rows without such fields are plain comma-joined text.

Loading is record-by-record; a quoted field may span lines. A bad row (unknown kind, wrong field count,
malformed number or boolean, state outside capacity, duplicate id) is
logged and recorded, and the remaining rows are still loaded.

Typical usage:
    text = encode_fleet(vehicles)
    vehicles, skipped = decode_fleet(text, default_kind_registry())
"""

import csv
import io
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from fleetops.core.logging_system import get_logger
from fleetops.core.registry import RegistryError, VehicleKindRegistry
from fleetops.vehicles import FleetError, Vehicle

logger = get_logger(__name__)


@dataclass
class SkippedRecord:
    """A saved row that could not be loaded.

    Attributes:
        line_number: 1-based line number in the source
        line: Raw line text
        reason: Why the row was rejected
    """

    line_number: int
    line: str
    reason: str


@dataclass
class LoadResult:
    """Outcome of loading a fleet file.

    Attributes:
        path: File that was read
        vehicles: Vehicles rebuilt from well-formed rows, in file order
        skipped: Rows that were rejected
        error: Set when the file itself could not be read
    """

    path: Path
    vehicles: list[Vehicle] = field(default_factory=list)
    skipped: list[SkippedRecord] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True if the file was read (individual rows may still be skipped)."""
        return self.error is None


def encode_fleet(vehicles: Iterable[Vehicle]) -> str:
    """Serialize vehicles to CSV text, one row each, in the given order."""
    return "".join(_row_text(vehicle.to_csv_row()) + "\n" for vehicle in vehicles)


def decode_fleet(
    text: str, kind_registry: VehicleKindRegistry, source: str = "<string>"
) -> tuple[list[Vehicle], list[SkippedRecord]]:
    """Rebuild vehicles from CSV text.

    Quoted fields may span lines, so a record's line number is the line
    it starts on.

    Args:
        text: File contents, read without newline translation.
        kind_registry: Kinds allowed in the file.
        source: Name used in log messages.

    Returns:
        Tuple of (vehicles, skipped rows). Blank lines are ignored.
    """
    vehicles: list[Vehicle] = []
    skipped: list[SkippedRecord] = []
    seen_keys: set[str] = set()

    reader = csv.reader(io.StringIO(text, newline=""))
    line_number = 1
    while True:
        try:
            row = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            reason = str(e)
            logger.warning("Skipping malformed line %d in %s: %s", line_number, source, reason)
            skipped.append(SkippedRecord(line_number, "", reason))
            line_number = reader.line_num + 1
            continue

        start_line, line_number = line_number, reader.line_num + 1
        if not "".join(row).strip():
            continue

        try:
            vehicle = kind_registry.create_from_row(row)
        except (ValueError, RegistryError, FleetError) as e:
            reason = str(e)
        else:
            if vehicle.key not in seen_keys:
                seen_keys.add(vehicle.key)
                vehicles.append(vehicle)
                continue
            reason = f"Duplicate vehicle ID: {vehicle.id}"

        line = _row_text(row)
        logger.warning("Skipping malformed line %d in %s: %s (%s)", start_line, source, line, reason)
        skipped.append(SkippedRecord(start_line, line, reason))

    return vehicles, skipped


def _row_text(row: list[str]) -> str:
    """One CSV record without its terminator."""
    buffer = io.StringIO()
    # Either character in the terminator forces quoting of fields holding it
    csv.writer(buffer, lineterminator="\r\n").writerow(row)
    return buffer.getvalue()[:-2]


def read_fleet_file(path: str | Path, kind_registry: VehicleKindRegistry) -> LoadResult:
    """Read and decode a fleet file.

    Never raises for I/O problems: an unreadable file is logged and
    reported in ``LoadResult.error``.
    """
    path = Path(path)
    result = LoadResult(path=path)

    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading fleet from %s: %s", path, e)
        result.error = str(e)
        return result

    result.vehicles, result.skipped = decode_fleet(text, kind_registry, source=str(path))
    return result


def write_fleet_file(path: str | Path, vehicles: Iterable[Vehicle]) -> None:
    """Write a fleet file, replacing the destination atomically.

    The rows go to a temporary file in the destination directory which
    then replaces the destination, so a failed write leaves the previous
    file intact.

    Raises:
        OSError: If the file cannot be written.
    """
    path = Path(path)
    text = encode_fleet(vehicles)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
