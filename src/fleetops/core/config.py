"""Configuration loader for YAML files.

Typical usage example:
    from fleetops.core.config import ConfigLoader, FleetSettings

    config = ConfigLoader.load("config/fleetops.yaml")
    settings = FleetSettings.from_config(config)
    registry.load_from_file(settings.data_file)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from fleetops.core.logging_system import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Provides loading, dot-notation access and default values.

    Examples:
        >>> config = ConfigLoader.load("config/fleetops.yaml")
        >>> data_file = config.get("fleet.data_file", default="my_fleet.csv")
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data if data is not None else {}

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the file is missing, unreadable, or not a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except Exception as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value using dot notation, e.g. ``"fleet.data_file"``."""
        value: Any = self._data

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value


@dataclass
class FleetSettings:
    """Settings used by the command-line tool.

    Attributes:
        data_file: CSV file holding the fleet
        default_distance_km: Journey distance when none is given
        default_refuel_l: Refuel amount when none is given
    """

    data_file: Path = Path("my_fleet.csv")
    default_distance_km: float = 100.0
    default_refuel_l: float = 50.0

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "FleetSettings":
        """Read the ``fleet`` section, falling back to defaults.

        Raises:
            ConfigError: If a numeric setting is not a positive number.
        """
        defaults = cls()
        settings = cls(
            data_file=Path(config.get("fleet.data_file", str(defaults.data_file))),
            default_distance_km=_positive_number(
                config, "fleet.default_distance_km", defaults.default_distance_km
            ),
            default_refuel_l=_positive_number(
                config, "fleet.default_refuel_l", defaults.default_refuel_l
            ),
        )
        logger.debug("Fleet settings: %s", settings)
        return settings


def _positive_number(config: ConfigLoader, key: str, default: float) -> float:
    value = config.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"{key} must be a positive number, got {value!r}")
    return float(value)
