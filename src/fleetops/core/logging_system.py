"""Logging setup for the fleet tools.

Logging is configured from YAML with per-component overrides,
platform-aware log locations, and rotation on every start.

Platform-specific log locations:
    - macOS: ~/Library/Logs/FleetOps/fleetops.log
    - Linux: ~/.fleetops/logs/fleetops.log
    - Windows: %AppData%/FleetOps/Logs/fleetops.log

Typical usage example:
    from fleetops.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.info("Vehicle %s added", vehicle.id)
"""

import logging
import logging.handlers
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_initialized = False

DEFAULT_LOG_FILENAME = "fleetops.log"


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory:
        - macOS: ~/Library/Logs/FleetOps
        - Linux: ~/.fleetops/logs
        - Windows: %AppData%/FleetOps/Logs
    """
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "FleetOps"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "FleetOps" / "Logs"
    else:
        return Path.home() / ".fleetops" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = DEFAULT_LOG_FILENAME, keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N runs.

    Renames the current log to ``<name>.1``, shifts older logs up by one,
    and deletes the one beyond keep_count.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of old logs to keep.

    Examples:
        >>> rotate_logs(Path("logs"), "fleetops.log", 5)
        # fleetops.log -> fleetops.log.1
        # fleetops.log.1 -> fleetops.log.2
        # fleetops.log.5 -> deleted
    """
    log_file = log_dir / log_filename

    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        if old_log.exists():
            old_log.rename(log_dir / f"{log_filename}.{i + 1}")

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(config_path: str | Path | None = None, use_platform_dir: bool = True) -> None:
    """Initialize logging from a YAML configuration file.

    Call once at startup before any logging occurs. Rotates the previous
    run's log file.

    Args:
        config_path: Path to logging configuration YAML file.
            If None, uses the default configuration.
        use_platform_dir: If True, write logs to the platform log directory.
            If False, use ``log_dir`` from the config (development/testing).

    Raises:
        LoggingError: If the configuration file cannot be read.

    Examples:
        >>> initialize_logging("config/logging.yaml")
        >>> get_logger("fleetops.fleet").info("Logging initialized")
    """
    global _logging_config, _initialized

    if config_path:
        try:
            config_path = Path(config_path)
            if not config_path.exists():
                raise LoggingError(f"Logging config file not found: {config_path}")

            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}

        except LoggingError:
            raise
        except Exception as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e

        _logging_config = _merge_with_defaults(loaded)
    else:
        _logging_config = _get_default_config()

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    log_dir = Path(_logging_config["log_dir"])
    log_dir.mkdir(parents=True, exist_ok=True)

    combined = _logging_config["combined_log"]
    rotate_logs(log_dir, combined["filename"], combined["backup_count"])

    _configure_root_logger()
    _loggers_cache.clear()

    _initialized = True


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration."""
    return {
        "version": 1,
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": True,
            "filename": DEFAULT_LOG_FILENAME,
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "WARNING",
        },
        "components": {},
    }


def _merge_with_defaults(loaded: dict[str, Any]) -> dict[str, Any]:
    """Fill missing keys of a loaded config from the defaults (one level deep)."""
    config = _get_default_config()
    for key, value in loaded.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key] = {**config[key], **value}
        else:
            config[key] = value
    return config


def _configure_root_logger() -> None:
    """Configure the root logger with console and file handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_config = _logging_config["console"]
    if console_config.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_config.get("level", "WARNING")))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)

    combined_config = _logging_config["combined_log"]
    if combined_config.get("enabled", True):
        log_file = Path(_logging_config["log_dir"]) / combined_config["filename"]

        # Rotation already happened at startup
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Loggers are cached. Each one can be tuned under the ``components``
    section of the logging YAML:

        components:
          fleetops.fleet.storage:
            level: DEBUG
            dedicated_file: true

    Args:
        name: Logger name (usually the module's ``__name__``).

    Returns:
        Configured logger instance.

    Note:
        Use lazy formatting (%) instead of f-strings.
    """
    if not _initialized:
        initialize_logging()

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    component_config = _logging_config.get("components", {}).get(name, {})

    if component_config.get("enabled", True):
        logger.disabled = False
        if "level" in component_config:
            logger.setLevel(getattr(logging, component_config["level"]))

        if component_config.get("dedicated_file", False):
            log_file = Path(_logging_config["log_dir"]) / f"{name}.log"
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=component_config.get("max_bytes", 10485760),
                backupCount=component_config.get("backup_count", 5),
                encoding="utf-8",
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(_get_formatter())
            logger.addHandler(file_handler)
    else:
        logger.disabled = True

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Flush and close all handlers. Call at application shutdown."""
    logging.shutdown()
    _loggers_cache.clear()
