"""Resource path resolution relative to the project root.

Typical usage:
    from fleetops.core.resource_path import get_config_path

    config_path = get_config_path("fleetops.yaml")
"""

import os
from pathlib import Path

# Overrides the config directory (e.g. for an installed tool)
CONFIG_DIR_ENV = "FLEETOPS_CONFIG_DIR"


def get_project_root() -> Path:
    """Get the project root directory (up from src/fleetops/core)."""
    return Path(__file__).parent.parent.parent.parent


def get_resource_path(relative_path: str) -> Path:
    """Get absolute path to a resource below the project root.

    Examples:
        >>> str(get_resource_path("config/logging.yaml"))
        '/home/user/dev/fleetops/config/logging.yaml'
    """
    return get_project_root() / relative_path


def get_config_path(config_file: str) -> Path:
    """Get path to a configuration file.

    Uses ``$FLEETOPS_CONFIG_DIR`` when set, otherwise ``config/`` under the
    project root.

    Examples:
        >>> str(get_config_path("logging.yaml"))
        '/home/user/dev/fleetops/config/logging.yaml'
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override) / config_file
    return get_resource_path(f"config/{config_file}")
