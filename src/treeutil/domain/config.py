from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of engine preferences (strictness, transfer
window, move rollback, logging) as JSON in the user data directory, with
default fallback for missing or corrupted files.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from treeutil.domain.constants import CURRENT_CONFIG_VERSION
from treeutil.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Failure policy
        "strict": False,
        "rollback_move": True,

        # Transfer
        "chunk_size": "2MB",

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration from disk, merged over the defaults.

    Args:
        path: Config file to read. Defaults to CONFIG_FILE.

    Returns:
        Dict[str, Any]: The loaded configuration, or the defaults if the file
                        is missing or unreadable.
    """
    config_path = path or CONFIG_FILE
    config = get_default_config()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at '{config_path}'. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{config_path}'. Using defaults.")
        return config

    data.pop("version", None)
    config.update(data)
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Persist the configuration to disk.

    Args:
        config: Configuration dictionary to save.
        path: Target file. Defaults to CONFIG_FILE.
    """
    config_path = path or CONFIG_FILE
    payload = dict(config)
    payload["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
