"""
Settings Module for the Advent of Code 2023 solvers

Provides persistent storage for user preferences using JSON.
Settings are stored in config.json in the working directory.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug_enabled": False,
    "input_dir": "inputs",
    "strict_gears": False,
    "cube_limits": {"red": 12, "green": 13, "blue": 14},
}


def _defaults() -> Dict[str, Any]:
    return copy.deepcopy(DEFAULT_SETTINGS)


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from config.json.

    Args:
        path: Settings file (default: SETTINGS_FILE)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    path = Path(path) if path is not None else SETTINGS_FILE
    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return _defaults()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)
        if not isinstance(settings, dict):
            raise ValueError("top-level JSON value is not an object")

        # Merge with defaults to handle missing keys
        result = _defaults()
        result.update(settings)
        logger.debug(f"Settings loaded: {result}")
        return result

    except (json.JSONDecodeError, ValueError, OSError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return _defaults()


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file (default: SETTINGS_FILE)
    """
    path = Path(path) if path is not None else SETTINGS_FILE
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except OSError as e:
        logger.error(f"Failed to save settings: {e}")
