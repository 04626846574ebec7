"""
Settings Module for the state-space search driver

Provides persistent storage for search options using JSON.
Settings are stored in config.json in the working directory.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any

from .puzzles import DEFAULT_START, DEFAULT_GOAL

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "strategy_name": "depth_first",
    "cycle_check": True,
    "depth_limit": 0,
    "memory": False,
    "start": DEFAULT_START,
    "goal": DEFAULT_GOAL,
    "debug_enabled": False,
}


def load_settings() -> Dict[str, Any]:
    """
    Load settings from config.json.

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    if not SETTINGS_FILE.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(SETTINGS_FILE, 'r', encoding='utf-8') as f:
            settings = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    if not isinstance(settings, dict):
        logger.warning("Settings file does not contain an object, using defaults")
        return DEFAULT_SETTINGS.copy()

    # Merge with defaults to handle missing keys
    result = DEFAULT_SETTINGS.copy()
    result.update(settings)
    logger.debug(f"Settings loaded: {result}")
    return result


def save_settings(settings: Dict[str, Any]) -> None:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
    """
    try:
        with open(SETTINGS_FILE, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except OSError as e:
        logger.error(f"Failed to save settings: {e}")
