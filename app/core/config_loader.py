import json
import os
import logging
from pathlib import Path
from typing import Dict, Any, List, Optional, Tuple

logger = logging.getLogger("app")

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_PATH = "data/restaurant_config.json"

DEFAULT_MIN_HOURS = 1
DEFAULT_MAX_HOURS = 5

def _resolve(path: str) -> Path:
    candidate = Path(path)
    if candidate.is_absolute() or candidate.exists():
        return candidate
    return PROJECT_ROOT / candidate

def load_restaurant_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Loads restaurant configuration (slots, duration limits) from JSON file.
    Raises FileNotFoundError if config is missing, ValueError if it is not valid JSON.
    """
    config_path = _resolve(path or CONFIG_PATH)

    if not os.path.exists(config_path):
        logger.critical(f"❌ Config file '{config_path}' not found! The application cannot start.")
        raise FileNotFoundError(f"Configuration file not found at {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
            logger.info(f"✅ Config loaded for: {config.get('restaurant_name', 'Unknown')}")
            return config
    except json.JSONDecodeError as e:
        logger.critical(f"❌ Failed to parse JSON config: {e}")
        raise ValueError(f"Invalid JSON in config file: {e}")

def get_slot_labels(config: Dict[str, Any]) -> List[str]:
    """Bookable start times, in display order."""
    slots = config.get("slots") or []
    if not slots:
        raise ValueError("Restaurant config defines no bookable slots")
    return list(slots)

def get_duration_limits(config: Dict[str, Any]) -> Tuple[int, int]:
    """
    Returns: (min_hours, max_hours), both inclusive.
    """
    durations = config.get("durations", {})
    return (
        int(durations.get("min_hours", DEFAULT_MIN_HOURS)),
        int(durations.get("max_hours", DEFAULT_MAX_HOURS)),
    )

def get_min_guests(config: Dict[str, Any]) -> int:
    return int(config.get("min_guests", 1))
