"""Runtime configuration for the lunar engine.

Settings are read from the environment (optionally seeded from a ``.env``
file) every time an accessor is called, so callers and tests can change them
without reloading modules.
"""

from __future__ import annotations

import logging
import os
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_GROUP_RANGES = "anahulu"
SUPPORTED_GROUP_RANGES = {"anahulu", "legacy"}


def group_ranges_variant() -> str:
    value = os.getenv("MAHINA_GROUP_RANGES", DEFAULT_GROUP_RANGES).strip().lower()
    if value not in SUPPORTED_GROUP_RANGES:
        logger.warning("group_ranges_unknown_variant", extra={"value": value})
        return DEFAULT_GROUP_RANGES
    return value


def civil_timezone() -> Optional[ZoneInfo]:
    """Return the configured civil timezone, or ``None`` for naive wall time."""

    name = os.getenv("MAHINA_TIMEZONE", "").strip()
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("timezone_unknown_falling_back_to_naive", extra={"tz": name})
        return None


def default_lang() -> str:
    return os.getenv("MAHINA_LANG", "en")
