"""Volume scale conversions for Pioneer receivers."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
import math

from .const import (
    VOLUME_MAX,
    VOLUME_MAX_DB,
    VOLUME_MAX_LEVEL,
    VOLUME_MIN,
    VOLUME_MIN_DB,
    VOLUME_MIN_LEVEL,
)

# Raw 0 is below the lowest audible step; the receiver shows "---.-dB"
MUTE_FLOOR_DB = float("-inf")
MUTE_FLOOR_DISPLAY = "---.- dB"

DB_PER_LEVEL = (VOLUME_MAX_DB - VOLUME_MIN_DB) / (VOLUME_MAX_LEVEL - VOLUME_MIN_LEVEL)


def volume_to_db(raw: int) -> float:
    """Convert a raw volume (1-185) to dB (-80.0 to +12.0).

    Values above 185 are clamped to +12.0 dB.
    """
    if raw <= VOLUME_MIN:
        return MUTE_FLOOR_DB
    raw = min(raw, VOLUME_MAX_LEVEL)
    return VOLUME_MIN_DB + (raw - VOLUME_MIN_LEVEL) * DB_PER_LEVEL


def format_volume(db: float) -> str:
    """Format a dB value the way the receiver displays it, e.g. "+3.5 dB"."""
    if math.isinf(db) and db < 0:
        return MUTE_FLOOR_DISPLAY
    rounded = Decimal(repr(db)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    if rounded == 0:
        return "0.0 dB"
    if rounded > 0:
        return f"+{rounded} dB"
    return f"{rounded} dB"


def raw_to_level(raw: int) -> float:
    """Convert a raw volume to a 0..1 level."""
    return max(0.0, min(1.0, raw / VOLUME_MAX))


def level_to_raw(level: float) -> int:
    """Convert a 0..1 level to the nearest raw volume."""
    return max(VOLUME_MIN, min(VOLUME_MAX, round(level * VOLUME_MAX)))
