"""Continuous lunar age and its discrete 1..30 index.

The model uses a fixed synodic month anchored at the new moon of
2024-01-11 (local midnight). It is not an ephemeris: real lunations drift
from this approximation by several hours, which is accepted for a
traditional calendar that counts nights rather than instants.
"""

from __future__ import annotations

import math
from datetime import date as date_cls, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from .phase_catalog import CYCLE_DAYS
from .util.dates import Moment, elapsed_seconds, local_midnight

SYNODIC_LENGTH = 29.530588
REFERENCE_NEW_MOON = date_cls(2024, 1, 11)
SECONDS_PER_DAY = 86400.0


def _as_moment(moment: Moment, tz: Optional[ZoneInfo]) -> datetime:
    if isinstance(moment, datetime):
        if tz is not None and moment.tzinfo is None:
            return moment.replace(tzinfo=tz)
        return moment
    return local_midnight(moment, tz)


def lunar_age(moment: Moment, tz: Optional[ZoneInfo] = None) -> float:
    """Return days since the last new moon, in ``[0, SYNODIC_LENGTH)``.

    A bare ``date`` is read as local midnight in ``tz``; without a zone,
    dates and naive datetimes are plain wall-clock readings.
    """

    instant = _as_moment(moment, tz)
    reference = local_midnight(REFERENCE_NEW_MOON, instant.tzinfo)
    days = elapsed_seconds(instant, reference) / SECONDS_PER_DAY
    age = math.fmod(days, SYNODIC_LENGTH)
    if age < 0:
        age += SYNODIC_LENGTH
    if age >= SYNODIC_LENGTH:
        # -1e-17 + SYNODIC_LENGTH rounds back up to the modulus
        age = 0.0
    return age


def day_in_cycle(moment: Moment, tz: Optional[ZoneInfo] = None) -> float:
    return lunar_age(moment, tz) / SYNODIC_LENGTH * CYCLE_DAYS


def round_half_up(value: float) -> int:
    """Round halves away from zero; ``round()`` would round 0.5 to 0."""

    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def raw_phase_index(moment: Moment, tz: Optional[ZoneInfo] = None) -> int:
    """Rounded position in the cycle, 0..30, without any boundary correction."""

    return round_half_up(day_in_cycle(moment, tz))


def wrap_phase_index(index: int) -> int:
    # Both ends map to Hilo. Values above 30 wrap rather than clamp, which is
    # what the new-moon transition rule compensates for.
    if index <= 0 or index > CYCLE_DAYS:
        return 1
    return index


def phase_index(moment: Moment, tz: Optional[ZoneInfo] = None) -> int:
    return wrap_phase_index(raw_phase_index(moment, tz))
