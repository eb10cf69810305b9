"""Map lunar day indices and calendar dates onto catalog phases."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..schemas.lunar import MoonPhase, PhaseGroup, PhaseResult
from .lunar_age import phase_index
from .phase_catalog import CYCLE_DAYS, phase_groups, phase_record
from .transitions import TransitionDetector, default_detector
from .util.dates import Moment, calendar_date, local_time

logger = logging.getLogger(__name__)


def clamp_day(day_index: int) -> int:
    return max(1, min(CYCLE_DAYS, day_index))


def group_for_day(day: int, groups: Optional[List[PhaseGroup]] = None) -> PhaseGroup:
    groups = groups if groups is not None else phase_groups()
    for group in groups:
        if group.contains(day):
            return group
    # validate_catalog() guarantees the ranges partition 1..30
    return groups[-1]


def grid_position(day: int, groups: Optional[List[PhaseGroup]] = None) -> int:
    """1-based ordinal of ``day`` when the groups are laid out back to back."""

    groups = groups if groups is not None else phase_groups()
    offset = 0
    for group in groups:
        if group.contains(day):
            return offset + (day - group.first_day) + 1
        offset += len(group.days)
    return day


def moon_phase(day_index: int) -> MoonPhase:
    """Return the phase for a lunar day, clamping the index into 1..30."""

    day = clamp_day(day_index)
    record = phase_record(day)
    groups = phase_groups()
    group = group_for_day(day, groups)
    return MoonPhase(
        day=day,
        name=record.name if record else "Unknown",
        description=record.description if record else "Unknown phase",
        planting=record.planting if record else "No guidance available",
        fishing=record.fishing if record else "No guidance available",
        grid_position=grid_position(day, groups),
        group_name=group.name,
        group_description=group.description,
    )


def resolve_phase(moment: Moment, detector: Optional[TransitionDetector] = None) -> PhaseResult:
    """Resolve the phase(s) displayed for the calendar day containing ``moment``.

    The time of day is ignored: every moment of a civil day resolves the same
    way. On a transition day ``primary`` is the morning (ending) phase and
    ``secondary`` the evening (beginning) phase, so consecutive days advance
    by at most one phase.
    """

    detector = detector if detector is not None else default_detector()
    midnight = local_time(calendar_date(moment, detector.tz), 0, detector.tz)
    day_ref = phase_index(midnight)

    transition = detector.transition_info(midnight)
    if transition is not None:
        logger.debug(
            "transition_day",
            extra={"date": midnight.date().isoformat(), "ending": transition.ending, "beginning": transition.beginning},
        )
        return PhaseResult(
            primary=moon_phase(transition.ending),
            secondary=moon_phase(transition.beginning),
        )

    return PhaseResult(primary=moon_phase(day_ref))
