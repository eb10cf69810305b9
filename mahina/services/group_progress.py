"""Progress rows for the three phase groups (Hoʻonui, Poepoe, Emi)."""

from __future__ import annotations

from typing import Dict, List, Optional

from ..schemas.lunar import GroupRow, GroupRowDay, MonthData
from .phase_catalog import phase_groups
from .phase_mapper import resolve_phase
from .transitions import TransitionDetector, default_detector
from .util.dates import Moment, calendar_date


def active_lunar_day(
    month_data: MonthData,
    active_date: Moment,
    detector: Optional[TransitionDetector] = None,
) -> int:
    """Primary lunar day of ``active_date``, preferring the month's own entry."""

    detector = detector if detector is not None else default_detector()
    target = calendar_date(active_date, detector.tz)
    for moon_day in month_data.built:
        if moon_day.date == target:
            return moon_day.phase.primary.day
    return resolve_phase(target, detector=detector).primary.day


def build_group_rows(
    month_data: MonthData,
    active_date: Moment,
    detector: Optional[TransitionDetector] = None,
) -> List[GroupRow]:
    """Return one row per phase group with fill state up to the active day.

    Filling follows the lunar cycle, not the Gregorian month: every lunar day
    up to and including the active one is filled, whether or not it has a
    calendar day in ``month_data``.
    """

    active = active_lunar_day(month_data, active_date, detector=detector)

    # later calendar days win when a lunar day repeats within the month
    lunar_to_calendar: Dict[int, int] = {}
    for moon_day in month_data.built:
        lunar_to_calendar[moon_day.phase.primary.day] = moon_day.calendar_day

    rows: List[GroupRow] = []
    for group in phase_groups():
        days = [
            GroupRowDay(
                lunar_day=lunar_day,
                calendar_day=lunar_to_calendar.get(lunar_day),
                is_filled=lunar_day <= active,
            )
            for lunar_day in group.days
        ]
        rows.append(
            GroupRow(
                name=group.name,
                description=group.description,
                english_meaning=group.english_meaning,
                days=days,
                is_active_group=group.contains(active),
            )
        )
    return rows
