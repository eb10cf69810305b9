"""Build per-day lunar data for a Gregorian month and its padded grid."""

from __future__ import annotations

import calendar
import logging
from datetime import date as date_cls, timedelta
from typing import List, Optional

from ..i18n.resolve import month_name as month_label_name
from ..schemas.lunar import MonthData, MoonDay
from .phase_mapper import resolve_phase
from .transitions import TransitionDetector, default_detector
from .util.dates import Moment, calendar_date, weekday_index

logger = logging.getLogger(__name__)

GRID_ROWS_SHORT = 35
GRID_ROWS_LONG = 42


def first_of_month(day: date_cls) -> date_cls:
    return day.replace(day=1)


def add_months(day: date_cls, months: int) -> date_cls:
    """First day of the month ``months`` away. Raises ``ValueError`` past year 1..9999."""

    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    return date_cls(year, month + 1, 1)


def days_in_month(day: date_cls) -> int:
    return calendar.monthrange(day.year, day.month)[1]


def start_of_month_index(day: date_cls) -> int:
    """Weekday of the first of ``day``'s month, Sunday = 0."""

    return weekday_index(first_of_month(day))


def month_name(day: date_cls, lang: Optional[str] = None) -> str:
    return month_label_name(day.month, lang)


def built_month(
    anchor: date_cls,
    overlap: bool = False,
    detector: Optional[TransitionDetector] = None,
) -> List[MoonDay]:
    """One ``MoonDay`` per day of ``anchor``'s month, flagged as overlap if asked."""

    start = first_of_month(anchor)
    days: List[MoonDay] = []
    for offset in range(days_in_month(start)):
        current = start + timedelta(days=offset)
        days.append(
            MoonDay(
                date=current,
                calendar_day=current.day,
                is_overlap=overlap,
                phase=resolve_phase(current, detector=detector),
            )
        )
    return days


def build_month_data(
    anchor: Moment,
    include_overlap: bool = True,
    lang: Optional[str] = None,
    detector: Optional[TransitionDetector] = None,
) -> MonthData:
    """Compute lunar data for the month containing ``anchor``.

    ``built`` always holds exactly the month's days. With ``include_overlap``
    the ``calendar`` list is padded with the tail of the previous month and
    the head of the next one to fill a 35 or 42 cell (5 or 6 week) grid.
    """

    detector = detector if detector is not None else default_detector()
    start = first_of_month(calendar_date(anchor, detector.tz))
    built = built_month(start, overlap=False, detector=detector)
    start_idx = start_of_month_index(start)

    def _month(calendar_days: List[MoonDay]) -> MonthData:
        return MonthData(
            month_number=start.month,
            month_name=month_name(start, lang),
            year=start.year,
            month_days=len(built),
            month_start_weekday_index=start_idx,
            calendar=calendar_days,
            built=built,
        )

    if not include_overlap:
        return _month(built)

    try:
        prev_start = add_months(start, -1)
        next_start = add_months(start, 1)
    except ValueError:
        logger.warning("month_grid_overlap_unavailable", extra={"year": start.year, "month": start.month})
        return _month(built)

    length = GRID_ROWS_SHORT if start_idx + len(built) <= GRID_ROWS_SHORT else GRID_ROWS_LONG

    leading: List[MoonDay] = []
    if start_idx > 0:
        leading = built_month(prev_start, overlap=True, detector=detector)[-start_idx:]

    remaining = max(0, length - len(leading) - len(built))
    trailing = built_month(next_start, overlap=True, detector=detector)[:remaining]

    return _month(leading + built + trailing)
