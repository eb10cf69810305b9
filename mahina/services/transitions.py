"""Transition-day detection.

Rounding the continuous lunar age to a night index can give two consecutive
calendar days the same index near a phase boundary. Instead of repeating a
phase, one day per calendar month is marked as a transition day that shows
both the phase ending that morning and the phase beginning that evening.

Two rules qualify a candidate day, new-moon rule first:

* new moon: the unwrapped index at local midnight rounds to exactly 0, so
  the day sits at the very start of a cycle (Muku ending, Hilo beginning);
* morning/evening: the wrapped index differs between 06:00 and 18:00 and the
  evening phase is Hilo, Akua or Muku and directly follows the morning one.

Only the first qualifying day of the month reports a transition. The new-moon
rule is scanned across the whole month before the morning/evening rule is
considered at all. The first day per month is memoized in a lock-guarded
cache; entries are pure functions of (year, month) and never invalidated.
"""

from __future__ import annotations

import calendar
import logging
import threading
from datetime import date as date_cls
from typing import Callable, Dict, NamedTuple, Optional, Tuple
from zoneinfo import ZoneInfo

from ..config import civil_timezone
from .lunar_age import phase_index, raw_phase_index
from .phase_catalog import CYCLE_DAYS, SIGNIFICANT_PHASES
from .util.dates import Moment, calendar_date, local_time

logger = logging.getLogger(__name__)

NO_TRANSITION = 0
MORNING_HOUR = 6
EVENING_HOUR = 18


class Transition(NamedTuple):
    ending: int  # morning phase, shown as primary
    beginning: int  # evening phase, shown as secondary


class TransitionCache:
    """First transition day per (year, month); 0 records "none this month"."""

    def __init__(self) -> None:
        self._days: Dict[Tuple[int, int], int] = {}
        self._lock = threading.Lock()

    def get(self, year: int, month: int) -> Optional[int]:
        with self._lock:
            return self._days.get((year, month))

    def set(self, year: int, month: int, day: int) -> None:
        with self._lock:
            self._days[(year, month)] = day

    def get_or_compute(self, year: int, month: int, compute: Callable[[], int]) -> int:
        """Return the cached day, computing it outside the lock on a miss.

        Concurrent misses may both compute; the first stored value wins and
        every caller sees the same day.
        """

        cached = self.get(year, month)
        if cached is not None:
            return cached
        day = compute()
        with self._lock:
            return self._days.setdefault((year, month), day)

    def clear(self) -> None:
        with self._lock:
            self._days.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._days)

    def __contains__(self, key: Tuple[int, int]) -> bool:
        with self._lock:
            return key in self._days


class TransitionDetector:
    def __init__(
        self,
        cache: Optional[TransitionCache] = None,
        tz: Optional[ZoneInfo] = None,
    ) -> None:
        self.cache = cache if cache is not None else TransitionCache()
        self.tz = tz

    # --- candidate rules ---

    def new_moon_transition(self, day: date_cls) -> Optional[Transition]:
        try:
            raw = raw_phase_index(local_time(day, 0, self.tz))
        except (ValueError, OverflowError):
            return None
        if raw == 0:
            return Transition(ending=CYCLE_DAYS, beginning=1)
        return None

    def boundary_transition(self, day: date_cls) -> Optional[Transition]:
        try:
            morning_phase = phase_index(local_time(day, MORNING_HOUR, self.tz))
            evening_phase = phase_index(local_time(day, EVENING_HOUR, self.tz))
        except (ValueError, OverflowError):
            return None
        if evening_phase not in SIGNIFICANT_PHASES:
            return None
        # A morning reading of 29 can wrap straight to Hilo by evening; only a
        # single-step change is a transition.
        if evening_phase != morning_phase % CYCLE_DAYS + 1:
            return None
        return Transition(ending=morning_phase, beginning=evening_phase)

    def transition_for_candidate(self, day: date_cls) -> Optional[Transition]:
        """Apply both rules to one day, ignoring the once-per-month policy."""

        return self.new_moon_transition(day) or self.boundary_transition(day)

    # --- month scans ---

    def _scan(self, year: int, month: int, rule: Callable[[date_cls], Optional[Transition]]) -> Optional[int]:
        days = calendar.monthrange(year, month)[1]
        for day_number in range(1, days + 1):
            if rule(date_cls(year, month, day_number)) is not None:
                return day_number
        return None

    def scan_for_new_moon_transition(self, year: int, month: int) -> Optional[int]:
        return self._scan(year, month, self.new_moon_transition)

    def scan_for_boundary_transition(self, year: int, month: int) -> Optional[int]:
        return self._scan(year, month, self.boundary_transition)

    def _find_first_transition_day(self, year: int, month: int) -> int:
        day = self.scan_for_new_moon_transition(year, month)
        if day is None:
            day = self.scan_for_boundary_transition(year, month)
        logger.debug(
            "transition_month_scanned",
            extra={"year": year, "month": month, "day": day or NO_TRANSITION},
        )
        return day if day is not None else NO_TRANSITION

    def first_transition_day(self, year: int, month: int) -> int:
        """Day of month reporting the transition, or 0 when none qualifies."""

        return self.cache.get_or_compute(
            year, month, lambda: self._find_first_transition_day(year, month)
        )

    # --- per-date query ---

    def transition_info(self, moment: Moment) -> Optional[Transition]:
        day = calendar_date(moment, self.tz)
        try:
            first = self.first_transition_day(day.year, day.month)
        except (ValueError, OverflowError):
            logger.debug("transition_scan_failed", extra={"date": day.isoformat()}, exc_info=True)
            return None
        if day.day != first:
            return None
        return self.transition_for_candidate(day)


_DEFAULT: Optional[TransitionDetector] = None
_DEFAULT_LOCK = threading.Lock()


def default_detector() -> TransitionDetector:
    """Process-wide detector bound to the configured civil timezone."""

    global _DEFAULT
    with _DEFAULT_LOCK:
        if _DEFAULT is None:
            _DEFAULT = TransitionDetector(tz=civil_timezone())
        return _DEFAULT


def reset_default_detector() -> None:
    """Drop the shared detector so the next call re-reads configuration."""

    global _DEFAULT
    with _DEFAULT_LOCK:
        _DEFAULT = None
