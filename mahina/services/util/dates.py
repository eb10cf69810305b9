"""Civil calendar helpers shared by the lunar services."""

from __future__ import annotations

from datetime import date as date_cls, datetime, time as time_cls, tzinfo
from typing import Optional, Union

Moment = Union[date_cls, datetime]


def parse_date(value: str) -> date_cls:
    """Parse a ``yyyy-mm-dd`` string. Raises ``ValueError`` when malformed."""

    return datetime.strptime(value.strip(), "%Y-%m-%d").date()


def calendar_date(moment: Moment, tz: Optional[tzinfo] = None) -> date_cls:
    """Return the local calendar date a moment falls on."""

    if isinstance(moment, datetime):
        if tz is not None and moment.tzinfo is not None:
            try:
                moment = moment.astimezone(tz)
            except OverflowError:
                # converted instant falls outside years 1..9999; keep its own day
                return moment.date()
        return moment.date()
    return moment


def local_time(day: date_cls, hour: int = 0, tz: Optional[tzinfo] = None) -> datetime:
    """Wall-clock ``hour:00`` on ``day``; naive when no timezone is configured."""

    return datetime.combine(day, time_cls(hour), tzinfo=tz)


def local_midnight(moment: Moment, tz: Optional[tzinfo] = None) -> datetime:
    if tz is None and isinstance(moment, datetime) and moment.tzinfo is not None:
        # Keep an aware input in its own zone rather than mixing naive and aware.
        return local_time(moment.date(), 0, moment.tzinfo)
    return local_time(calendar_date(moment, tz), 0, tz)


def elapsed_seconds(moment: datetime, reference: datetime) -> float:
    """Seconds from ``reference`` to ``moment``.

    Aware values are compared by UTC offset so DST shifts count as real
    elapsed time; naive values are treated as plain wall-clock readings.
    """

    wall = moment.replace(tzinfo=None) - reference.replace(tzinfo=None)
    if moment.tzinfo is None:
        return wall.total_seconds()
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=moment.tzinfo)
    # no UTC conversion: it overflows near years 1 and 9999
    return (wall - (moment.utcoffset() - reference.utcoffset())).total_seconds()


def weekday_index(day: date_cls) -> int:
    """Zero-based weekday with Sunday = 0."""

    return (day.weekday() + 1) % 7
