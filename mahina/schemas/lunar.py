"""Lunar calendar models shared by the engine and its consumers."""

from __future__ import annotations

from datetime import date as date_cls
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class PhaseGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str  # hoonui | poepoe | emi
    name: str
    description: str
    english_meaning: str
    first_day: int
    last_day: int

    def contains(self, day: int) -> bool:
        return self.first_day <= day <= self.last_day

    @property
    def days(self) -> range:
        return range(self.first_day, self.last_day + 1)


class MoonPhase(BaseModel):
    """A catalog entry enriched with its group and layout position."""

    model_config = ConfigDict(frozen=True)

    day: int  # 1..30
    name: str
    description: str
    planting: str
    fishing: str
    grid_position: int
    group_name: str
    group_description: str


class PhaseResult(BaseModel):
    """Phase(s) shown for one calendar date.

    ``secondary`` is only set on a transition day, where ``primary`` is the
    phase ending that morning and ``secondary`` the phase beginning that
    evening.
    """

    model_config = ConfigDict(frozen=True)

    primary: MoonPhase
    secondary: Optional[MoonPhase] = None

    @model_validator(mode="after")
    def _secondary_follows_primary(self) -> "PhaseResult":
        if self.secondary is not None and self.secondary.day != self.primary.day % 30 + 1:
            raise ValueError(
                f"secondary phase {self.secondary.day} does not follow primary {self.primary.day}"
            )
        return self

    @property
    def is_transition_day(self) -> bool:
        return self.secondary is not None


class MoonDay(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: date_cls
    calendar_day: int  # 1..31
    is_overlap: bool
    phase: PhaseResult

    @property
    def day(self) -> int:
        """Primary lunar day index (1..30)."""
        return self.phase.primary.day


class MonthData(BaseModel):
    model_config = ConfigDict(frozen=True)

    month_number: int  # 1..12
    month_name: str
    year: int
    month_days: int
    month_start_weekday_index: int  # 0 = Sunday
    calendar: List[MoonDay]  # padded grid, 35 or 42 cells when overlap is included
    built: List[MoonDay]  # exactly month_days entries


class GroupRowDay(BaseModel):
    model_config = ConfigDict(frozen=True)

    lunar_day: int
    calendar_day: Optional[int] = None
    is_filled: bool


class GroupRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    english_meaning: str
    days: List[GroupRowDay]
    is_active_group: bool
