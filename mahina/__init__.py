"""Hawaiian lunar calendar engine.

Resolve a calendar date to its night in the 30-phase Hawaiian moon calendar
and build the month grids and phase-group progress rows a calendar view
renders.
"""

from .errors import CatalogIncompleteError, MahinaError
from .i18n.resolve import (
    hawaiian_month,
    hawaiian_weekday,
    month_label,
    weekday_label,
    weekday_name,
)
from .schemas import (
    GroupRow,
    GroupRowDay,
    MonthData,
    MoonDay,
    MoonPhase,
    PhaseGroup,
    PhaseResult,
)
from .services.group_progress import build_group_rows
from .services.lunar_age import SYNODIC_LENGTH, lunar_age
from .services.month_grid import (
    build_month_data,
    days_in_month,
    month_name,
    start_of_month_index,
)
from .services.phase_catalog import PHASES, PhaseRecord, phase_groups
from .services.phase_mapper import moon_phase, resolve_phase
from .services.share import ShareContent, phase_title, share_content
from .services.transitions import (
    Transition,
    TransitionCache,
    TransitionDetector,
    default_detector,
    reset_default_detector,
)
from .services.util.dates import parse_date

__all__ = [
    "CatalogIncompleteError",
    "MahinaError",
    "GroupRow",
    "GroupRowDay",
    "MonthData",
    "MoonDay",
    "MoonPhase",
    "PhaseGroup",
    "PhaseResult",
    "PhaseRecord",
    "PHASES",
    "SYNODIC_LENGTH",
    "ShareContent",
    "Transition",
    "TransitionCache",
    "TransitionDetector",
    "build_group_rows",
    "build_month_data",
    "days_in_month",
    "default_detector",
    "hawaiian_month",
    "hawaiian_weekday",
    "lunar_age",
    "month_label",
    "month_name",
    "moon_phase",
    "parse_date",
    "phase_title",
    "phase_groups",
    "reset_default_detector",
    "resolve_phase",
    "share_content",
    "start_of_month_index",
    "weekday_label",
    "weekday_name",
]
