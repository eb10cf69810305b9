from .lunar import (
    PhaseGroup,
    MoonPhase,
    PhaseResult,
    MoonDay,
    MonthData,
    GroupRowDay,
    GroupRow,
)
