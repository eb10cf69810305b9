"""Plain-text share content for a resolved day."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as date_cls

from ..i18n.resolve import hawaiian_month
from ..schemas.lunar import PhaseResult


@dataclass(frozen=True)
class ShareContent:
    subject: str
    text: str


def phase_title(result: PhaseResult) -> str:
    if result.secondary is not None:
        return f"{result.primary.name}→{result.secondary.name}"
    return result.primary.name


def hawaiian_date_string(day: date_cls) -> str:
    return f"{hawaiian_month(day)} {day.day}, {day.year}"


def share_content(result: PhaseResult, day: date_cls) -> ShareContent:
    headline = f"🌙 {phase_title(result)}: {hawaiian_date_string(day)}"
    text = "\n".join(
        [
            headline,
            "",
            f"🍃 {result.primary.planting}",
            "",
            f"🐟 {result.primary.fishing}",
        ]
    )
    return ShareContent(subject=headline, text=text)
