"""Resolve calendar labels for a requested language."""

from __future__ import annotations

from datetime import date as date_cls
from typing import Dict, Optional

from ..config import default_lang
from ..services.util.dates import weekday_index
from .labels import MONTH, WEEKDAY

SUPPORTED_LANGS = {"en", "haw"}


def clamp_lang(lang: Optional[str]) -> str:
    if not lang:
        lang = default_lang()
    lang = lang.lower()
    return lang if lang in SUPPORTED_LANGS else "en"


def _pick(table: Dict[str, list], idx: int, lang: str) -> Dict[str, Dict[str, str] | str]:
    aliases = {code: names[idx] for code, names in table.items()}
    return {"display_name": aliases[lang], "aliases": aliases}


def month_label(month: int, lang: Optional[str] = None) -> Dict[str, Dict[str, str] | str]:
    return _pick(MONTH, month - 1, clamp_lang(lang))


def weekday_label(weekday: int, lang: Optional[str] = None) -> Dict[str, Dict[str, str] | str]:
    """Label for a Sunday-based weekday index (0 = Sunday)."""
    return _pick(WEEKDAY, weekday % 7, clamp_lang(lang))


def month_name(month: int, lang: Optional[str] = None) -> str:
    return MONTH[clamp_lang(lang)][month - 1]


def weekday_name(weekday: int, lang: Optional[str] = None) -> str:
    return WEEKDAY[clamp_lang(lang)][weekday % 7]


def hawaiian_month(day: date_cls) -> str:
    return MONTH["haw"][day.month - 1]


def hawaiian_weekday(day: date_cls) -> str:
    return WEEKDAY["haw"][weekday_index(day)]
