"""Month and weekday labels.

Weekdays are indexed Sunday = 0 to match the month grid; months 1..12.
"""

from __future__ import annotations

import calendar

WEEKDAY = {
    "en": [calendar.day_name[(i - 1) % 7] for i in range(7)],
    "haw": [
        "Lāpule",
        "Pōʻakahi",
        "Pōʻalua",
        "Pōʻakolu",
        "Pōʻahā",
        "Pōʻalima",
        "Pōʻaono",
    ],
}

MONTH = {
    "en": [calendar.month_name[i] for i in range(1, 13)],
    "haw": [
        "Ianuali",
        "Pepeluali",
        "Malaki",
        "ʻApelila",
        "Mei",
        "Iune",
        "Iulai",
        "ʻAukake",
        "Kepakemapa",
        "ʻOkakopa",
        "Nowemapa",
        "Kekemapa",
    ],
}
