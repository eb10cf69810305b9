"""Static table of the 30 Hawaiian moon phases and their three anahulu.

Each record carries the traditional name of the night, a short description
and planting/fishing guidance. The table is validated once at import so an
incomplete catalog fails loudly instead of surfacing placeholder text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..config import group_ranges_variant
from ..errors import CatalogIncompleteError
from ..schemas.lunar import PhaseGroup

CYCLE_DAYS = 30


@dataclass(frozen=True)
class PhaseRecord:
    day: int
    name: str
    description: str
    planting: str
    fishing: str


PHASES: Tuple[PhaseRecord, ...] = (
    PhaseRecord(
        1, "Hilo",
        "Slender new-moon, sliver at sunset",
        "Plant underground crops that 'hide' in the soil",
        "Reef fish hide, deep-sea fishing is good",
    ),
    PhaseRecord(
        2, "Hoaka",
        "Second night, thin crescent 'spirit' night",
        "Limit planting, observe conditions",
        "Fish are frightened away, poor fishing",
    ),
    PhaseRecord(
        3, "Kūkahi",
        "First night of Kū, moon growing",
        "Good time to plant ʻuala and kalo",
        "Good fishing conditions beginning to change",
    ),
    PhaseRecord(
        4, "Kūlua",
        "Second night of Kū, continued growth",
        "Continue planting upright strong-growing crops",
        "Good fishing period",
    ),
    PhaseRecord(
        5, "Kūkolu",
        "Third night of Kū, steady growth continues",
        "Plant crops you want to grow tall and strong",
        "Good fishing period",
    ),
    PhaseRecord(
        6, "Kūpau",
        "Fourth night of Kū, end of Kū phase",
        "Finish planting of taro and other upright crops",
        "Good fishing period",
    ),
    PhaseRecord(
        7, "ʻOlekūkahi",
        "First ʻOle night, considered unproductive",
        "Avoid planting, focus on weeding and maintenance",
        "Fishing poor due to high tides and rough ocean",
    ),
    PhaseRecord(
        8, "ʻOlekūlua",
        "Second ʻOle night, unproductive period continues",
        "Avoid planting, continue garden upkeep only",
        "Fishing remains poor, rough conditions",
    ),
    PhaseRecord(
        9, "ʻOlekūkolu",
        "Third ʻOle night, rough conditions persist",
        "Planting discouraged, maintain and tidy fields",
        "Fishing poor, seas unsettled",
    ),
    PhaseRecord(
        10, "ʻOlepau",
        "Fourth ʻOle night, end of rough period",
        "Little planting, finish maintenance work",
        "Fishing still poor, conditions moderating",
    ),
    PhaseRecord(
        11, "Huna",
        "Hidden-horns moon, small but rounding",
        "Good for root vegetables and gourds that 'hide'",
        "Good fishing as fish hide in their holes",
    ),
    PhaseRecord(
        12, "Mōhalu",
        "Sacred night to Kāne, moon nearly full",
        "Good for planting vegetables to mirror the round moon",
        "Sea foods traditionally kapu, avoid fishing",
    ),
    PhaseRecord(
        13, "Hua",
        "First of the four full moons, 'egg fruit seed'",
        "Very good for planting fruiting and seed crops",
        "Good-luck night for fishing",
    ),
    PhaseRecord(
        14, "Akua",
        "Second full moon, sacred to the gods",
        "Favorable for planting with offerings to the gods",
        "Good night for fishing",
    ),
    PhaseRecord(
        15, "Hoku",
        "Fullest of the full moons, peak brightness",
        "Best for crops planted in rows",
        "Good fishing under bright full moon",
    ),
    PhaseRecord(
        16, "Māhealani",
        "Last of the four full moons",
        "Good for all kinds of planting and work",
        "Good fishing, people take full advantage",
    ),
    PhaseRecord(
        17, "Kulu",
        "Moon following the full-moon series",
        "Time to harvest and offer first fruits",
        "Fishing considered good",
    ),
    PhaseRecord(
        18, "Lāʻaukūkahi",
        "First Lāʻau night, associated with trees and plants",
        "Focus on trees and medicinal plants, avoid tender fruit crops",
        "Fishing acceptable, attention on gathering plant medicines",
    ),
    PhaseRecord(
        19, "Lāʻaukūlua",
        "Second Lāʻau night, tree focus continues",
        "Continue work with trees and herbs, avoid woody fruit set",
        "Fishing moderate, not the primary focus",
    ),
    PhaseRecord(
        20, "Lāʻaupau",
        "Third Lāʻau night, completion of tree phase",
        "Complete work with trees and medicinal plants",
        "Fishing moderate, period centered on plants and healing",
    ),
    PhaseRecord(
        21, "ʻOlekūkahi",
        "Unproductive ʻOle night returns",
        "Avoid planting, good for weeding and cleaning fields",
        "Fishing generally avoided, focus on prayers",
    ),
    PhaseRecord(
        22, "ʻOlekūlua",
        "Second unproductive ʻOle night",
        "Continue field maintenance rather than planting",
        "Fishing avoided, little activity at sea",
    ),
    PhaseRecord(
        23, "ʻOlepau",
        "Final ʻOle night, dedicated to Kāloa and Kanaloa",
        "Avoid planting, offer prayers instead",
        "Fishing generally avoided, day of worship",
    ),
    PhaseRecord(
        24, "Kāloakūkahi",
        "First Kāloa night, beginning of Kāloa series",
        "Plant long-stemmed crops and vine plants",
        "Good fishing, especially for shellfish",
    ),
    PhaseRecord(
        25, "Kāloakūlua",
        "Second Kāloa night, vine planting continues",
        "Continue planting vines and long-stemmed plants",
        "Good fishing, especially shellfish",
    ),
    PhaseRecord(
        26, "Kāloapau",
        "Third Kāloa night, Kāloa phase completes",
        "Finish planting vines and long-stemmed crops",
        "Good fishing, shellfish and reef foods favored",
    ),
    PhaseRecord(
        27, "Kāne",
        "Sacred night of worship to Kāne and Lono",
        "Little or no planting, focus on kapu observances",
        "Fishing generally set aside for prayer",
    ),
    PhaseRecord(
        28, "Lono",
        "Second worship night, dedicated to Lono and rain",
        "No major planting, prayers for rain and fertility",
        "Fishing typically limited, focus on ceremony",
    ),
    PhaseRecord(
        29, "Mauli",
        "Moon rises with daylight, 'shadow of life'",
        "Light planting or garden preparation",
        "Fishing encouraged, lower tides favor activity",
    ),
    PhaseRecord(
        30, "Muku",
        "Dark new-moon night, final phase",
        "Rest from planting and prepare for new cycle",
        "Fishing considered good on this dark moon",
    ),
)

_PHASES_BY_DAY: Dict[int, PhaseRecord] = {record.day: record for record in PHASES}

# key -> (name, description, english meaning)
GROUP_METADATA: Dict[str, Tuple[str, str, str]] = {
    "hoonui": (
        "Hoʻonui",
        "Growing moon phases, a time of increase and expansion",
        "to grow bigger",
    ),
    "poepoe": (
        "Poepoe",
        "Full moon phases, a time of abundance and peak energy",
        "round",
    ),
    "emi": (
        "Emi",
        "Waning moon phases, a time of release and preparation for renewal",
        "to decrease",
    ),
}

GROUP_ORDER = ("hoonui", "poepoe", "emi")

# Two tables of anahulu boundaries have been in circulation. "anahulu" is the
# even ten-night split; "legacy" keeps the four full moons together in Poepoe.
GROUP_RANGE_VARIANTS: Dict[str, Dict[str, Tuple[int, int]]] = {
    "anahulu": {"hoonui": (1, 10), "poepoe": (11, 20), "emi": (21, 30)},
    "legacy": {"hoonui": (1, 10), "poepoe": (11, 16), "emi": (17, 30)},
}

# Hilo (new), Akua (full) and Muku (dark). Hoku is left out so the full moon
# is not flagged on two consecutive nights.
SIGNIFICANT_PHASES = frozenset({1, 14, 30})


def phase_record(day: int) -> Optional[PhaseRecord]:
    return _PHASES_BY_DAY.get(day)


def phase_groups(variant: Optional[str] = None) -> List[PhaseGroup]:
    """Return the three phase groups, in cycle order, for a range variant."""

    ranges = GROUP_RANGE_VARIANTS[variant or group_ranges_variant()]
    groups: List[PhaseGroup] = []
    for key in GROUP_ORDER:
        name, description, english = GROUP_METADATA[key]
        first, last = ranges[key]
        groups.append(
            PhaseGroup(
                key=key,
                name=name,
                description=description,
                english_meaning=english,
                first_day=first,
                last_day=last,
            )
        )
    return groups


def validate_catalog() -> None:
    """Raise ``CatalogIncompleteError`` unless every table covers days 1..30."""

    expected = set(range(1, CYCLE_DAYS + 1))
    days = [record.day for record in PHASES]
    missing = tuple(sorted(expected - set(days)))
    if missing or len(days) != CYCLE_DAYS:
        raise CatalogIncompleteError(
            f"phase catalog must list each lunar day exactly once (missing: {missing})",
            missing=missing,
        )

    for variant, ranges in GROUP_RANGE_VARIANTS.items():
        covered: List[int] = []
        for key in GROUP_ORDER:
            first, last = ranges[key]
            covered.extend(range(first, last + 1))
        if covered != list(range(1, CYCLE_DAYS + 1)):
            gaps = tuple(sorted(expected - set(covered)))
            raise CatalogIncompleteError(
                f"group ranges '{variant}' do not partition lunar days 1..{CYCLE_DAYS}",
                missing=gaps,
            )


validate_catalog()
