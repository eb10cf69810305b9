import pytest

from mahina.errors import CatalogIncompleteError, MahinaError
from mahina.services import phase_catalog
from mahina.services.phase_catalog import (
    CYCLE_DAYS,
    PHASES,
    SIGNIFICANT_PHASES,
    phase_groups,
    phase_record,
    validate_catalog,
)


def test_catalog_lists_each_night_once_in_order():
    assert [record.day for record in PHASES] == list(range(1, CYCLE_DAYS + 1))
    for record in PHASES:
        assert record.name
        assert record.description
        assert record.planting
        assert record.fishing


@pytest.mark.parametrize(
    "day, name",
    [(1, "Hilo"), (2, "Hoaka"), (14, "Akua"), (15, "Hoku"), (16, "Māhealani"), (27, "Kāne"), (30, "Muku")],
)
def test_traditional_names(day, name):
    assert phase_record(day).name == name


def test_phase_record_outside_cycle_is_none():
    assert phase_record(0) is None
    assert phase_record(31) is None


def test_significant_phases():
    assert SIGNIFICANT_PHASES == {1, 14, 30}


def test_default_groups_are_even_anahulu():
    groups = phase_groups()
    assert [g.name for g in groups] == ["Hoʻonui", "Poepoe", "Emi"]
    assert [(g.first_day, g.last_day) for g in groups] == [(1, 10), (11, 20), (21, 30)]
    assert [g.english_meaning for g in groups] == ["to grow bigger", "round", "to decrease"]


def test_legacy_groups_from_environment(monkeypatch):
    monkeypatch.setenv("MAHINA_GROUP_RANGES", "legacy")
    groups = phase_groups()
    assert [(g.first_day, g.last_day) for g in groups] == [(1, 10), (11, 16), (17, 30)]
    assert [len(g.days) for g in groups] == [10, 6, 14]


def test_unknown_variant_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("MAHINA_GROUP_RANGES", "weekly")
    assert [(g.first_day, g.last_day) for g in phase_groups()] == [(1, 10), (11, 20), (21, 30)]


def test_explicit_variant_overrides_environment(monkeypatch):
    monkeypatch.setenv("MAHINA_GROUP_RANGES", "legacy")
    assert phase_groups("anahulu")[1].last_day == 20


def test_group_contains():
    hoonui, poepoe, emi = phase_groups("legacy")
    assert hoonui.contains(1) and hoonui.contains(10)
    assert poepoe.contains(16) and not poepoe.contains(17)
    assert emi.contains(30)


def test_catalog_is_valid():
    validate_catalog()


def test_missing_phase_is_reported(monkeypatch):
    monkeypatch.setattr(phase_catalog, "PHASES", PHASES[:-1])
    with pytest.raises(CatalogIncompleteError) as excinfo:
        validate_catalog()
    assert excinfo.value.missing == (30,)
    assert isinstance(excinfo.value, MahinaError)


def test_gap_in_group_ranges_is_reported(monkeypatch):
    broken = dict(phase_catalog.GROUP_RANGE_VARIANTS)
    broken["legacy"] = {"hoonui": (1, 10), "poepoe": (11, 15), "emi": (17, 30)}
    monkeypatch.setattr(phase_catalog, "GROUP_RANGE_VARIANTS", broken)
    with pytest.raises(CatalogIncompleteError) as excinfo:
        validate_catalog()
    assert excinfo.value.missing == (16,)
