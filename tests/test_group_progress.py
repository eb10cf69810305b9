from datetime import date

from mahina.services.group_progress import active_lunar_day, build_group_rows
from mahina.services.month_grid import build_month_data
from mahina.services.transitions import TransitionDetector


def _filled(rows):
    return [sum(1 for day in row.days if day.is_filled) for row in rows]


def test_rows_cover_the_cycle_in_order():
    detector = TransitionDetector()
    data = build_month_data(date(2025, 3, 1), include_overlap=False, detector=detector)
    rows = build_group_rows(data, date(2025, 3, 12), detector=detector)
    assert [row.name for row in rows] == ["Hoʻonui", "Poepoe", "Emi"]
    assert [len(row.days) for row in rows] == [10, 10, 10]
    assert [day.lunar_day for row in rows for day in row.days] == list(range(1, 31))
    assert rows[1].english_meaning == "round"


def test_fill_and_active_group_mid_month():
    detector = TransitionDetector()
    data = build_month_data(date(2025, 3, 1), include_overlap=False, detector=detector)
    rows = build_group_rows(data, date(2025, 3, 12), detector=detector)
    assert _filled(rows) == [10, 3, 0]
    assert [row.is_active_group for row in rows] == [False, True, False]


def test_transition_day_fills_the_whole_cycle():
    detector = TransitionDetector()
    data = build_month_data(date(2025, 2, 1), include_overlap=False, detector=detector)
    rows = build_group_rows(data, date(2025, 2, 27), detector=detector)
    assert _filled(rows) == [10, 10, 10]
    assert [row.is_active_group for row in rows] == [False, False, True]


def test_later_calendar_day_wins_for_repeated_lunar_day():
    detector = TransitionDetector()
    data = build_month_data(date(2025, 3, 1), include_overlap=False, detector=detector)
    rows = build_group_rows(data, date(2025, 3, 12), detector=detector)
    hoonui = rows[0].days
    # lunar day 2 falls on March 1 and again on March 31
    assert hoonui[0].calendar_day == 30
    assert hoonui[1].calendar_day == 31
    assert hoonui[2].calendar_day == 2
    assert rows[2].days[-1].calendar_day == 29


def test_missing_lunar_days_have_no_calendar_day():
    detector = TransitionDetector()
    data = build_month_data(date(2025, 2, 1), include_overlap=False, detector=detector)
    rows = build_group_rows(data, date(2025, 2, 1), detector=detector)
    by_lunar_day = {day.lunar_day: day for row in rows for day in row.days}
    # February 2025 jumps from Kāloakūkahi straight to Kāne
    assert by_lunar_day[25].calendar_day is None
    assert by_lunar_day[24].calendar_day == 22
    assert by_lunar_day[26].calendar_day == 23


def test_active_date_outside_the_month():
    detector = TransitionDetector()
    data = build_month_data(date(2025, 3, 1), include_overlap=False, detector=detector)
    assert active_lunar_day(data, date(2025, 4, 5), detector=detector) == 7
    rows = build_group_rows(data, date(2025, 4, 5), detector=detector)
    assert _filled(rows) == [7, 0, 0]
    assert rows[0].is_active_group


def test_legacy_ranges(monkeypatch):
    monkeypatch.setenv("MAHINA_GROUP_RANGES", "legacy")
    detector = TransitionDetector()
    data = build_month_data(date(2025, 3, 1), include_overlap=False, detector=detector)
    rows = build_group_rows(data, date(2025, 3, 12), detector=detector)
    assert [len(row.days) for row in rows] == [10, 6, 14]
    assert _filled(rows) == [10, 3, 0]
    assert rows[1].is_active_group
