import logging

import pytest

from course_scheduler.engine.metrics import calculate_schedule_metrics
from course_scheduler.engine.ranking import RANKING_KEYS, attach_metrics, rank_schedules, ranking_key
from course_scheduler.models.schedule import GeneratedSchedule
from course_scheduler.schemas.generation import Preference

from helpers import candidate, slot


def with_gap(minutes, index):
    """Monday 09:00-10:00 then a second class after the given gap."""
    start = 600 + minutes
    return candidate(slot("Mon", 540, 600), slot("Mon", start, start + 60), index=index)


def gaps(ranked):
    return [g.metrics.total_gap_minutes for g in ranked]


def test_short_breaks_orders_by_total_gap():
    ranked = rank_schedules([with_gap(30, 0), with_gap(90, 1), with_gap(60, 2)], Preference.SHORT_BREAKS)
    assert gaps(ranked) == [30, 60, 90]
    assert all(isinstance(g, GeneratedSchedule) for g in ranked)


def test_long_breaks_prefers_more_long_breaks():
    ranked = rank_schedules([with_gap(30, 0), with_gap(90, 1), with_gap(60, 2)], "longBreaks")
    assert gaps(ranked) == [90, 60, 30]


def test_ties_keep_discovery_order():
    a = with_gap(15, 2)
    b = with_gap(15, 0)
    c = with_gap(15, 1)
    ranked = rank_schedules([a, b, c])
    assert [g.discovery_index for g in ranked] == [0, 1, 2]


def test_ties_with_equal_discovery_index_keep_input_order():
    a = with_gap(15, 0)
    b = with_gap(15, 0)
    ranked = rank_schedules([a, b])
    assert ranked[0].schedule is a
    assert ranked[1].schedule is b


def test_start_late_and_end_early():
    early = candidate(slot("Mon", "08:30", "09:30"), index=0)
    late = candidate(slot("Mon", "11:00", "15:00"), index=1)
    mid = candidate(slot("Mon", "10:00", "12:00"), index=2)

    assert [g.discovery_index for g in rank_schedules([early, late, mid], "startLate")] == [1, 2, 0]
    assert [g.discovery_index for g in rank_schedules([early, late, mid], "endEarly")] == [0, 2, 1]


def test_consistent_start():
    steady = candidate(slot("Mon", "09:00", "10:00"), slot("Wed", "09:00", "10:00"), index=0)
    ragged = candidate(slot("Mon", "09:00", "10:00"), slot("Wed", "13:00", "14:00"), index=1)
    assert [g.discovery_index for g in rank_schedules([ragged, steady], "consistentStart")] == [0, 1]


def test_days_off_then_gaps():
    three_days = candidate(slot("Mon", "09:00", "10:00"), slot("Tue", "09:00", "10:00"), slot("Wed", "09:00", "10:00"), index=0)
    two_days_gappy = candidate(slot("Mon", "09:00", "10:00"), slot("Mon", "13:00", "14:00"), slot("Tue", "09:00", "10:00"), index=1)
    two_days_tight = candidate(slot("Mon", "09:00", "10:00"), slot("Mon", "10:00", "11:00"), slot("Tue", "09:00", "10:00"), index=2)

    ranked = rank_schedules([three_days, two_days_gappy, two_days_tight], Preference.DAYS_OFF)
    assert [g.discovery_index for g in ranked] == [2, 1, 0]


def test_every_preference_has_a_ranking_key():
    assert set(RANKING_KEYS) == set(Preference)


def test_unknown_preference_falls_back_to_short_breaks(caplog):
    candidates = [with_gap(90, 0), with_gap(30, 1)]
    with caplog.at_level(logging.WARNING, logger="course_scheduler.schemas"):
        ranked = rank_schedules(candidates, "mostSleep")
    assert gaps(ranked) == [30, 90]
    assert any("mostSleep" in r.getMessage() for r in caplog.records)

    assert ranking_key(None) is RANKING_KEYS[Preference.SHORT_BREAKS]
    assert ranking_key("SHORT_BREAKS") is RANKING_KEYS[Preference.SHORT_BREAKS]


@pytest.mark.parametrize("limit,expected", [(None, 3), (2, 2), (0, 0), (10, 3)])
def test_max_results_truncates_after_sorting(limit, expected):
    ranked = rank_schedules([with_gap(30, 0), with_gap(90, 1), with_gap(60, 2)], max_results=limit)
    assert len(ranked) == expected
    assert gaps(ranked) == [30, 60, 90][:expected]


def test_attach_metrics_keeps_existing():
    c = with_gap(30, 0)
    scored = GeneratedSchedule(c, calculate_schedule_metrics(c))
    out = attach_metrics([scored, with_gap(60, 1)])
    assert out[0] is scored
    assert out[1].metrics.total_gap_minutes == 60


def test_consistent_start_uses_variance_not_range():
    # first starts 09:00 x4 and 10:00: range 60, variance 576
    mostly_steady = candidate(
        slot("Mon", "09:00", "10:00"),
        slot("Tue", "09:00", "10:00"),
        slot("Wed", "09:00", "10:00"),
        slot("Thu", "09:00", "10:00"),
        slot("Fri", "10:00", "11:00"),
        index=0,
    )
    # first starts 09:00 and 09:50: range 50, variance 625
    two_days = candidate(slot("Mon", "09:00", "10:00"), slot("Tue", "09:50", "10:50"), index=1)

    ranked = rank_schedules([two_days, mostly_steady], Preference.CONSISTENT_START)
    assert [g.discovery_index for g in ranked] == [0, 1]
    assert ranked[0].metrics.start_spread_minutes > ranked[1].metrics.start_spread_minutes
    assert ranked[0].metrics.start_variance == pytest.approx(576.0)
    assert ranked[1].metrics.start_variance == pytest.approx(625.0)


def test_negative_max_results_is_rejected():
    with pytest.raises(ValueError):
        rank_schedules([with_gap(30, 0), with_gap(60, 1)], max_results=-1)
