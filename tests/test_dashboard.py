import math

import pytest

from dashboard import recent, round_half_away, summarize, to_frame
from conftest import make_reading


def test_summarize_empty_log():
    s = summarize([])
    assert s.latest is None
    assert not s.has_data
    assert not s.has_trend
    assert s.series == ()
    assert math.isnan(s.average_nitrogen)
    assert math.isnan(s.average_ph)
    assert math.isnan(s.average_moisture)
    assert all(math.isnan(v) for v in s.rounded_averages().values())


def test_latest_is_first_entry(log):
    assert summarize(log).latest is log[0]


def test_series_is_chronological(log):
    s = summarize(log)
    assert len(s.series) == len(log)
    assert [p.index for p in s.series] == [1, 2, 3]
    assert s.series[0].timestamp == log[-1].timestamp
    assert s.series[-1].timestamp == log[0].timestamp
    assert [p.nitrogen for p in s.series] == [2.0, 3.0, 4.0]
    assert [p.ph for p in s.series] == [r.ph for r in reversed(log)]
    assert [p.moisture for p in s.series] == [r.moisture for r in reversed(log)]
    assert s.has_trend


def test_averages_cover_whole_log(log):
    s = summarize(log)
    assert s.average_nitrogen == pytest.approx(3.0)
    assert s.average_ph == pytest.approx(6.0)
    assert s.average_moisture == pytest.approx(70.0)


def test_average_nitrogen_two_readings():
    s = summarize([make_reading(nitrogen=4.0, day=1), make_reading(nitrogen=2.0, day=0)])
    assert s.average_nitrogen == pytest.approx(3.0)
    assert s.rounded_averages()["nitrogen"] == 3.0


def test_unrounded_mean_is_exposed():
    log = [make_reading(ph=6.0, day=2), make_reading(ph=6.0, day=1), make_reading(ph=6.1, day=0)]
    s = summarize(log)
    assert s.average_ph == pytest.approx(6.0333333)
    assert s.rounded_averages()["ph"] == 6.0


def test_single_reading_series():
    r = make_reading()
    s = summarize([r])
    assert len(s.series) == 1
    assert s.series[0].index == 1
    assert s.series[0].timestamp == r.timestamp
    assert not s.has_trend


def test_summarize_is_idempotent(log):
    assert summarize(log) == summarize(log)


def test_summarize_leaves_log_untouched(log):
    before = list(log)
    summarize(log)
    assert list(log) == before


@pytest.mark.parametrize("value,expected", [
    (2.25, 2.3),
    (2.35, 2.4),
    (-2.25, -2.3),
    (0.05, 0.1),
    (3.0, 3.0),
    (6.04, 6.0),
    (1e30, 1e30),
    (-1e30, -1e30),
    (1.5e300, 1.5e300),
])
def test_round_half_away(value, expected):
    assert round_half_away(value) == expected


def test_recent_limits_to_newest(log):
    assert recent(log, limit=2) == [log[0], log[1]]
    assert recent(log) == list(log)


def test_to_frame_oldest_first(log):
    frame = to_frame(log)
    assert list(frame["index"]) == [1, 2, 3]
    assert list(frame["nitrogen"]) == [2.0, 3.0, 4.0]
    assert frame.iloc[0]["timestamp"] == log[-1].timestamp.isoformat()


def test_to_frame_empty_has_columns():
    frame = to_frame([])
    assert frame.empty
    assert "nitrogen" in frame.columns


def test_huge_averages_still_round():
    s = summarize([make_reading(nitrogen=1e30, ph=6.5, moisture=70.0)])
    assert s.rounded_averages() == {"nitrogen": 1e30, "ph": 6.5, "moisture": 70.0}
