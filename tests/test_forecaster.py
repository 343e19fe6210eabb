"""
Forecast projection engine tests

Expected values follow the closed-form multiplier
1 + 0.1 * i + 0.2 * sin(0.5 * i).
"""

import pytest

from api.schemas import ForecastFrame
from models.forecaster import (
    ForecastEngine,
    confidence_at,
    projection_multiplier,
    trend_at,
)
from utils.errors import InvalidInput


@pytest.fixture
def engine(fixed_now):
    return ForecastEngine(clock=lambda: fixed_now)


@pytest.fixture
def snapshot(make_reading):
    return [make_reading(pm25=40.0, no2=20.0), make_reading(pm25=60.0, no2=40.0)]


def frame(hour, pm25, confidence=0.95):
    return ForecastFrame(hour=hour, time_label="", PM25_predicted=pm25,
                         NO2_predicted=pm25 / 2, confidence=confidence, risk_trend="stable")


class TestFrameRules:

    def test_multiplier_at_zero_is_one(self):
        assert projection_multiplier(0) == 1.0

    def test_multiplier_adds_oscillation(self):
        assert projection_multiplier(4) == pytest.approx(1.4 + 0.1818595, abs=1e-6)

    @pytest.mark.parametrize("hour,expected", [
        (0, 0.95), (1, 0.9), (5, 0.7), (6, 0.65), (7, 0.6), (8, 0.6), (20, 0.6),
    ])
    def test_confidence_decay(self, hour, expected):
        assert confidence_at(hour) == expected

    @pytest.mark.parametrize("hour,expected", [
        (0, "increasing"), (2, "increasing"), (3, "stable"), (5, "stable"),
        (6, "decreasing"), (12, "decreasing"),
    ])
    def test_trend_lookup(self, hour, expected):
        assert trend_at(hour) == expected


class TestProject:

    def test_zero_hours(self, engine, snapshot):
        """hours=0 gives a single current-hour frame"""
        frames, _ = engine.project(snapshot, 0)
        assert len(frames) == 1
        assert frames[0].confidence == 0.95
        assert frames[0].risk_trend.value == "increasing"

    def test_ten_hours(self, engine, snapshot):
        frames, _ = engine.project(snapshot, 10)
        assert len(frames) == 11
        assert [f.hour for f in frames] == list(range(11))
        assert frames[0].confidence == 0.95
        assert all(f.confidence == 0.6 for f in frames[7:])
        assert frames[4].risk_trend.value == "stable"
        assert frames[6].risk_trend.value == "decreasing"

    def test_baseline_is_snapshot_mean(self, engine, snapshot):
        """Frame 0 reproduces the snapshot means"""
        frames, _ = engine.project(snapshot, 2)
        assert frames[0].PM25_predicted == 50.0
        assert frames[0].NO2_predicted == 30.0

    def test_project_baseline_values(self, engine):
        frames = engine.project_baseline(50.0, 30.0, 10)
        assert frames[0].PM25_predicted == 50.0
        assert frames[1].PM25_predicted == pytest.approx(59.8)
        assert frames[10].PM25_predicted == pytest.approx(90.4)
        assert frames[10].NO2_predicted == pytest.approx(54.2)

    def test_time_labels(self, engine):
        """Labels are 12-hour clock times for now + i hours"""
        frames = engine.project_baseline(50.0, 30.0, 3)
        assert [f.time_label for f in frames] == ["01:00 PM", "02:00 PM", "03:00 PM", "04:00 PM"]

    def test_empty_readings_rejected(self, engine):
        with pytest.raises(InvalidInput):
            engine.project([], 6)

    @pytest.mark.parametrize("hours", [-1, 1.5, None, False])
    def test_bad_hours_rejected(self, engine, snapshot, hours):
        with pytest.raises(InvalidInput):
            engine.project(snapshot, hours)


class TestInsight:

    def test_ten_hour_insight(self, engine):
        """Last three frames rise by 2.8 and 5.2, so the trend is increasing"""
        frames = engine.project_baseline(50.0, 30.0, 10)
        insight = engine.insight(frames)

        assert insight.trend.value == "increasing"
        assert insight.confidence_pct == 60
        assert insight.peak_frame.hour == 10
        assert insight.risk_zone_count == 4

    def test_decreasing_trend(self, engine):
        insight = engine.insight([frame(0, 50.0), frame(1, 45.0), frame(2, 40.0)])
        assert insight.trend.value == "decreasing"
        assert insight.peak_frame.hour == 0

    def test_small_deltas_are_stable(self, engine):
        insight = engine.insight([frame(0, 50.0), frame(1, 50.5), frame(2, 51.0)])
        assert insight.trend.value == "stable"

    def test_only_last_three_frames_count(self, engine):
        frames = [frame(0, 10.0), frame(1, 90.0), frame(2, 50.0), frame(3, 50.5), frame(4, 51.0)]
        assert engine.insight(frames).trend.value == "stable"

    def test_single_frame_is_stable(self, engine):
        frames = engine.project_baseline(50.0, 30.0, 0)
        insight = engine.insight(frames)
        assert insight.trend.value == "stable"
        assert insight.confidence_pct == 95
        assert insight.risk_zone_count == 2
        assert insight.peak_frame == frames[0]

    def test_two_frames_use_single_delta(self, engine):
        frames = engine.project_baseline(50.0, 30.0, 1)
        assert engine.insight(frames).trend.value == "increasing"

    def test_peak_tie_goes_to_earliest_hour(self, engine):
        insight = engine.insight([frame(0, 40.0), frame(1, 60.0), frame(2, 55.0), frame(3, 60.0)])
        assert insight.peak_frame.hour == 1

    def test_empty_series_defaults(self, engine):
        insight = engine.insight([])
        assert insight.trend.value == "stable"
        assert insight.confidence_pct == 85
        assert insight.risk_zone_count == 2
        assert insight.peak_frame is None
