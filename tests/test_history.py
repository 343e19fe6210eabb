"""Historical series generator tests."""

from datetime import timedelta

import pytest

from models.history import HistoryGenerator
from utils.errors import InvalidInput


@pytest.fixture
def generator(synthesizer, registry):
    return HistoryGenerator(synthesizer, registry)


class TestHistory:

    def test_default_window_has_25_hourly_points(self, generator, fixed_now):
        """24 hours back plus now, oldest first, exactly one hour apart"""
        series = generator.history("charsense_001", 24)

        assert len(series) == 25
        assert series[0].timestamp == fixed_now - timedelta(hours=24)
        assert series[-1].timestamp == fixed_now
        for earlier, later in zip(series, series[1:]):
            assert later.timestamp - earlier.timestamp == timedelta(hours=1)

    def test_points_belong_to_device(self, generator, registry):
        series = generator.history("charsense_003", 6)
        location = registry.get("charsense_003")
        assert all(r.device_id == "charsense_003" for r in series)
        assert all(r.location == location for r in series)

    def test_zero_hours_gives_single_point(self, generator, fixed_now):
        series = generator.history("charsense_005", 0)
        assert len(series) == 1
        assert series[0].timestamp == fixed_now

    def test_explicit_end_time(self, generator, fixed_now):
        end = fixed_now - timedelta(days=1)
        series = generator.history("charsense_002", 3, now=end)
        assert series[-1].timestamp == end
        assert series[0].timestamp == end - timedelta(hours=3)

    def test_unknown_device_gives_empty_series(self, generator):
        """Unregistered devices degrade to an empty list, not an error"""
        assert generator.history("nonexistent", 24) == []

    def test_calls_are_independent(self, generator):
        """A second call resynthesizes rather than replaying"""
        first = [r.PM2_5 for r in generator.history("charsense_001", 24)]
        second = [r.PM2_5 for r in generator.history("charsense_001", 24)]
        assert first != second

    @pytest.mark.parametrize("hours", [-1, 2.5, "24", True])
    def test_bad_hours_rejected(self, generator, hours):
        with pytest.raises(InvalidInput):
            generator.history("charsense_001", hours)
