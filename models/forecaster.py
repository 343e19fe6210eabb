"""
Forecast Projection Engine
Extrapolates hourly PM2.5/NO2 predictions from the current snapshot

The projection is closed form: a linear growth term plus a bounded
oscillation, with confidence decaying linearly per hour.
"""

import logging
import math
from datetime import datetime, timedelta
from typing import List, Optional, Sequence, Tuple

import numpy as np

from api.schemas import ForecastFrame, ModelInsight, Reading
from models.aggregation import baseline as snapshot_baseline
from utils.constants import (
    CONFIDENCE_DECAY,
    CONFIDENCE_FLOOR,
    CONFIDENCE_START,
    DEFAULT_INSIGHT_CONFIDENCE,
    DEFAULT_RISK_ZONES,
    FORECAST_GROWTH_RATE,
    FORECAST_OSCILLATION_AMPLITUDE,
    FORECAST_OSCILLATION_FREQ,
    INSIGHT_TREND_THRESHOLD,
    INSIGHT_WINDOW,
    RISK_ZONE_PM25_STEP,
    TREND_INCREASING_BEFORE,
    TREND_STABLE_BEFORE,
)
from utils.helpers import round_to, time_label, validate_hours

logger = logging.getLogger(__name__)


def projection_multiplier(hour: int) -> float:
    """Growth-plus-oscillation factor applied to the baseline at an hour offset"""
    return float(
        1
        + hour * FORECAST_GROWTH_RATE
        + np.sin(hour * FORECAST_OSCILLATION_FREQ) * FORECAST_OSCILLATION_AMPLITUDE
    )


def confidence_at(hour: int) -> float:
    """Linearly decaying confidence, floored"""
    return round(max(CONFIDENCE_FLOOR, CONFIDENCE_START - hour * CONFIDENCE_DECAY), 2)


def trend_at(hour: int) -> str:
    """Fixed per-index trend label"""
    if hour < TREND_INCREASING_BEFORE:
        return "increasing"
    elif hour < TREND_STABLE_BEFORE:
        return "stable"
    return "decreasing"


class ForecastEngine:
    """
    Projects a forward series of ForecastFrames and summarises it

    Args:
        clock: Callable returning the current time
    """

    def __init__(self, clock=datetime.now):
        self.clock = clock

    def baseline(self, readings: Sequence[Reading]) -> Tuple[float, float]:
        """
        Mean PM2.5 and NO2 of a snapshot

        Raises:
            InvalidInput: if readings is empty
        """
        return snapshot_baseline(readings)

    def project_baseline(self, avg_pm25: float, avg_no2: float, hours: int,
                         now: Optional[datetime] = None) -> List[ForecastFrame]:
        """
        Forecast frames for hour offsets 0..hours inclusive

        Args:
            avg_pm25: Baseline PM2.5
            avg_no2: Baseline NO2
            hours: Horizon in hours
            now: Reference time for labels, defaults to the clock

        Returns:
            hours + 1 frames ordered by hour
        """
        hours = validate_hours(hours)
        now = now or self.clock()

        frames = []
        for i in range(hours + 1):
            multiplier = projection_multiplier(i)
            frames.append(ForecastFrame(
                hour=i,
                time_label=time_label(now + timedelta(hours=i)),
                PM25_predicted=round_to(avg_pm25 * multiplier),
                NO2_predicted=round_to(avg_no2 * multiplier),
                confidence=confidence_at(i),
                risk_trend=trend_at(i),
            ))
        return frames

    def insight(self, frames: Sequence[ForecastFrame]) -> ModelInsight:
        """
        Summarise a forecast series

        Trend comes from the mean consecutive PM2.5 delta over the last
        frames; fewer than two frames is reported as stable.
        """
        frames = list(frames)
        window = frames[-INSIGHT_WINDOW:]

        trend = "stable"
        if len(window) >= 2:
            deltas = np.diff([f.PM25_predicted for f in window])
            avg_delta = float(np.mean(deltas))
            if avg_delta > INSIGHT_TREND_THRESHOLD:
                trend = "increasing"
            elif avg_delta < -INSIGHT_TREND_THRESHOLD:
                trend = "decreasing"

        if not frames:
            return ModelInsight(
                trend=trend,
                confidence_pct=DEFAULT_INSIGHT_CONFIDENCE,
                peak_frame=None,
                risk_zone_count=DEFAULT_RISK_ZONES,
            )

        last = frames[-1]
        # max() keeps the first maximum, so ties resolve to the earliest hour
        peak = max(frames, key=lambda f: f.PM25_predicted)
        zones = math.ceil(last.PM25_predicted / RISK_ZONE_PM25_STEP) or DEFAULT_RISK_ZONES

        return ModelInsight(
            trend=trend,
            confidence_pct=int(round_to(last.confidence * 100, 0)),
            peak_frame=peak,
            risk_zone_count=zones,
        )

    def project(self, readings: Sequence[Reading], hours: int,
                now: Optional[datetime] = None) -> Tuple[List[ForecastFrame], ModelInsight]:
        """
        Forecast from a snapshot of current readings

        Args:
            readings: Current readings; their PM2.5/NO2 means are the baseline
            hours: Horizon in hours
            now: Reference time for labels

        Returns:
            (frames, insight)

        Raises:
            InvalidInput: on empty readings or a bad horizon
        """
        hours = validate_hours(hours)
        avg_pm25, avg_no2 = self.baseline(readings)
        frames = self.project_baseline(avg_pm25, avg_no2, hours, now=now)
        result = self.insight(frames)
        logger.debug(
            f"Projected {len(frames)} frames from PM2.5={avg_pm25:.1f} NO2={avg_no2:.1f}; "
            f"trend={result.trend.value}"
        )
        return frames, result
