"""
Cross-sensor aggregation and filtering over reading snapshots
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from api.schemas import Reading, SnapshotSummary
from utils.constants import API_MESSAGES, HIGH_RISK_LEVELS, RISK_LEVELS
from utils.errors import InvalidInput
from utils.helpers import mean, round_to

logger = logging.getLogger(__name__)


def readings_to_frame(readings: Sequence[Reading]) -> pd.DataFrame:
    """Flatten readings into a DataFrame, one row per reading"""
    rows = []
    for r in readings:
        rows.append({
            'device_id': r.device_id,
            'timestamp': r.timestamp,
            'name': r.location.name,
            'type': r.location.type.value,
            'PM2_5': r.PM2_5,
            'PM10': r.PM10,
            'NO2': r.NO2,
            'CO': r.CO,
            'CO2': r.CO2,
            'risk_level': r.risk_level.value,
            'risk_score': r.risk_score,
        })
    return pd.DataFrame(rows, columns=[
        'device_id', 'timestamp', 'name', 'type', 'PM2_5', 'PM10',
        'NO2', 'CO', 'CO2', 'risk_level', 'risk_score',
    ])


def summarize(readings: Sequence[Reading]) -> SnapshotSummary:
    """
    Dashboard summary of a snapshot

    Args:
        readings: Current readings

    Returns:
        SnapshotSummary; all zeros for an empty snapshot
    """
    df = readings_to_frame(readings)
    if df.empty:
        return SnapshotSummary(total_sensors=0, active_sensors=0, avg_pm25=0.0,
                               avg_no2=0.0, high_risk_count=0)

    return SnapshotSummary(
        total_sensors=len(df),
        active_sensors=int(df['timestamp'].notna().sum()),
        avg_pm25=round_to(df['PM2_5'].mean()),
        avg_no2=round_to(df['NO2'].mean()),
        high_risk_count=int(df['risk_level'].isin(HIGH_RISK_LEVELS).sum()),
    )


def risk_zone_counts(readings: Sequence[Reading]) -> Dict[str, int]:
    """Number of readings per risk level, every level present"""
    df = readings_to_frame(readings)
    counts = df['risk_level'].value_counts()
    return {level: int(counts.get(level, 0)) for level in RISK_LEVELS.values()}


def filter_readings(readings: Sequence[Reading], search: Optional[str] = None,
                    risk_level: Optional[str] = None) -> List[Reading]:
    """
    Filter readings by location name and risk level

    Args:
        readings: Readings to filter
        search: Case-insensitive substring of the location name
        risk_level: Exact risk level; None or 'all' matches everything

    Returns:
        Matching readings in input order
    """
    needle = (search or "").lower()
    match_all_levels = risk_level in (None, "", "all")

    result = []
    for r in readings:
        if needle and needle not in r.location.name.lower():
            continue
        if not match_all_levels and r.risk_level.value != risk_level:
            continue
        result.append(r)

    logger.debug(f"Filter search={search!r} risk_level={risk_level!r}: {len(result)}/{len(readings)}")
    return result


def baseline(readings: Sequence[Reading]) -> Tuple[float, float]:
    """
    Mean PM2.5 and NO2 across readings

    Raises:
        InvalidInput: if readings is empty
    """
    readings = list(readings)
    if not readings:
        logger.warning("Forecast requested without any readings")
        raise InvalidInput(API_MESSAGES["empty_readings"])
    return mean(r.PM2_5 for r in readings), mean(r.NO2 for r in readings)
