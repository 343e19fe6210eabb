"""
Risk Classification Model
Maps pollutant concentrations to a risk score (1-4) and risk level
Provides health guidance for each level
"""

import logging
from typing import Dict, Tuple

from utils.constants import HEALTH_MESSAGES, RISK_BANDS, RISK_LEVELS

logger = logging.getLogger(__name__)


class RiskClassifier:
    """
    Threshold-based multi-pollutant classifier

    Each of PM2.5, NO2 and CO is banded independently and the worst band wins.
    PM10 and CO2 do not participate.
    """

    def __init__(self, bands: Dict = None, levels: Dict = None):
        self.bands = bands or RISK_BANDS
        self.levels = levels or RISK_LEVELS

    def band(self, pollutant: str, value: float) -> int:
        """
        Band a single pollutant value

        Args:
            pollutant: One of 'PM2_5', 'NO2', 'CO'
            value: Concentration

        Returns:
            Integer band 1-4
        """
        for threshold, band in self.bands[pollutant]:
            if value > threshold:
                return band
        return 1

    def level_for_score(self, score: int) -> str:
        """Risk level name for a risk score"""
        if score >= 4:
            return self.levels[4]
        elif score >= 3:
            return self.levels[3]
        elif score >= 2:
            return self.levels[2]
        return self.levels[1]

    def classify(self, pm25: float, no2: float, co: float) -> Tuple[int, str]:
        """
        Classify a reading's pollutant values

        Args:
            pm25: PM2.5 in µg/m³
            no2: NO2 in ppb
            co: CO in ppm

        Returns:
            (risk_score, risk_level)
        """
        score = max(
            self.band("PM2_5", pm25),
            self.band("NO2", no2),
            self.band("CO", co),
        )
        level = self.level_for_score(score)
        logger.debug(f"Classified PM2.5={pm25} NO2={no2} CO={co} -> {score} ({level})")
        return score, level

    def describe(self, risk_level: str) -> Dict:
        """
        Health guidance for a risk level

        Args:
            risk_level: 'low', 'moderate', 'high' or 'hazardous'

        Returns:
            Dict with general/sensitive messages and activity lists
        """
        messages = HEALTH_MESSAGES[risk_level]
        return {
            'risk_level': risk_level,
            'general_message': messages['general'],
            'sensitive_groups_message': messages['sensitive'],
            'activities_safe': list(messages['activities_safe']),
            'activities_avoid': list(messages['activities_avoid']),
        }
