"""
Reading Synthesizer
Generates plausible pollutant readings for a sensor site

Each reading scales a baseline by the site's location-type multipliers and
adds a bounded random variation, then clamps to physical floors.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

import numpy as np

from api.schemas import Location, Reading
from data.locations import LocationRegistry, registry as default_registry
from models.classifier import RiskClassifier
from utils.constants import (
    CO2_MIN,
    CO2_SPAN,
    CO_BASE,
    DEFAULT_LOCATION_TYPE,
    HUMIDITY_BASE,
    LOCATION_MULTIPLIERS,
    NO2_BASE,
    PM10_FROM_PM25_RATIO,
    PM25_BASE,
    POLLUTANT_FLOORS,
    TEMPERATURE_BASE,
    VARIATION_SCALE,
)
from utils.helpers import round_to

logger = logging.getLogger(__name__)


def get_multipliers(location_type) -> dict:
    """Multiplier profile for a location type, residential when unknown"""
    key = getattr(location_type, "value", location_type)
    return LOCATION_MULTIPLIERS.get(key, LOCATION_MULTIPLIERS[DEFAULT_LOCATION_TYPE])


class ReadingSynthesizer:
    """
    Produces one synthetic reading per call

    Args:
        rng: numpy Generator used for every random draw
        classifier: RiskClassifier used to score readings
        clock: Callable returning the current time
    """

    def __init__(self, rng: Optional[np.random.Generator] = None,
                 classifier: Optional[RiskClassifier] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.classifier = classifier or RiskClassifier()
        self.clock = clock

    def variation(self) -> float:
        """Symmetric variation in [-0.1, 0.1)"""
        return (self.rng.random() - 0.5) * VARIATION_SCALE

    def _scaled(self, base, multiplier: float) -> float:
        level, spread = base
        return (level + self.variation() * spread) * multiplier

    def synthesize(self, device_id: str, location: Location,
                   timestamp: Optional[datetime] = None) -> Reading:
        """
        Synthesize a reading for a site

        Args:
            device_id: Sensor identifier
            location: Site the sensor sits at
            timestamp: Reading time, defaults to now

        Returns:
            Classified Reading
        """
        mult = get_multipliers(location.type)

        pm25 = max(POLLUTANT_FLOORS["PM2_5"], self._scaled(PM25_BASE, mult["PM2_5"]))
        pm10 = max(POLLUTANT_FLOORS["PM10"], pm25 * PM10_FROM_PM25_RATIO * mult["PM10"])
        no2 = max(POLLUTANT_FLOORS["NO2"], self._scaled(NO2_BASE, mult["NO2"]))
        co = max(POLLUTANT_FLOORS["CO"], self._scaled(CO_BASE, mult["CO"]))
        co2 = CO2_MIN + self.rng.random() * CO2_SPAN
        temperature = self._scaled(TEMPERATURE_BASE, 1.0)
        humidity = self._scaled(HUMIDITY_BASE, 1.0)

        pm25, pm10, no2, co = (round_to(v) for v in (pm25, pm10, no2, co))
        risk_score, risk_level = self.classifier.classify(pm25, no2, co)

        return Reading(
            device_id=device_id,
            timestamp=timestamp or self.clock(),
            location=location,
            PM2_5=pm25,
            PM10=pm10,
            NO2=no2,
            CO=co,
            CO2=round_to(co2, 0),
            temperature=round_to(temperature),
            humidity=round_to(humidity),
            risk_level=risk_level,
            risk_score=risk_score,
        )

    def current_readings(self, locations: Optional[LocationRegistry] = None) -> List[Reading]:
        """
        One fresh reading per registered location, in registry order

        Args:
            locations: Registry to read, defaults to the process registry

        Returns:
            List of readings
        """
        locations = locations if locations is not None else default_registry
        now = self.clock()
        readings = [self.synthesize(location.id, location, timestamp=now)
                    for location in locations.all()]
        logger.debug(f"Synthesized {len(readings)} current readings")
        return readings
