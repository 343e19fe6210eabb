"""
Query facade over the synthesis and forecasting engines
Wires one random source and clock through every engine
"""

import logging
from datetime import datetime
from typing import List, Optional, Sequence, Tuple

import numpy as np

from api.schemas import ForecastFrame, ModelInsight, Reading
from data.locations import LocationRegistry, registry as default_registry
from models.classifier import RiskClassifier
from models.forecaster import ForecastEngine
from models.history import HistoryGenerator
from models.synthesizer import ReadingSynthesizer
from utils.errors import UnknownDevice
from utils.helpers import make_rng

logger = logging.getLogger(__name__)


class AirQualityService:
    """
    The three queries the dashboards consume: current readings,
    per-sensor history and forecasts
    """

    def __init__(self, rng: Optional[np.random.Generator] = None,
                 locations: Optional[LocationRegistry] = None,
                 clock=datetime.now):
        self.locations = locations if locations is not None else default_registry
        self.classifier = RiskClassifier()
        self.synthesizer = ReadingSynthesizer(
            rng=rng if rng is not None else make_rng(),
            classifier=self.classifier,
            clock=clock,
        )
        self.history_generator = HistoryGenerator(self.synthesizer, self.locations)
        self.forecaster = ForecastEngine(clock=clock)
        logger.info(f"Air quality service ready with {len(self.locations)} locations")

    @classmethod
    def from_seed(cls, seed: Optional[int] = None, **kwargs) -> "AirQualityService":
        """Build a service whose random source is seeded"""
        return cls(rng=make_rng(seed), **kwargs)

    def get_current_readings(self) -> List[Reading]:
        """One fresh reading per registered location, in registry order"""
        return self.synthesizer.current_readings(self.locations)

    def get_reading(self, device_id: str) -> Reading:
        """
        Fresh reading for a single device

        Raises:
            UnknownDevice: if the device is not registered
        """
        if device_id not in self.locations:
            raise UnknownDevice(device_id)
        return self.synthesizer.synthesize(device_id, self.locations.get(device_id))

    def get_history(self, device_id: str, hours: int = 24) -> List[Reading]:
        """Hourly history for a device; empty for unknown devices"""
        return self.history_generator.history(device_id, hours)

    def get_forecast(self, readings: Sequence[Reading],
                     hours: int) -> Tuple[List[ForecastFrame], ModelInsight]:
        """Forecast frames and insight from a snapshot"""
        return self.forecaster.project(readings, hours)
