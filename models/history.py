"""
Historical Series Generator
Replays the synthesizer over a past window to build per-sensor series
"""

import logging
from datetime import datetime, timedelta
from typing import List, Optional

from api.schemas import Reading
from data.locations import LocationRegistry, registry as default_registry
from models.synthesizer import ReadingSynthesizer
from utils.helpers import validate_hours

logger = logging.getLogger(__name__)


class HistoryGenerator:
    """
    Builds hourly reading series ending at the current time

    Every point is independently resynthesized, so two calls never
    replay the same series.
    """

    def __init__(self, synthesizer: Optional[ReadingSynthesizer] = None,
                 locations: Optional[LocationRegistry] = None):
        self.synthesizer = synthesizer or ReadingSynthesizer()
        self.locations = locations if locations is not None else default_registry

    def history(self, device_id: str, hours: int = 24,
                now: Optional[datetime] = None) -> List[Reading]:
        """
        Hourly readings for a device over the past window

        Args:
            device_id: Registered sensor id
            hours: Window length; hours + 1 readings are produced
            now: End of the window, defaults to the synthesizer clock

        Returns:
            Readings oldest first, one hour apart; empty for unknown devices
        """
        hours = validate_hours(hours)
        location = self.locations.get(device_id)
        if location is None:
            logger.info(f"History requested for unknown device {device_id}")
            return []

        now = now or self.synthesizer.clock()
        series = [
            self.synthesizer.synthesize(device_id, location, timestamp=now - timedelta(hours=i))
            for i in range(hours, -1, -1)
        ]
        logger.debug(f"Built {len(series)}-point history for {device_id}")
        return series
