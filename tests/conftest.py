"""Shared fixtures for the CharSense test suite."""

import itertools
from datetime import datetime

import numpy as np
import pytest

from api.schemas import Location, Reading
from data.locations import LocationRegistry
from models.classifier import RiskClassifier
from models.service import AirQualityService
from models.synthesizer import ReadingSynthesizer

FIXED_NOW = datetime(2026, 10, 19, 13, 0, 0)


class ScriptedRng:
    """Stand-in generator returning scripted uniform draws in order."""

    def __init__(self, values, repeat=False):
        self._values = itertools.cycle(values) if repeat else iter(values)

    def random(self):
        return next(self._values)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def registry():
    return LocationRegistry()


@pytest.fixture
def synthesizer(rng, fixed_now):
    return ReadingSynthesizer(rng=rng, clock=lambda: fixed_now)


@pytest.fixture
def service(fixed_now):
    return AirQualityService.from_seed(2024, clock=lambda: fixed_now)


@pytest.fixture
def make_reading(fixed_now):
    """Factory for hand-built readings classified like synthesized ones."""
    classifier = RiskClassifier()

    def _make(pm25=20.0, no2=20.0, co=5.0, name="Banjara Hills",
              device_id="charsense_002", location_type="residential", timestamp=fixed_now):
        score, level = classifier.classify(pm25, no2, co)
        return Reading(
            device_id=device_id,
            timestamp=timestamp,
            location=Location(id=device_id, name=name, lat=17.4, lng=78.4, type=location_type),
            PM2_5=pm25,
            PM10=pm25 * 1.5,
            NO2=no2,
            CO=co,
            CO2=420.0,
            temperature=28.0,
            humidity=55.0,
            risk_level=level,
            risk_score=score,
        )

    return _make
