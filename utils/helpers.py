"""
Helper Functions for CharSense API
Utility functions used across the application
"""

import logging
from datetime import datetime
from typing import Iterable, Optional

import numpy as np

from config.settings import settings
from utils.constants import API_MESSAGES
from utils.errors import InvalidInput

logger = logging.getLogger(__name__)


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger from settings

    Args:
        level: Override for settings.LOG_LEVEL
    """
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=settings.LOG_FORMAT,
    )


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Build a random generator for the synthesis engines

    Args:
        seed: Fixed seed for reproducible output, None for OS entropy

    Returns:
        numpy Generator
    """
    return np.random.default_rng(seed)


def round_to(value: float, decimals: int = 1) -> float:
    """Round half away from zero, matching dashboard display rounding"""
    factor = 10 ** decimals
    return float(np.floor(value * factor + 0.5) / factor)


def validate_hours(hours) -> int:
    """
    Check an hour horizon is a non-negative integer

    Raises:
        InvalidInput: for negative, boolean or non-integer values
    """
    if isinstance(hours, bool) or not isinstance(hours, (int, np.integer)):
        logger.warning(f"Rejected hours={hours!r}: not an integer")
        raise InvalidInput(API_MESSAGES["invalid_hours"])
    if hours < 0:
        logger.warning(f"Rejected hours={hours!r}: negative")
        raise InvalidInput(API_MESSAGES["invalid_hours"])
    return int(hours)


def mean(values: Iterable[float]) -> float:
    """
    Arithmetic mean of a sequence

    Raises:
        InvalidInput: if the sequence is empty
    """
    values = list(values)
    if not values:
        raise InvalidInput("Cannot average an empty sequence")
    return float(np.mean(values))


def time_label(dt: datetime) -> str:
    """Clock label shown on forecast frames, e.g. 01:00 PM"""
    return dt.strftime(settings.TIME_LABEL_FORMAT)
