"""
Configuration Management for CharSense API
Loads environment variables and provides centralized settings
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _parse_seed(raw):
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        return None


class Settings:
    """Application settings and configuration"""

    # Project paths
    BASE_DIR = Path(__file__).resolve().parent.parent

    # API Configuration
    API_TITLE = "CharSense API"
    API_VERSION = "1.0.0"
    API_DESCRIPTION = "Air quality sensor synthesis, risk classification and short-term forecasting"
    API_HOST = os.getenv("API_HOST", "0.0.0.0")
    API_PORT = int(os.getenv("API_PORT", "8000"))

    # Randomness (unset = fresh entropy per process)
    RANDOM_SEED_RAW = os.getenv("RANDOM_SEED")
    RANDOM_SEED = _parse_seed(RANDOM_SEED_RAW)

    # History Settings
    DEFAULT_HISTORY_HOURS = 24
    MAX_HISTORY_HOURS = 168

    # Forecast Settings
    DEFAULT_FORECAST_HOURS = 6
    MAX_FORECAST_HOURS = 24
    TIME_LABEL_FORMAT = "%I:%M %p"

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # CORS Settings (for frontend)
    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:8080",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:8080",
    ]

    @classmethod
    def validate_config(cls):
        """Validate configuration and return warnings about bad values"""
        warnings = []

        if cls.RANDOM_SEED_RAW and cls.RANDOM_SEED is None:
            warnings.append(
                f"RANDOM_SEED={cls.RANDOM_SEED_RAW!r} is not an integer - using fresh entropy"
            )

        if cls.DEFAULT_FORECAST_HOURS > cls.MAX_FORECAST_HOURS:
            warnings.append("DEFAULT_FORECAST_HOURS exceeds MAX_FORECAST_HOURS")

        return warnings


# Create singleton instance
settings = Settings()
