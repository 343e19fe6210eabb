import logging

from config.settings import settings
from models.service import AirQualityService
from utils.helpers import setup_logging

logger = logging.getLogger(__name__)


def load_service() -> AirQualityService:
    setup_logging()
    if settings.RANDOM_SEED is not None:
        logger.info(f"Seeding synthesis with RANDOM_SEED={settings.RANDOM_SEED}")
    else:
        logger.info("Seeding synthesis from OS entropy")
    return AirQualityService.from_seed(settings.RANDOM_SEED)


service = load_service()


def get_service() -> AirQualityService:
    return service
