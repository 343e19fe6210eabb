import logging

from fastapi import APIRouter, Depends, Query

from api.routes.model_loader import get_service
from api.schemas import Forecast
from config.settings import settings
from models.service import AirQualityService

logger = logging.getLogger(__name__)

router = APIRouter()

CITY_WIDE = "all"


@router.get("/api/v1/forecast", response_model=Forecast)
def get_forecast(
    hours: int = Query(settings.DEFAULT_FORECAST_HOURS, ge=0, le=settings.MAX_FORECAST_HOURS),
    location: str = Query(CITY_WIDE, description="'all' for the city-wide average or a device id"),
    service: AirQualityService = Depends(get_service),
):
    """Hourly PM2.5/NO2 projection with model insight"""
    if location == CITY_WIDE:
        readings = service.get_current_readings()
    else:
        # Raises UnknownDevice, mapped to 404
        readings = [service.get_reading(location)]

    frames, insight = service.get_forecast(readings, hours)
    logger.info(f"Forecast for {location}: {len(frames)} frames, trend={insight.trend.value}")
    return Forecast(location=location, frames=frames, insight=insight)
