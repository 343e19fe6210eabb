import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.routes.model_loader import get_service
from api.schemas import Location, Reading, ReadingsSummary
from config.settings import settings
from models.aggregation import filter_readings, risk_zone_counts, summarize
from models.service import AirQualityService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/v1/locations", response_model=List[Location])
def get_locations(service: AirQualityService = Depends(get_service)):
    """Registered sensor sites"""
    return service.locations.all()


@router.get("/api/v1/readings", response_model=List[Reading])
def get_readings(
    search: Optional[str] = Query(None, description="Substring of the location name"),
    risk_level: Optional[str] = Query(None, description="Risk level, or 'all'"),
    service: AirQualityService = Depends(get_service),
):
    """Fresh readings for every sensor, optionally filtered"""
    readings = service.get_current_readings()
    filtered = filter_readings(readings, search=search, risk_level=risk_level)
    logger.info(f"Serving {len(filtered)} of {len(readings)} current readings")
    return filtered


@router.get("/api/v1/readings/summary", response_model=ReadingsSummary)
def get_readings_summary(service: AirQualityService = Depends(get_service)):
    """City-wide summary statistics and risk zone counts"""
    readings = service.get_current_readings()
    return ReadingsSummary(
        summary=summarize(readings),
        risk_zones=risk_zone_counts(readings),
    )


@router.get("/api/v1/readings/{device_id}/history", response_model=List[Reading])
def get_reading_history(
    device_id: str,
    hours: int = Query(settings.DEFAULT_HISTORY_HOURS, ge=0, le=settings.MAX_HISTORY_HOURS),
    service: AirQualityService = Depends(get_service),
):
    """Hourly history for one sensor; empty list when the sensor is unknown"""
    history = service.get_history(device_id, hours)
    logger.info(f"Serving {len(history)} history points for {device_id}")
    return history
