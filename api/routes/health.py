from fastapi import APIRouter, Depends

from api.routes.model_loader import get_service
from api.schemas import HealthGuidance, RiskLevel
from models.service import AirQualityService

router = APIRouter()


@router.get("/api/v1/risk-levels/{risk_level}", response_model=HealthGuidance)
def get_health_guidance(risk_level: RiskLevel, service: AirQualityService = Depends(get_service)):
    """Health recommendations for a risk level"""
    return HealthGuidance(**service.classifier.describe(risk_level.value))
