from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class LocationType(str, Enum):
    HIGHWAY = "highway"
    RESIDENTIAL = "residential"
    INDUSTRIAL = "industrial"
    PARK = "park"


class RiskLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    HAZARDOUS = "hazardous"


class Trend(str, Enum):
    INCREASING = "increasing"
    STABLE = "stable"
    DECREASING = "decreasing"


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    lat: float
    lng: float
    type: LocationType


class Reading(BaseModel):
    model_config = ConfigDict(frozen=True)

    device_id: str
    timestamp: datetime
    location: Location
    PM2_5: float = Field(ge=0)
    PM10: float = Field(ge=0)
    NO2: float = Field(ge=0)
    CO: float = Field(ge=0)
    CO2: float = Field(ge=0)
    temperature: float
    humidity: float
    risk_level: RiskLevel
    risk_score: int = Field(ge=1, le=4)


class ForecastFrame(BaseModel):
    model_config = ConfigDict(frozen=True)

    hour: int = Field(ge=0)
    time_label: str
    PM25_predicted: float
    NO2_predicted: float
    confidence: float = Field(ge=0.6, le=0.95)
    risk_trend: Trend


class ModelInsight(BaseModel):
    model_config = ConfigDict(frozen=True)

    trend: Trend
    confidence_pct: int
    peak_frame: Optional[ForecastFrame] = None
    risk_zone_count: int


class Forecast(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: str
    frames: List[ForecastFrame]
    insight: ModelInsight


class SnapshotSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_sensors: int
    active_sensors: int
    avg_pm25: float
    avg_no2: float
    high_risk_count: int


class ReadingsSummary(BaseModel):
    summary: SnapshotSummary
    risk_zones: Dict[RiskLevel, int]


class HealthGuidance(BaseModel):
    risk_level: RiskLevel
    general_message: str
    sensitive_groups_message: str
    activities_safe: List[str]
    activities_avoid: List[str]
