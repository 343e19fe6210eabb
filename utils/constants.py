"""
Constants used throughout the CharSense API
Location multipliers, risk band thresholds, health messages, and other fixed values
"""

# ==================== Location Types ====================

DEFAULT_LOCATION_TYPE = "residential"

# ==================== Location Multipliers ====================

# Scaling applied to the baseline pollutant levels for each site category
LOCATION_MULTIPLIERS = {
    "highway": {"PM2_5": 1.8, "PM10": 2.1, "NO2": 2.5, "CO": 1.9},
    "residential": {"PM2_5": 1.0, "PM10": 1.1, "NO2": 1.2, "CO": 1.0},
    "industrial": {"PM2_5": 2.2, "PM10": 2.8, "NO2": 3.1, "CO": 2.4},
    "park": {"PM2_5": 0.6, "PM10": 0.7, "NO2": 0.5, "CO": 0.4},
}

# ==================== Synthesis Baselines ====================

# (base, spread) pairs: value = base + variation * spread
PM25_BASE = (35.0, 20.0)
NO2_BASE = (25.0, 15.0)
CO_BASE = (8.0, 5.0)
TEMPERATURE_BASE = (28.0, 8.0)
HUMIDITY_BASE = (55.0, 20.0)

# CO2 = CO2_MIN + uniform(0, 1) * CO2_SPAN
CO2_MIN = 380.0
CO2_SPAN = 120.0

# Lower clamps keeping synthesized values physical
POLLUTANT_FLOORS = {
    "PM2_5": 5.0,
    "PM10": 8.0,
    "NO2": 5.0,
    "CO": 1.0,
}

PM10_FROM_PM25_RATIO = 1.5

# Variation draw: (uniform - 0.5) * VARIATION_SCALE, within +-0.1
VARIATION_SCALE = 0.2

# ==================== Risk Bands ====================

# Descending (threshold, band) pairs; a value strictly above the threshold
# takes the band, anything at or below the last threshold is band 1
RISK_BANDS = {
    "PM2_5": ((75.0, 4), (35.0, 3), (15.0, 2)),
    "NO2": ((100.0, 4), (50.0, 3), (25.0, 2)),
    "CO": ((30.0, 4), (15.0, 3), (8.0, 2)),
}

RISK_LEVELS = {
    1: "low",
    2: "moderate",
    3: "high",
    4: "hazardous",
}

HIGH_RISK_LEVELS = ("high", "hazardous")

# ==================== Health Messages ====================

HEALTH_MESSAGES = {
    "low": {
        "general": "Air quality is good. Ideal for outdoor activities.",
        "sensitive": "No precautions needed, including for sensitive groups.",
        "activities_safe": ["Running", "Cycling", "Outdoor sports", "Walking"],
        "activities_avoid": [],
    },
    "moderate": {
        "general": "Air quality is acceptable for most people.",
        "sensitive": "Unusually sensitive individuals should consider limiting prolonged outdoor exertion.",
        "activities_safe": ["Walking", "Light jogging", "Casual cycling"],
        "activities_avoid": ["Prolonged intense exercise"],
    },
    "high": {
        "general": "Everyone may begin to experience health effects.",
        "sensitive": "Children, elderly, and people with heart/lung disease should stay indoors.",
        "activities_safe": ["Indoor activities", "Brief outdoor errands"],
        "activities_avoid": ["Outdoor sports", "Prolonged outdoor activity", "Opening windows for long periods"],
    },
    "hazardous": {
        "general": "Health warning of emergency conditions: everyone affected.",
        "sensitive": "Everyone should avoid all outdoor exposure.",
        "activities_safe": ["Stay indoors", "Use air purifiers", "Seal windows and doors"],
        "activities_avoid": ["All outdoor activities", "Going outside without N95 mask", "Physical exertion"],
    },
}

# ==================== Forecast Model ====================

FORECAST_GROWTH_RATE = 0.1
FORECAST_OSCILLATION_FREQ = 0.5
FORECAST_OSCILLATION_AMPLITUDE = 0.2

CONFIDENCE_START = 0.95
CONFIDENCE_DECAY = 0.05
CONFIDENCE_FLOOR = 0.6

# Per-index trend labels: hour < 3 increasing, hour < 6 stable, then decreasing
TREND_INCREASING_BEFORE = 3
TREND_STABLE_BEFORE = 6

# Insight derivation
INSIGHT_WINDOW = 3
INSIGHT_TREND_THRESHOLD = 1.0
DEFAULT_INSIGHT_CONFIDENCE = 85
DEFAULT_RISK_ZONES = 2
RISK_ZONE_PM25_STEP = 25.0

# ==================== API Response Messages ====================

API_MESSAGES = {
    "invalid_hours": "Hours must be a non-negative integer",
    "empty_readings": "At least one reading is required to build a forecast",
}
