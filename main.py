import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import forecast, health, readings
from config.settings import settings
from utils.errors import InvalidInput, UnknownDevice

logger = logging.getLogger(__name__)

for warning in settings.validate_config():
    logger.warning(f"Configuration: {warning}")

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(readings.router)
app.include_router(forecast.router)
app.include_router(health.router)


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput):
    logger.warning(f"Invalid input on {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(UnknownDevice)
async def unknown_device_handler(request: Request, exc: UnknownDevice):
    logger.warning(f"Unknown device on {request.url.path}: {exc.device_id}")
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.get("/")
def root():
    return {
        "message": "CharSense API",
        "version": settings.API_VERSION,
        "endpoints": {
            "locations": "/api/v1/locations",
            "readings": "/api/v1/readings",
            "summary": "/api/v1/readings/summary",
            "history": "/api/v1/readings/{device_id}/history",
            "forecast": "/api/v1/forecast",
            "guidance": "/api/v1/risk-levels/{risk_level}",
            "docs": "/docs"
        }
    }


@app.get("/health")
def health_check():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
