"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.dependencies import get_settings
from src.api.endpoints.reviews import router as reviews_router
from src.error_handler import ErrorHandler, ReviewProxyError
from src.utils.config_loader import Settings
from src.utils.resource_config_loader import default_resource_config

SERVICE_NAME = "Review Proxy API"
SERVICE_VERSION = "1.0.0"

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

error_handler = ErrorHandler()

# Initialize FastAPI app
app = FastAPI(
    title=SERVICE_NAME,
    description="Serves product review data from local mock fixtures or the upstream review API",
    version=SERVICE_VERSION,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(reviews_router)


@app.exception_handler(ReviewProxyError)
async def review_proxy_error_handler(request: Request, exc: ReviewProxyError):
    status_code, body = error_handler.to_response(exc)
    return JSONResponse(status_code=status_code, content=body)


# ============================================================================
# ENDPOINTS
# ============================================================================
def _health_payload(settings: Settings) -> dict:
    return {
        "service": SERVICE_NAME,
        "status": "healthy",
        "version": SERVICE_VERSION,
        "mode": settings.mode,
        "timestamp": datetime.now().isoformat(),
    }


@app.get("/", tags=["Health"])
async def root(settings: Settings = Depends(get_settings)):
    """Health check endpoint."""
    return _health_payload(settings)


@app.get("/health", tags=["Health"])
async def health_check(settings: Settings = Depends(get_settings)):
    """Detailed health check (adds the mock fixture directory in mock mode)."""
    payload = _health_payload(settings)
    payload["mock_data_dir"] = str(settings.mock_data_dir) if settings.use_mock else None
    return payload


# ============================================================================
# STARTUP/SHUTDOWN EVENTS
# ============================================================================
@app.on_event("startup")
async def startup_event():
    """Log the active data source configuration."""
    logger.info("Starting %s...", SERVICE_NAME)

    settings = app.dependency_overrides.get(get_settings, get_settings)()
    logging.getLogger().setLevel(getattr(logging, settings.log_level, logging.INFO))
    logger.info("Data source mode: %s", settings.mode)

    resources = default_resource_config()
    for category, definition in resources.resources.items():
        if settings.use_mock:
            fixture = settings.mock_data_dir / definition.fixture
            if not fixture.exists():
                logger.warning("Mock fixture for %s is missing: %s", category.value, fixture)
        else:
            url = settings.upstream_url(definition.url_setting)
            if url:
                logger.info("Upstream %s: %s", category.value, url)
            else:
                logger.warning("%s is not set; %s requests will fail", definition.url_setting.upper(), category.value)


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down %s...", SERVICE_NAME)
