from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from hqstreams.routers import stream
from hqstreams.manifest import get_manifest
from hqstreams.config.provider_config import get_provider_keys
from hqstreams.schemas.stremio import HealthResponse, Manifest
from hqstreams.utils.env import env_flag
import os
import sys
import tempfile
import traceback
import logging
from datetime import datetime, timezone

# Logging configuration with fallback when file writing is not permitted
LOG_FILE_PATH = os.getenv('LOG_FILE', os.path.join(tempfile.gettempdir(), 'hqstreams.log'))
LOG_TO_FILE = env_flag('LOG_TO_FILE')
FILE_LOG_ENABLED = False

handlers = []

# Always log to console
console_handler = logging.StreamHandler(sys.stdout)
formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
console_handler.setFormatter(formatter)
handlers.append(console_handler)

if LOG_TO_FILE:
    try:
        os.makedirs(os.path.dirname(LOG_FILE_PATH), exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE_PATH, encoding='utf-8')
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)
        FILE_LOG_ENABLED = True
    except OSError:
        # Console-only if the file cannot be opened (e.g., read-only filesystem)
        FILE_LOG_ENABLED = False

logging.basicConfig(
    level=getattr(logging, os.getenv('LOG_LEVEL', 'INFO').upper(), logging.INFO),
    handlers=handlers
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="HQ Streams Aggregator",
    description="A Stremio add-on aggregating high-quality embed links from multiple providers",
    version="1.0.0"
)

# Stremio clients need CORS preflight (OPTIONS) handling
# allow_credentials=False is required with wildcard origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


@app.middleware("http")
async def log_requests_and_responses(request: Request, call_next):
    """Log every request and its response status"""
    start_time = datetime.now()

    logger.info(f"🔍 REQUEST: {request.method} {request.url}")
    logger.debug(f"   Headers: {dict(request.headers)}")
    logger.info(f"   Query Params: {dict(request.query_params)}")

    try:
        response = await call_next(request)
    except Exception as e:
        process_time = (datetime.now() - start_time).total_seconds()
        logger.error(f"❌ ERROR in {request.method} {request.url} after {process_time:.3f}s")
        logger.error(f"   Error Type: {type(e).__name__}")
        logger.error(f"   Error Message: {str(e)}")
        logger.error(traceback.format_exc())
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "message": str(e),
                "type": type(e).__name__,
                "timestamp": _now_iso(),
                "path": str(request.url)
            }
        )

    process_time = (datetime.now() - start_time).total_seconds()
    logger.info(f"✅ RESPONSE: {response.status_code} in {process_time:.3f}s")
    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler that logs everything"""
    logger.error("🚨 GLOBAL EXCEPTION HANDLER TRIGGERED")
    logger.error(f"   Request: {request.method} {request.url}")
    logger.error(f"   Exception Type: {type(exc).__name__}")
    logger.error(f"   Exception Message: {str(exc)}")
    logger.error(traceback.format_exc())

    note = "Check logs for full details"
    if FILE_LOG_ENABLED:
        note = f"Check {LOG_FILE_PATH} for full details"

    return JSONResponse(
        status_code=500,
        content={
            "error": "Unhandled Exception",
            "message": str(exc),
            "type": type(exc).__name__,
            "timestamp": _now_iso(),
            "path": str(request.url),
            "note": note
        }
    )


@app.get("/manifest.json", response_model=Manifest, response_model_exclude_none=True)
async def manifest():
    try:
        manifest_data = get_manifest()
        logger.info("✅ Manifest generated successfully")
        return manifest_data
    except Exception as e:
        logger.error(f"❌ Error generating manifest: {e}")
        logger.error(traceback.format_exc())
        raise


@app.get("/")
async def root():
    return {"message": "HQ Streams Aggregator for Stremio API"}


@app.get("/health", response_model=HealthResponse)
@app.get("/api/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="healthy",
        timestamp=_now_iso(),
        providers=get_provider_keys(),
    )


@app.get("/test")
async def test_route():
    return {
        "message": "Test route",
        "timestamp": _now_iso(),
        "providers": get_provider_keys(),
    }


# Registered last: the legacy /{type}/{id}/streams.json route is a catch-all
app.include_router(stream.router, prefix="", tags=["stream"])
