"""
Nexus Admin - Main Application

FastAPI backend with:
- MongoDB for every entity
- JWT sessions (Bearer header or httponly cookie)
- Role-gated admin API under /api
- Site settings in a JSON file, uploads on local disk

Run: uvicorn nexus_admin.main:app --reload
"""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pymongo.errors import DuplicateKeyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from nexus_admin import __version__
from nexus_admin.api.routes import api_router
from nexus_admin.core.config import get_settings
from nexus_admin.db.mongodb import init_mongo_indexes, test_mongo_connection

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Nexus Admin",
    description="""
    Admin panel API for a training and recruiting company.

    ## Features
    - **Authentication**: JWT sessions with role-based access
    - **Users**: Account management for admins, managers and HR
    - **Training**: Course catalogue and enrollments with progress tracking
    - **Products, Blog, Announcements**: Content management with engagement analytics
    - **Jobs & Internships**: Postings with automatic Closed/Filled status and applications
    - **Dashboard**: Aggregated platform statistics
    - **Site**: Settings, editable website content, SEO and image uploads
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")

# Serve uploaded images
os.makedirs(settings.upload_dir, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.upload_dir), name="uploads")


# ============================================================
# ERROR HANDLERS - every error uses {"success": false, "message": ...}
# ============================================================

def _error(status_code: int, message: str, headers=None, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, **extra},
        headers=headers,
    )


def _validation_message(error: dict) -> str:
    field = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "form"))
    message = error.get("msg", "Invalid value").replace("Value error, ", "")
    return f"{field}: {message}" if field else message


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return _error(400, ", ".join(_validation_message(e) for e in exc.errors()))


@app.exception_handler(DuplicateKeyError)
async def duplicate_key_handler(request: Request, exc: DuplicateKeyError):
    logger.warning("Duplicate key on %s %s: %s", request.method, request.url.path, exc)
    return _error(409, "A record with this value already exists")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    if settings.debug:
        return _error(500, "Internal server error", error=str(exc))
    return _error(500, "Internal server error")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize MongoDB indexes on startup."""
    try:
        init_mongo_indexes()
    except Exception:
        logger.exception("MongoDB index initialization failed")


@app.get("/", tags=["Health"])
async def root():
    return {"status": "healthy", "app": "Nexus Admin", "version": __version__}


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    connected = test_mongo_connection()
    return {
        "status": "healthy" if connected else "degraded",
        "mongodb": "connected" if connected else "disconnected",
    }
