"""
Satellite Team Recruitment API - Main Application

FastAPI backend with:
- Relational store (PostgreSQL in production) via SQLAlchemy
- Resume uploads stored on disk
- JWT authentication for the admin routes
- Department seed on first start

Run: uvicorn satrecruit.main:app --reload
"""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from satrecruit.api.routes import api_router
from satrecruit.core.config import get_settings
from satrecruit.core.exceptions import AuthenticationError, RecruitError, ValidationError
from satrecruit.core.logging_config import setup_logging
from satrecruit.db.seed import ensure_admin_user, seed_departments
from satrecruit.db.session import init_db, test_db_connection
from satrecruit.utils.file_upload import ensure_upload_dir

settings = get_settings()
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Satellite Team Recruitment API",
    description="""
    Backend of the student satellite team recruitment site.

    ## Features
    - **Departments**: Listing and details of the recruiting departments
    - **Applicants**: Application form with optional resume upload (PDF/DOC/DOCX)
    - **Admin**: Applicant management and "about us" editing (JWT protected)
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
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


# ============================================================
# ERROR HANDLERS
# ============================================================

@app.exception_handler(RecruitError)
async def recruit_error_handler(request: Request, exc: RecruitError):
    body = {"detail": exc.message}
    headers = None
    if isinstance(exc, ValidationError):
        body["errors"] = exc.errors
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content=body, headers=headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed path ids and JSON bodies are client errors: 400, not 422."""
    errors = {}
    for err in exc.errors():
        loc = [str(part) for part in err["loc"] if part not in ("body", "path", "query")]
        errors.setdefault(".".join(loc) or "body", err["msg"])
    return JSONResponse(status_code=400, content={"detail": "Validation failed", "errors": errors})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# ============================================================
# STARTUP
# ============================================================

@app.on_event("startup")
async def startup_event():
    """Create tables, seed departments, bootstrap the admin account."""
    ensure_upload_dir()
    try:
        init_db()
        seed_departments()
        ensure_admin_user()
        logger.info("Database initialized")
    except RecruitError as e:
        # Keep serving; store-backed routes answer 500 until the database is back
        logger.error("Database initialization failed: %s", e)


@app.get("/", tags=["Root"])
async def root():
    """API banner with documentation links."""
    return {
        "app": "Satellite Team Recruitment API",
        "version": "1.0.0",
        "documentation": {"swagger": "/docs", "redoc": "/redoc"},
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    db_ok = test_db_connection()
    try:
        upload_ok = os.access(ensure_upload_dir(), os.W_OK)
    except OSError:
        upload_ok = False

    return {
        "status": "healthy" if db_ok and upload_ok else "degraded",
        "database": "connected" if db_ok else "disconnected",
        "uploads": "writable" if upload_ok else "unavailable",
    }
