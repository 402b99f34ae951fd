"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from satrecruit.api.routes.auth_routes import router as auth_router
from satrecruit.api.routes.department_routes import router as department_router
from satrecruit.api.routes.applicant_routes import router as applicant_router
from satrecruit.api.routes.about_routes import router as about_router
from satrecruit.api.routes.admin_routes import router as admin_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(department_router)
api_router.include_router(applicant_router)
api_router.include_router(about_router)
api_router.include_router(admin_router)
