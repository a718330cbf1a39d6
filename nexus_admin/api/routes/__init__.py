"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from nexus_admin.api.routes.auth_routes import router as auth_router
from nexus_admin.api.routes.user_routes import router as user_router
from nexus_admin.api.routes.enrollment_routes import router as enrollment_router
from nexus_admin.api.routes.training_routes import router as training_router
from nexus_admin.api.routes.product_routes import router as product_router
from nexus_admin.api.routes.blog_routes import router as blog_router
from nexus_admin.api.routes.announcement_routes import router as announcement_router
from nexus_admin.api.routes.job_routes import router as job_router
from nexus_admin.api.routes.internship_routes import router as internship_router
from nexus_admin.api.routes.team_routes import router as team_router
from nexus_admin.api.routes.dashboard_routes import router as dashboard_router
from nexus_admin.api.routes.settings_routes import router as settings_router
from nexus_admin.api.routes.content_routes import admin_router as content_admin_router
from nexus_admin.api.routes.content_routes import router as content_router
from nexus_admin.api.routes.seo_routes import router as seo_router
from nexus_admin.api.routes.upload_routes import router as upload_router

# Main API router
api_router = APIRouter()

# Include all sub-routers (enrollments before trainings: /training/enrollment
# must not be captured by /training/{training_id})
api_router.include_router(auth_router)
api_router.include_router(user_router)
api_router.include_router(enrollment_router)
api_router.include_router(training_router)
api_router.include_router(product_router)
api_router.include_router(blog_router)
api_router.include_router(announcement_router)
api_router.include_router(job_router)
api_router.include_router(internship_router)
api_router.include_router(team_router)
api_router.include_router(dashboard_router)
api_router.include_router(settings_router)
api_router.include_router(content_admin_router)
api_router.include_router(content_router)
api_router.include_router(seo_router)
api_router.include_router(upload_router)
