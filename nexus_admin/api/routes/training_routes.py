"""
Training Routes

GET /training - List trainings with filters (?summary=true for counts)
GET /training/{training_id} - Get training details
POST /training - Create training (admin, instructor, manager)
PUT /training/{training_id} - Update training (admin, instructor, manager)
DELETE /training/{training_id} - Delete training (admin only)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from nexus_admin.api.responses import ok
from nexus_admin.core.auth import TRAINING_STAFF, require_roles
from nexus_admin.schemas.schemas import TrainingCreate, TrainingUpdate
from nexus_admin.services.training_service import TrainingService

router = APIRouter(prefix="/training", tags=["Training"])


@router.get("")
async def list_trainings(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: Optional[str] = Query(None, description="Search in title, description and instructor"),
    category: Optional[str] = Query(None),
    level: Optional[str] = Query(None),
    featured: Optional[bool] = Query(None),
    popular: Optional[bool] = Query(None),
    active: Optional[bool] = Query(True),
    summary: bool = Query(False, description="Return aggregate counts only")
):
    """List trainings. Only active ones unless ``active=false`` is passed."""
    service = TrainingService()
    if summary:
        return ok(service.training_summary())
    return ok(service.list_trainings(page, limit, search, category, level, featured, popular, active))


@router.get("/{training_id}")
async def get_training(training_id: str):
    return ok(TrainingService().get(training_id))


@router.post("", status_code=201)
async def create_training(data: TrainingCreate, user: dict = Depends(require_roles(*TRAINING_STAFF))):
    training = TrainingService().create(data.model_dump(), created_by=user["id"])
    return ok(training, message="Training created successfully")


@router.put("/{training_id}")
async def update_training(
    training_id: str,
    data: TrainingUpdate,
    user: dict = Depends(require_roles(*TRAINING_STAFF))
):
    service = TrainingService()
    updated = service.update(training_id, data.model_dump(exclude_unset=True, exclude_none=True))
    return ok(service.to_response(updated), message="Training updated successfully")


@router.delete("/{training_id}")
async def delete_training(training_id: str, user: dict = Depends(require_roles("admin"))):
    TrainingService().delete(training_id)
    return ok(message="Training deleted successfully")
