from typing import Any

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from fitsocial.core.errors import AppError, ErrorCode
from fitsocial.core.responses import created_response, success_response
from fitsocial.db.session import get_db
from fitsocial.deps import get_current_user
from fitsocial.modules.profiles.models.profile import Profile
from fitsocial.modules.workouts.schemas.workout import Workout as WorkoutSchema, WorkoutCreate
from fitsocial.modules.workouts.services.workout import (
    create_workout, get_user_workouts, get_visible_workout
)

router = APIRouter()

@router.get("")
def read_my_workouts(
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """List the current user's workouts"""
    workouts = get_user_workouts(db, current_user.id)
    return success_response([WorkoutSchema.model_validate(w) for w in workouts])

@router.post("", status_code=status.HTTP_201_CREATED)
def create_new_workout(
    *,
    db: Session = Depends(get_db),
    workout_in: WorkoutCreate,
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """Create a workout that posts can link to"""
    workout = create_workout(db, workout_in, current_user.id)
    return created_response(WorkoutSchema.model_validate(workout))

@router.get("/{workout_id}")
def read_workout_by_id(
    *,
    db: Session = Depends(get_db),
    workout_id: str,
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """Get an owned or public workout"""
    workout = get_visible_workout(db, workout_id, current_user.id)
    if not workout:
        raise AppError(ErrorCode.NOT_FOUND, "Workout not found")
    return success_response(WorkoutSchema.model_validate(workout))
