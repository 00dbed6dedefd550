from typing import List, Optional
import logging
import uuid

from sqlalchemy import or_
from sqlalchemy.orm import Session

from fitsocial.core.errors import database_errors
from fitsocial.modules.workouts.models.workout import Workout
from fitsocial.modules.workouts.schemas.workout import WorkoutCreate

logger = logging.getLogger(__name__)

def get_visible_workout(db: Session, workout_id: str, user_id: str) -> Optional[Workout]:
    """Get a workout the user owns or that is public"""
    with database_errors("get workout"):
        return (
            db.query(Workout)
            .filter(Workout.id == workout_id)
            .filter(or_(Workout.user_id == user_id, Workout.is_public.is_(True)))
            .first()
        )

def get_user_workouts(db: Session, user_id: str) -> List[Workout]:
    """Get workouts owned by a user, newest first"""
    with database_errors("get workouts"):
        return (
            db.query(Workout)
            .filter(Workout.user_id == user_id)
            .order_by(Workout.created_at.desc())
            .all()
        )

def create_workout(db: Session, workout_in: WorkoutCreate, user_id: str) -> Workout:
    """Create new workout"""
    workout = Workout(
        id=str(uuid.uuid4()),
        user_id=user_id,
        **workout_in.model_dump(),
    )
    with database_errors("create workout"):
        db.add(workout)
        db.commit()
        db.refresh(workout)
    logger.info(f"Workout {workout.id} created by {user_id}")
    return workout

def mark_workout_shared(db: Session, workout_id: str, user_id: str) -> None:
    """Flag a user's workout as shared once their post links it. Failures are only logged."""
    try:
        workout = db.query(Workout).filter(Workout.id == workout_id, Workout.user_id == user_id).first()
        if workout:
            workout.is_shared = True
            db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to mark workout {workout_id} as shared: {e}")

def adjust_workout_counter(db: Session, workout_id: str, field: str, delta: int) -> None:
    """
    Read-then-write a workout counter (like_count, share_count), never below 0.
    Failures are only logged so the triggering action still succeeds.
    """
    try:
        workout = db.query(Workout).filter(Workout.id == workout_id).first()
        if not workout:
            return
        current = getattr(workout, field) or 0
        setattr(workout, field, max(0, current + delta))
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update workout {workout_id} {field}: {e}")
