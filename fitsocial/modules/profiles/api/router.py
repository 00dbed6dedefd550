from typing import Any
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fitsocial.core.errors import AppError, ErrorCode
from fitsocial.core.responses import success_response
from fitsocial.db.session import get_db
from fitsocial.deps import get_current_user
from fitsocial.modules.profiles.models.profile import Profile
from fitsocial.modules.profiles.services.profile import get_profile, to_profile_schema

router = APIRouter()
logger = logging.getLogger(__name__)

def _validate_profile(db: Session, user_id: str) -> Profile:
    """Validate profile exists and return it or raise AppError"""
    profile = get_profile(db, user_id=user_id)
    if not profile:
        raise AppError(ErrorCode.NOT_FOUND, "User not found")
    return profile

@router.get("/me")
def read_user_me(
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """Get current user"""
    return success_response(to_profile_schema(current_user))

@router.get("/{user_id}")
def read_user_by_id(
    user_id: str,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """Get a specific user by id"""
    return success_response(to_profile_schema(_validate_profile(db, user_id)))
