from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from fitsocial.core.errors import AppError, ErrorCode
from fitsocial.core.security import verify_access_token
from fitsocial.db.session import get_db
from fitsocial.modules.profiles.models.profile import Profile
from fitsocial.modules.profiles.services.profile import get_profile
from fitsocial.modules.feed.services.repository import SocialRepository

bearer_scheme = HTTPBearer(auto_error=False)

def get_current_user(
    db: Session = Depends(get_db),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Profile:
    """
    Dependency for getting the profile behind a verified bearer token
    """
    if credentials is None or not credentials.credentials:
        raise AppError(ErrorCode.UNAUTHORIZED)

    user_id = verify_access_token(credentials.credentials)
    if not user_id:
        raise AppError(ErrorCode.UNAUTHORIZED, "Could not validate credentials")

    user = get_profile(db, user_id=user_id)
    if not user:
        raise AppError(ErrorCode.NOT_FOUND, "User not found")

    if user.is_active is False:
        raise AppError(ErrorCode.FORBIDDEN, "Inactive user")

    return user

def get_social_repository(db: Session = Depends(get_db)) -> SocialRepository:
    """
    Dependency for the query interface used by the social and feed services
    """
    return SocialRepository(db)
