from typing import Dict, Iterable, Optional
from sqlalchemy.orm import Session

from fitsocial.core.errors import database_errors
from fitsocial.modules.profiles.models.profile import Profile
from fitsocial.modules.profiles.schemas.profile import AuthorBase, Profile as ProfileSchema

def get_profile(db: Session, user_id: str) -> Optional[Profile]:
    """Get profile by ID"""
    with database_errors("get profile"):
        return db.query(Profile).filter(Profile.id == user_id).first()

def get_profiles_by_ids(db: Session, user_ids: Iterable[str]) -> Dict[str, Profile]:
    """Get profiles keyed by ID; unknown IDs are simply absent"""
    ids = list(set(user_ids))
    if not ids:
        return {}
    with database_errors("get profiles"):
        profiles = db.query(Profile).filter(Profile.id.in_(ids)).all()
    return {profile.id: profile for profile in profiles}

def to_profile_schema(profile: Profile) -> ProfileSchema:
    return ProfileSchema(
        id=profile.id,
        username=profile.username,
        full_name=profile.full_name,
        avatar=profile.avatar_url,
        bio=profile.bio,
        fitness_level=profile.fitness_level,
        is_active=profile.is_active if profile.is_active is not None else True,
        created_at=profile.created_at,
    )

def to_author_base(profile: Optional[Profile]) -> Optional[AuthorBase]:
    if profile is None:
        return None
    return AuthorBase(
        id=profile.id,
        username=profile.username or "",
        full_name=profile.full_name,
        avatar=profile.avatar_url,
    )
