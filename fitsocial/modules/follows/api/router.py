from typing import Any

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from fitsocial.core.responses import success_response
from fitsocial.db.session import get_db
from fitsocial.deps import get_current_user, get_social_repository
from fitsocial.modules.feed.services.repository import SocialRepository
from fitsocial.modules.profiles.models.profile import Profile
from fitsocial.modules.follows.schemas.follow import FollowState, PostCount
from fitsocial.modules.follows.services.follow import follow_user, get_follow_stats, unfollow_user

router = APIRouter()

@router.post("/{user_id}/follow")
def follow(
    *,
    db: Session = Depends(get_db),
    user_id: str = Path(..., description="The ID of the user to follow"),
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """Follow a user"""
    follow_user(db, current_user.id, user_id)
    return success_response(FollowState(followed=True), "User followed")

@router.post("/{user_id}/unfollow")
def unfollow(
    *,
    db: Session = Depends(get_db),
    user_id: str = Path(..., description="The ID of the user to unfollow"),
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """Stop following a user"""
    unfollow_user(db, current_user.id, user_id)
    return success_response(FollowState(followed=False), "User unfollowed")

@router.get("/{user_id}/stats")
def read_follow_stats(
    *,
    db: Session = Depends(get_db),
    user_id: str = Path(..., description="The ID of the user"),
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """Follower and following counts"""
    return success_response(get_follow_stats(db, user_id, current_user.id))

@router.get("/{user_id}/posts/count")
def read_post_count(
    *,
    repo: SocialRepository = Depends(get_social_repository),
    user_id: str = Path(..., description="The ID of the user"),
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """Number of public posts by a user"""
    return success_response(PostCount(count=repo.count_public_posts(user_id)))
