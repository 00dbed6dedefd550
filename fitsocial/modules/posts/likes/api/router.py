from typing import Any

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from fitsocial.core.errors import AppError, ErrorCode
from fitsocial.core.responses import success_response
from fitsocial.db.session import get_db
from fitsocial.deps import get_current_user
from fitsocial.modules.profiles.models.profile import Profile
from fitsocial.modules.posts.services.post import get_visible_post
from fitsocial.modules.posts.likes.schemas.like import LikeToggle
from fitsocial.modules.posts.likes.services.like import toggle_like

router = APIRouter()

@router.post("/{post_id}/like")
def toggle_post_like(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to like or unlike"),
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """Like a post, or unlike it when already liked"""
    post = get_visible_post(db, post_id, current_user.id)
    if not post:
        raise AppError(ErrorCode.NOT_FOUND, "Post not found")

    liked = toggle_like(db, post, current_user.id)
    return success_response(LikeToggle(liked=liked), "Post liked" if liked else "Post unliked")
