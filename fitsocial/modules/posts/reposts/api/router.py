from typing import Any

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from fitsocial.core.config import settings
from fitsocial.core.errors import AppError, ErrorCode
from fitsocial.core.responses import paginated_response, success_response
from fitsocial.db.session import get_db
from fitsocial.deps import get_current_user
from fitsocial.modules.profiles.models.profile import Profile
from fitsocial.modules.posts.services.post import get_public_post
from fitsocial.modules.posts.reposts.schemas.repost import RepostToggle
from fitsocial.modules.posts.reposts.services.repost import get_user_reposts, toggle_repost

# Mounted under /social/posts
router = APIRouter()

# Mounted under /social/users
user_router = APIRouter()

@router.post("/{post_id}/repost")
def toggle_post_repost(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to repost"),
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """Repost a public post, or undo the repost"""
    post = get_public_post(db, post_id)
    if not post:
        raise AppError(ErrorCode.NOT_FOUND, "Post not found")

    reposted = toggle_repost(db, post, current_user.id)
    return success_response(RepostToggle(reposted=reposted), "Post reposted" if reposted else "Repost removed")

@user_router.get("/{user_id}/reposts")
def read_user_reposts(
    *,
    db: Session = Depends(get_db),
    user_id: str = Path(..., description="The ID of the reposting user"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.FEED_DEFAULT_LIMIT, ge=1, le=settings.FEED_MAX_LIMIT),
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """Reposts made by a user, newest first"""
    reposts, total = get_user_reposts(db, user_id, skip=(page - 1) * limit, limit=limit)
    return paginated_response(reposts, page=page, limit=limit, total=total)
