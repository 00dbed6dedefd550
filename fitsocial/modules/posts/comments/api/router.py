from typing import Any

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from fitsocial.core.config import settings
from fitsocial.core.errors import AppError, ErrorCode
from fitsocial.core.responses import created_response, deleted_response, paginated_response
from fitsocial.db.session import get_db
from fitsocial.deps import get_current_user
from fitsocial.modules.profiles.models.profile import Profile
from fitsocial.modules.posts.services.post import get_visible_post
from fitsocial.modules.posts.comments.schemas.comment import CommentCreate
from fitsocial.modules.posts.comments.services.comment import (
    create_comment, delete_comment, get_comments_with_replies
)

router = APIRouter()

def _validate_post(db: Session, post_id: str, user_id: str) -> None:
    """Validate the post is visible to the user or raise AppError"""
    if not get_visible_post(db, post_id, user_id):
        raise AppError(ErrorCode.NOT_FOUND, "Post not found")

@router.post("", status_code=status.HTTP_201_CREATED)
def create_post_comment(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to comment on"),
    comment_in: CommentCreate,
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """Comment on a post, or reply to one of its comments"""
    _validate_post(db, post_id, current_user.id)
    comment = create_comment(db, post_id, comment_in, current_user.id)
    return created_response(comment, "Comment created successfully")

@router.get("")
def read_post_comments(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to get comments for"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.FEED_DEFAULT_LIMIT, ge=1, le=settings.FEED_MAX_LIMIT),
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """Top-level comments newest first, with their replies"""
    _validate_post(db, post_id, current_user.id)
    comments, total = get_comments_with_replies(db, post_id, skip=(page - 1) * limit, limit=limit)
    return paginated_response(comments, page=page, limit=limit, total=total)

@router.delete("/{comment_id}")
def delete_post_comment(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post"),
    comment_id: str = Path(..., description="The ID of the comment to delete"),
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """Delete a comment written by the current user"""
    delete_comment(db, post_id, comment_id, current_user.id)
    return deleted_response("Comment deleted successfully")
