from typing import Any

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from fitsocial.core.errors import AppError, ErrorCode
from fitsocial.core.responses import created_response, deleted_response, success_response, updated_response
from fitsocial.db.session import get_db
from fitsocial.deps import get_current_user, get_social_repository
from fitsocial.modules.feed.services.repository import SocialRepository
from fitsocial.modules.profiles.models.profile import Profile
from fitsocial.modules.posts.schemas.post import PostCreate, PostRecord, PostUpdate
from fitsocial.modules.posts.services.post import (
    create_post, delete_post, get_post_detail, update_post
)


router = APIRouter()

@router.post("", status_code=status.HTTP_201_CREATED)
def create_new_post(
    *,
    db: Session = Depends(get_db),
    post_in: PostCreate,
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """
    Create new post, optionally linked to a workout.
    """
    post = create_post(db, post_in, current_user.id)
    return created_response(PostRecord.model_validate(post), "Post created successfully")

@router.get("/{post_id}")
def read_post_by_id(
    *,
    repo: SocialRepository = Depends(get_social_repository),
    post_id: str,
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """
    Get a public or owned post by ID.
    """
    post = get_post_detail(repo, post_id, current_user.id)
    if not post:
        raise AppError(ErrorCode.NOT_FOUND, "Post not found")
    return success_response(post)

@router.put("/{post_id}")
def update_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    post_in: PostUpdate,
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """
    Update an owned post.
    """
    post = update_post(db, post_id, current_user.id, post_in)
    return updated_response(PostRecord.model_validate(post), "Post updated successfully")

@router.delete("/{post_id}")
def delete_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """
    Delete an owned post together with its likes, comments and reposts.
    """
    if not delete_post(db, post_id, current_user.id):
        raise AppError(ErrorCode.NOT_FOUND, "Post not found or access denied")
    return deleted_response("Post deleted successfully")
