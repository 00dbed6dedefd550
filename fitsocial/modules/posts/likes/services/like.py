from typing import Optional
import logging
import uuid

from sqlalchemy.orm import Session

from fitsocial.core.errors import database_errors
from fitsocial.modules.posts.likes.models.like import PostLike
from fitsocial.modules.posts.models.post import Post
from fitsocial.modules.workouts.services.workout import adjust_workout_counter

logger = logging.getLogger(__name__)

def get_like(db: Session, user_id: str, post_id: str) -> Optional[PostLike]:
    """Get like by user ID and post ID"""
    with database_errors("get like"):
        return (
            db.query(PostLike)
            .filter(PostLike.user_id == user_id, PostLike.post_id == post_id)
            .first()
        )

def toggle_like(db: Session, post: Post, user_id: str) -> bool:
    """
    Like the post, or remove the like when one exists.
    Returns the resulting like state.
    """
    existing = get_like(db, user_id, post.id)

    with database_errors("toggle like"):
        if existing:
            db.delete(existing)
            liked = False
        else:
            db.add(PostLike(id=str(uuid.uuid4()), user_id=user_id, post_id=post.id))
            liked = True
        db.commit()

    logger.info(f"User {user_id} {'liked' if liked else 'unliked'} post {post.id}")

    if post.workout_id:
        adjust_workout_counter(db, post.workout_id, "like_count", 1 if liked else -1)

    return liked
