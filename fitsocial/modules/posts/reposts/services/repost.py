from typing import List, Optional, Tuple
import logging
import uuid

from sqlalchemy import func
from sqlalchemy.orm import Session

from fitsocial.core.errors import database_errors
from fitsocial.modules.posts.models.post import Post
from fitsocial.modules.posts.reposts.models.repost import PostRepost
from fitsocial.modules.posts.reposts.schemas.repost import UserRepost
from fitsocial.modules.posts.schemas.post import PostRecord
from fitsocial.modules.profiles.services.profile import get_profiles_by_ids, to_author_base
from fitsocial.modules.workouts.services.workout import adjust_workout_counter

logger = logging.getLogger(__name__)

def get_repost(db: Session, post_id: str, user_id: str) -> Optional[PostRepost]:
    """Get repost by original post ID and reposting user ID"""
    with database_errors("get repost"):
        return (
            db.query(PostRepost)
            .filter(PostRepost.original_post_id == post_id, PostRepost.reposted_by_user_id == user_id)
            .first()
        )

def toggle_repost(db: Session, post: Post, user_id: str) -> bool:
    """
    Repost the post, or undo an existing repost.

    The post's reposts_count and the linked workout's share_count are read,
    adjusted and written back. Concurrent toggles can lose an update.
    """
    existing = get_repost(db, post.id, user_id)
    delta = -1 if existing else 1

    with database_errors("toggle repost"):
        if existing:
            db.delete(existing)
        else:
            db.add(PostRepost(
                id=str(uuid.uuid4()),
                original_post_id=post.id,
                reposted_by_user_id=user_id,
            ))
        post.reposts_count = max(0, (post.reposts_count or 0) + delta)
        db.commit()

    reposted = existing is None
    logger.info(f"User {user_id} {'reposted' if reposted else 'removed repost of'} post {post.id}")

    if post.workout_id:
        adjust_workout_counter(db, post.workout_id, "share_count", delta)

    return reposted

def get_user_reposts(db: Session, user_id: str, skip: int = 0, limit: int = 20) -> Tuple[List[UserRepost], int]:
    """A user's reposts of public posts, newest first, and their total"""
    with database_errors("get user reposts"):
        query = (
            db.query(PostRepost, Post)
            .join(Post, Post.id == PostRepost.original_post_id)
            .filter(PostRepost.reposted_by_user_id == user_id, Post.is_public.is_(True))
        )
        total = query.with_entities(func.count(PostRepost.id)).scalar() or 0
        rows = (
            query
            .order_by(PostRepost.reposted_at.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    authors = get_profiles_by_ids(db, [post.user_id for _, post in rows])
    reposts = [
        UserRepost(
            id=repost.id,
            reposted_by_user_id=repost.reposted_by_user_id,
            reposted_at=repost.reposted_at,
            original_post=PostRecord.model_validate(post),
            original_author=to_author_base(authors.get(post.user_id)),
        )
        for repost, post in rows
    ]
    return reposts, total
