from typing import Optional
import uuid
import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session

from fitsocial.core.errors import AppError, ErrorCode, database_errors
from fitsocial.modules.feed.services.mapping import aggregate_post, map_workout
from fitsocial.modules.feed.services.repository import SocialRepository
from fitsocial.modules.posts.models.post import Post
from fitsocial.modules.posts.schemas.post import PostCreate, PostDetail, PostUpdate
from fitsocial.modules.posts.comments.models.comment import PostComment
from fitsocial.modules.posts.likes.models.like import PostLike
from fitsocial.modules.posts.reposts.models.repost import PostRepost
from fitsocial.modules.profiles.schemas.profile import AuthorSummary
from fitsocial.modules.workouts.services.workout import get_visible_workout, mark_workout_shared

logger = logging.getLogger(__name__)

def get_public_post(db: Session, post_id: str) -> Optional[Post]:
    with database_errors("get post"):
        return db.query(Post).filter(Post.id == post_id, Post.is_public.is_(True)).first()

def get_visible_post(db: Session, post_id: str, user_id: str) -> Optional[Post]:
    """Get a post that is public or owned by user_id"""
    with database_errors("get post"):
        return (
            db.query(Post)
            .filter(Post.id == post_id)
            .filter(or_(Post.is_public.is_(True), Post.user_id == user_id))
            .first()
        )

def get_post_detail(repo: SocialRepository, post_id: str, viewer_id: str) -> Optional[PostDetail]:
    """Post visible to the viewer with live counts and the viewer's relations to it"""
    row = repo.get_visible_post(post_id, viewer_id)
    if row is None:
        return None

    post = row.post
    aggregates = aggregate_post(repo, post.id, viewer_id)
    is_reposted = repo.has_reposted(post.id, viewer_id)

    author = None
    if row.author is not None:
        author = AuthorSummary(
            id=row.author.id,
            username=row.author.username,
            full_name=row.author.full_name,
            avatar=row.author.avatar_url,
            is_following=repo.is_following(viewer_id, post.user_id),
        )

    return PostDetail(
        id=post.id,
        content=post.content or "",
        image_urls=post.image_urls or [],
        hashtags=post.hashtags or [],
        workout_id=post.workout_id,
        workout=map_workout(row.workout),
        is_public=True if post.is_public is None else post.is_public,
        created_at=post.created_at,
        updated_at=post.updated_at,
        user_id=post.user_id,
        author=author,
        likes_count=aggregates.likes_count,
        comments_count=aggregates.comments_count,
        reposts_count=aggregates.reposts_count,
        is_liked=aggregates.is_liked,
        is_reposted=is_reposted,
    )

def create_post(db: Session, post_in: PostCreate, user_id: str) -> Post:
    """Create new post"""
    logger.info(f"Creating post for user ID: {user_id}")
    if post_in.workout_id:
        workout = get_visible_workout(db, post_in.workout_id, user_id)
        if not workout:
            raise AppError(ErrorCode.NOT_FOUND, "Workout not found")
        if workout.user_id != user_id:
            raise AppError(ErrorCode.FORBIDDEN, "Only your own workouts can be linked to a post")

    post = Post(
        id=str(uuid.uuid4()),
        user_id=user_id,
        content=post_in.content,
        post_type=post_in.post_type,
        workout_id=post_in.workout_id,
        image_urls=[image.url for image in post_in.images or [] if image.url],
        hashtags=list(post_in.tags or []),
        is_public=post_in.is_public,
    )
    with database_errors("create post"):
        db.add(post)
        db.commit()
        db.refresh(post)

    if post_in.workout_id:
        mark_workout_shared(db, post_in.workout_id, user_id)

    return post

def update_post(db: Session, post_id: str, user_id: str, post_in: PostUpdate) -> Post:
    """Update post owned by user_id"""
    logger.info(f"Updating post with ID: {post_id}")
    with database_errors("update post"):
        db_post = db.query(Post).filter(Post.id == post_id, Post.user_id == user_id).first()
    if not db_post:
        raise AppError(ErrorCode.NOT_FOUND, "Post not found or access denied")

    update_data = post_in.model_dump(exclude_unset=True)
    if "content" in update_data and update_data["content"] is not None:
        db_post.content = update_data["content"]
    if "images" in update_data:
        db_post.image_urls = [image.url for image in post_in.images or [] if image.url]
    if "tags" in update_data:
        db_post.hashtags = list(post_in.tags or [])
    if "is_public" in update_data and update_data["is_public"] is not None:
        db_post.is_public = update_data["is_public"]

    with database_errors("update post"):
        db.commit()
        db.refresh(db_post)

    return db_post

def delete_post(db: Session, post_id: str, user_id: str) -> bool:
    """
    Delete a post owned by user_id and all associated likes, comments and reposts.
    Returns False when there was nothing to delete.
    """
    logger.info(f"Deleting post with ID: {post_id}")
    with database_errors("delete post"):
        post = db.query(Post).filter(Post.id == post_id, Post.user_id == user_id).first()
        if not post:
            return False

        # Children first to maintain referential integrity
        db.query(PostLike).filter(PostLike.post_id == post.id).delete(synchronize_session=False)
        db.query(PostComment).filter(PostComment.post_id == post.id).delete(synchronize_session=False)
        db.query(PostRepost).filter(PostRepost.original_post_id == post.id).delete(synchronize_session=False)

        db.delete(post)
        db.commit()
    return True
