from typing import Optional
import uuid
import logging
from sqlalchemy.orm import Session
from sqlalchemy import func

from fitsocial.core.errors import AppError, ErrorCode, database_errors
from fitsocial.modules.follows.models.follow import Follow
from fitsocial.modules.follows.schemas.follow import FollowStats
from fitsocial.modules.profiles.services.profile import get_profile

logger = logging.getLogger(__name__)

def get_follow(db: Session, follower_id: str, following_id: str) -> Optional[Follow]:
    """Get follow edge by follower and followed user IDs"""
    with database_errors("get follow"):
        return db.query(Follow).filter(
            Follow.follower_id == follower_id,
            Follow.following_id == following_id
        ).first()

def follow_user(db: Session, follower_id: str, following_id: str) -> Follow:
    """Follow a user. Following someone already followed is a no-op."""
    if follower_id == following_id:
        raise AppError(ErrorCode.INVALID_INPUT, "Cannot follow yourself")

    if not get_profile(db, following_id):
        raise AppError(ErrorCode.NOT_FOUND, "User not found")

    existing = get_follow(db, follower_id, following_id)
    if existing:
        return existing

    follow = Follow(
        id=str(uuid.uuid4()),
        follower_id=follower_id,
        following_id=following_id,
    )
    with database_errors("follow user"):
        db.add(follow)
        db.commit()
        db.refresh(follow)

    logger.info(f"User {follower_id} followed {following_id}")
    return follow

def unfollow_user(db: Session, follower_id: str, following_id: str) -> bool:
    """Remove a follow edge. Returns whether one existed."""
    with database_errors("unfollow user"):
        deleted = db.query(Follow).filter(
            Follow.follower_id == follower_id,
            Follow.following_id == following_id
        ).delete(synchronize_session=False)
        db.commit()

    if deleted:
        logger.info(f"User {follower_id} unfollowed {following_id}")
    return bool(deleted)

def get_follow_stats(db: Session, user_id: str, viewer_id: str) -> FollowStats:
    """Follower and following counts of a user, and whether the viewer follows them"""
    with database_errors("get follow stats"):
        followers_count = db.query(func.count(Follow.id)).filter(Follow.following_id == user_id).scalar() or 0
        following_count = db.query(func.count(Follow.id)).filter(Follow.follower_id == user_id).scalar() or 0

    return FollowStats(
        followers_count=followers_count,
        following_count=following_count,
        is_following=get_follow(db, viewer_id, user_id) is not None,
    )
