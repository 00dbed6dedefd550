from typing import Dict, List, Optional, Tuple
import logging
import uuid

from sqlalchemy import func
from sqlalchemy.orm import Session

from fitsocial.core.errors import AppError, ErrorCode, database_errors
from fitsocial.modules.posts.comments.models.comment import PostComment
from fitsocial.modules.posts.comments.schemas.comment import (
    Comment as CommentSchema, CommentCreate, CommentWithReplies
)
from fitsocial.modules.profiles.models.profile import Profile
from fitsocial.modules.profiles.services.profile import get_profiles_by_ids, to_author_base

logger = logging.getLogger(__name__)

def get_comment(db: Session, comment_id: str) -> Optional[PostComment]:
    """Get comment by ID"""
    with database_errors("get comment"):
        return db.query(PostComment).filter(PostComment.id == comment_id).first()

def _to_schema(comment: PostComment, authors: Dict[str, Profile]) -> CommentSchema:
    return CommentSchema(
        id=comment.id,
        post_id=comment.post_id,
        user_id=comment.user_id,
        content=comment.content,
        parent_comment_id=comment.parent_comment_id,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
        author=to_author_base(authors.get(comment.user_id)),
    )

def get_comments_with_replies(
    db: Session, post_id: str, skip: int = 0, limit: int = 20
) -> Tuple[List[CommentWithReplies], int]:
    """
    Top-level comments of a post, newest first, each with its replies.
    Returns the page and the total number of top-level comments.
    """
    with database_errors("get comments"):
        top_level = db.query(PostComment).filter(
            PostComment.post_id == post_id,
            PostComment.parent_comment_id.is_(None),
        )
        total = top_level.with_entities(func.count(PostComment.id)).scalar() or 0
        comments = (
            top_level
            .order_by(PostComment.created_at.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

        replies: List[PostComment] = []
        if comments:
            replies = (
                db.query(PostComment)
                .filter(PostComment.parent_comment_id.in_([c.id for c in comments]))
                .order_by(PostComment.created_at.asc())
                .all()
            )

    authors = get_profiles_by_ids(db, [c.user_id for c in comments] + [r.user_id for r in replies])

    replies_by_parent: Dict[str, List[CommentSchema]] = {}
    for reply in replies:
        replies_by_parent.setdefault(reply.parent_comment_id, []).append(_to_schema(reply, authors))

    result = [
        CommentWithReplies(
            **_to_schema(comment, authors).model_dump(),
            replies=replies_by_parent.get(comment.id, []),
        )
        for comment in comments
    ]
    return result, total

def create_comment(db: Session, post_id: str, comment_in: CommentCreate, user_id: str) -> CommentSchema:
    """Create a comment, or a reply when parent_comment_id is given"""
    if comment_in.parent_comment_id:
        parent = get_comment(db, comment_in.parent_comment_id)
        if not parent or parent.post_id != post_id:
            raise AppError(ErrorCode.INVALID_INPUT, "Parent comment does not belong to this post")
        # Threads are one level deep
        if parent.parent_comment_id:
            raise AppError(ErrorCode.INVALID_INPUT, "Cannot reply to a reply")

    comment = PostComment(
        id=str(uuid.uuid4()),
        user_id=user_id,
        post_id=post_id,
        content=comment_in.content,
        parent_comment_id=comment_in.parent_comment_id,
    )
    with database_errors("create comment"):
        db.add(comment)
        db.commit()
        db.refresh(comment)

    logger.info(f"Comment {comment.id} created on post {post_id} by {user_id}")
    return _to_schema(comment, get_profiles_by_ids(db, [user_id]))

def _reply_levels(db: Session, comment_id: str) -> List[List[str]]:
    """IDs of every reply below a comment, grouped by depth"""
    levels: List[List[str]] = []
    frontier = [comment_id]
    while frontier:
        rows = db.query(PostComment.id).filter(PostComment.parent_comment_id.in_(frontier)).all()
        frontier = [row[0] for row in rows]
        if frontier:
            levels.append(frontier)
    return levels

def delete_comment(db: Session, post_id: str, comment_id: str, user_id: str) -> None:
    """Delete an owned comment and its replies"""
    comment = get_comment(db, comment_id)
    if not comment or comment.post_id != post_id:
        raise AppError(ErrorCode.NOT_FOUND, "Comment not found")
    if comment.user_id != user_id:
        raise AppError(ErrorCode.FORBIDDEN, "Not enough permissions")

    with database_errors("delete comment"):
        levels = _reply_levels(db, comment.id)
        # Deepest replies first
        for ids in reversed(levels):
            db.query(PostComment).filter(PostComment.id.in_(ids)).delete(synchronize_session=False)
        db.delete(comment)
        db.commit()
    logger.info(f"Comment {comment_id} deleted by {user_id}")
