from typing import Dict, Iterable, List, NamedTuple, Optional, Set

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from fitsocial.core.errors import database_errors
from fitsocial.modules.follows.models.follow import Follow
from fitsocial.modules.posts.comments.models.comment import PostComment
from fitsocial.modules.posts.likes.models.like import PostLike
from fitsocial.modules.posts.models.post import Post
from fitsocial.modules.posts.reposts.models.repost import PostRepost
from fitsocial.modules.profiles.models.profile import Profile
from fitsocial.modules.workouts.models.workout import Workout


class PostRow(NamedTuple):
    """A post with its outer-joined author profile and workout"""
    post: Post
    author: Optional[Profile]
    workout: Optional[Workout]


class SocialRepository:
    """
    Query interface over the social tables.

    Every method issues a single query; driver failures surface as
    DATABASE_ERROR app errors and are never swallowed.
    """

    def __init__(self, db: Session):
        self.db = db

    def _post_rows_query(self):
        return (
            self.db.query(Post, Profile, Workout)
            .outerjoin(Profile, Profile.id == Post.user_id)
            .outerjoin(Workout, Workout.id == Post.workout_id)
        )

    def list_public_posts(
        self,
        user_id: Optional[str] = None,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[PostRow]:
        """Public posts newest first, optionally narrowed to one author and a range"""
        query = self._post_rows_query().filter(Post.is_public.is_(True))
        if user_id:
            query = query.filter(Post.user_id == user_id)
        query = query.order_by(Post.created_at.desc(), Post.id)
        if offset is not None:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        with database_errors("get posts"):
            return [PostRow(*row) for row in query.all()]

    def count_public_posts(self, user_id: Optional[str] = None) -> int:
        query = self.db.query(func.count(Post.id)).filter(Post.is_public.is_(True))
        if user_id:
            query = query.filter(Post.user_id == user_id)
        with database_errors("count posts"):
            return query.scalar() or 0

    def get_public_posts_by_ids(self, post_ids: Iterable[str]) -> Dict[str, PostRow]:
        ids = list(set(post_ids))
        if not ids:
            return {}
        query = self._post_rows_query().filter(Post.id.in_(ids), Post.is_public.is_(True))
        with database_errors("get original posts"):
            rows = [PostRow(*row) for row in query.all()]
        return {row.post.id: row for row in rows}

    def get_visible_post(self, post_id: str, viewer_id: str) -> Optional[PostRow]:
        """A post the viewer owns or that is public"""
        query = self._post_rows_query().filter(
            Post.id == post_id,
            or_(Post.user_id == viewer_id, Post.is_public.is_(True)),
        )
        with database_errors("get post"):
            row = query.first()
        return PostRow(*row) if row else None

    def list_reposts(self) -> List[PostRepost]:
        """Every repost event, newest first"""
        query = self.db.query(PostRepost).order_by(PostRepost.reposted_at.desc(), PostRepost.id)
        with database_errors("get reposts"):
            return query.all()

    def get_profiles_by_ids(self, user_ids: Iterable[str]) -> Dict[str, Profile]:
        ids = list(set(user_ids))
        if not ids:
            return {}
        with database_errors("get profiles"):
            profiles = self.db.query(Profile).filter(Profile.id.in_(ids)).all()
        return {profile.id: profile for profile in profiles}

    def following_ids(self, user_id: str) -> Set[str]:
        with database_errors("get following"):
            rows = self.db.query(Follow.following_id).filter(Follow.follower_id == user_id).all()
        return {row[0] for row in rows}

    def is_following(self, follower_id: str, following_id: str) -> bool:
        with database_errors("check follow status"):
            follow = (
                self.db.query(Follow.id)
                .filter(Follow.follower_id == follower_id, Follow.following_id == following_id)
                .first()
            )
        return follow is not None

    def count_likes(self, post_id: str) -> int:
        with database_errors("count likes"):
            return self.db.query(func.count(PostLike.id)).filter(PostLike.post_id == post_id).scalar() or 0

    def count_comments(self, post_id: str) -> int:
        with database_errors("count comments"):
            return self.db.query(func.count(PostComment.id)).filter(PostComment.post_id == post_id).scalar() or 0

    def count_reposts(self, post_id: str) -> int:
        with database_errors("count reposts"):
            return (
                self.db.query(func.count(PostRepost.id))
                .filter(PostRepost.original_post_id == post_id)
                .scalar()
                or 0
            )

    def has_liked(self, post_id: str, user_id: str) -> bool:
        with database_errors("check like status"):
            like = (
                self.db.query(PostLike.id)
                .filter(PostLike.post_id == post_id, PostLike.user_id == user_id)
                .first()
            )
        return like is not None

    def has_reposted(self, post_id: str, user_id: str) -> bool:
        with database_errors("check repost status"):
            repost = (
                self.db.query(PostRepost.id)
                .filter(PostRepost.original_post_id == post_id, PostRepost.reposted_by_user_id == user_id)
                .first()
            )
        return repost is not None
