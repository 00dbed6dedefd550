# Seed helpers shared by the test modules
from datetime import datetime, timedelta
import uuid

from fitsocial.core.security import create_access_token
from fitsocial.modules.follows.models.follow import Follow
from fitsocial.modules.posts.comments.models.comment import PostComment
from fitsocial.modules.posts.likes.models.like import PostLike
from fitsocial.modules.posts.models.post import Post
from fitsocial.modules.posts.reposts.models.repost import PostRepost
from fitsocial.modules.profiles.models.profile import Profile
from fitsocial.modules.workouts.models.workout import Workout

BASE_TIME = datetime(2024, 5, 1, 12, 0, 0)


def auth_headers(user_id: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


def at(minutes: int) -> datetime:
    """A fixed timestamp offset from BASE_TIME"""
    return BASE_TIME + timedelta(minutes=minutes)


def make_profile(db, user_id: str, username: str = None, **kwargs) -> Profile:
    profile = Profile(
        id=user_id,
        username=username or user_id,
        full_name=kwargs.pop("full_name", f"{user_id.title()} Tester"),
        created_at=kwargs.pop("created_at", BASE_TIME),
        **kwargs,
    )
    db.add(profile)
    db.commit()
    return profile


def make_workout(db, user_id: str, name: str = "Leg day", **kwargs) -> Workout:
    workout = Workout(
        id=kwargs.pop("id", str(uuid.uuid4())),
        user_id=user_id,
        name=name,
        created_at=kwargs.pop("created_at", BASE_TIME),
        **kwargs,
    )
    db.add(workout)
    db.commit()
    return workout


def make_post(db, user_id: str, post_id: str = None, created_at: datetime = BASE_TIME, **kwargs) -> Post:
    post = Post(
        id=post_id or str(uuid.uuid4()),
        user_id=user_id,
        content=kwargs.pop("content", f"post by {user_id}"),
        created_at=created_at,
        updated_at=created_at,
        **kwargs,
    )
    db.add(post)
    db.commit()
    return post


def add_likes(db, post_id: str, user_ids) -> None:
    for user_id in user_ids:
        db.add(PostLike(id=str(uuid.uuid4()), user_id=user_id, post_id=post_id, created_at=BASE_TIME))
    db.commit()


def add_comments(db, post_id: str, user_id: str, count: int) -> None:
    for i in range(count):
        db.add(PostComment(
            id=str(uuid.uuid4()),
            user_id=user_id,
            post_id=post_id,
            content=f"comment {i}",
            created_at=at(i),
        ))
    db.commit()


def add_repost(db, post_id: str, user_id: str, reposted_at: datetime, repost_id: str = None) -> PostRepost:
    repost = PostRepost(
        id=repost_id or str(uuid.uuid4()),
        original_post_id=post_id,
        reposted_by_user_id=user_id,
        reposted_at=reposted_at,
    )
    db.add(repost)
    db.commit()
    return repost


def add_follow(db, follower_id: str, following_id: str) -> None:
    db.add(Follow(id=str(uuid.uuid4()), follower_id=follower_id, following_id=following_id))
    db.commit()
