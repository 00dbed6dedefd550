"""
Row mapping and per-post aggregation for feed entries.

Missing joined rows never raise: an absent author collapses to a placeholder
author, an absent workout to null.
"""
from typing import NamedTuple, Optional, Set

from fitsocial.core.config import settings
from fitsocial.modules.feed.services.repository import PostRow, SocialRepository
from fitsocial.modules.posts.schemas.post import PostEntry
from fitsocial.modules.profiles.models.profile import Profile
from fitsocial.modules.profiles.schemas.profile import AuthorSummary
from fitsocial.modules.workouts.models.workout import Workout
from fitsocial.modules.workouts.schemas.workout import WorkoutSummary


class PostAggregates(NamedTuple):
    likes_count: int
    comments_count: int
    reposts_count: int
    is_liked: bool


def aggregate_post(repo: SocialRepository, post_id: str, viewer_id: str) -> PostAggregates:
    """Live counts and like membership, one lookup at a time"""
    likes_count = repo.count_likes(post_id)
    comments_count = repo.count_comments(post_id)
    reposts_count = repo.count_reposts(post_id)
    is_liked = repo.has_liked(post_id, viewer_id)
    return PostAggregates(likes_count, comments_count, reposts_count, is_liked)


def placeholder_author(user_id: str) -> AuthorSummary:
    return AuthorSummary(
        id=user_id,
        username=settings.PLACEHOLDER_USERNAME,
        full_name=settings.PLACEHOLDER_USERNAME,
        avatar=None,
        is_following=False,
    )


def map_author(profile: Optional[Profile], fallback_id: str, following_ids: Set[str]) -> AuthorSummary:
    if profile is None:
        return placeholder_author(fallback_id)
    return AuthorSummary(
        id=profile.id,
        username=profile.username,
        full_name=profile.full_name,
        avatar=profile.avatar_url,
        is_following=profile.id in following_ids,
    )


def map_workout(workout: Optional[Workout]) -> Optional[WorkoutSummary]:
    if workout is None:
        return None
    return WorkoutSummary(
        id=workout.id,
        name=workout.name,
        description=workout.description,
        difficulty=workout.difficulty,
        duration_minutes=workout.duration_minutes,
    )


def map_post(row: PostRow, aggregates: PostAggregates, following_ids: Set[str]) -> PostEntry:
    post = row.post
    return PostEntry(
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
        author=map_author(row.author, post.user_id, following_ids),
        likes_count=aggregates.likes_count,
        comments_count=aggregates.comments_count,
        reposts_count=aggregates.reposts_count,
        is_liked=aggregates.is_liked,
    )
