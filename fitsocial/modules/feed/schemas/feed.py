from typing import Annotated, List, Literal, Optional, Union
from datetime import datetime
from pydantic import Field

from fitsocial.core.schemas import CamelModel
from fitsocial.modules.posts.schemas.post import PostEntry
from fitsocial.modules.profiles.schemas.profile import AuthorSummary
from fitsocial.modules.workouts.schemas.workout import WorkoutSummary

class RepostEntry(CamelModel):
    """Synthetic feed entry wrapping a reposted original post"""
    kind: Literal["repost"] = "repost"
    is_repost: Literal[True] = True
    id: str
    content: str = ""
    image_urls: List[str] = []
    hashtags: List[str] = []
    workout_id: Optional[str] = None
    workout: Optional[WorkoutSummary] = None
    is_public: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    user_id: str
    reposted_by: AuthorSummary
    reposted_at: Optional[datetime] = None
    original_post: PostEntry
    likes_count: int = 0
    comments_count: int = 0
    reposts_count: int = 0
    is_liked: bool = False

FeedEntry = Annotated[Union[PostEntry, RepostEntry], Field(discriminator="kind")]

class FeedPage(CamelModel):
    """Feed response model returned to client"""
    posts: List[FeedEntry]
    total: int
