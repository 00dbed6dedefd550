from typing import Optional, List, Literal
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from fitsocial.core.schemas import CamelModel
from fitsocial.modules.profiles.schemas.profile import AuthorSummary
from fitsocial.modules.workouts.schemas.workout import WorkoutSummary

POST_TYPES = ["achievement", "routine", "tip", "progress", "motivation", "question", "general"]

class PostImage(BaseModel):
    url: str = Field(..., min_length=1)
    alt: Optional[str] = None

class PostCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=2000)
    images: Optional[List[PostImage]] = None
    workout_id: Optional[str] = None
    tags: Optional[List[str]] = None
    is_public: bool = True
    post_type: str = "general"

    @field_validator("post_type")
    @classmethod
    def validate_post_type(cls, v):
        if v not in POST_TYPES:
            raise ValueError(f"Post type must be one of: {', '.join(POST_TYPES)}")
        return v

class PostUpdate(BaseModel):
    content: Optional[str] = Field(None, min_length=1, max_length=2000)
    images: Optional[List[PostImage]] = None
    tags: Optional[List[str]] = None
    is_public: Optional[bool] = None

class PostRecord(CamelModel):
    """Stored post returned after create/update"""
    id: str
    user_id: str
    content: str
    post_type: str = "general"
    workout_id: Optional[str] = None
    image_urls: List[str] = []
    hashtags: List[str] = []
    likes_count: int = 0
    comments_count: int = 0
    shares_count: int = 0
    reposts_count: int = 0
    is_public: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("image_urls", "hashtags", mode="before")
    @classmethod
    def default_empty_list(cls, v):
        return v or []

    @field_validator("likes_count", "comments_count", "shares_count", "reposts_count", mode="before")
    @classmethod
    def default_zero(cls, v):
        return v or 0

    @field_validator("post_type", mode="before")
    @classmethod
    def default_post_type(cls, v):
        return v or "general"

    @field_validator("is_public", mode="before")
    @classmethod
    def default_public(cls, v):
        return True if v is None else v

class PostEntry(CamelModel):
    """Native post as shown in the feed, with live aggregates"""
    kind: Literal["post"] = "post"
    is_repost: Literal[False] = False
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
    author: AuthorSummary
    likes_count: int = 0
    comments_count: int = 0
    reposts_count: int = 0
    is_liked: bool = False

class PostDetail(PostEntry):
    """Single post; author is null when the profile is missing"""
    author: Optional[AuthorSummary] = None
    is_reposted: bool = False
