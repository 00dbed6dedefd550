from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field

from fitsocial.core.schemas import CamelModel
from fitsocial.modules.profiles.schemas.profile import AuthorBase

class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=500)
    parent_comment_id: Optional[str] = None

class Comment(CamelModel):
    """Comment returned to client"""
    id: str
    post_id: str
    user_id: str
    content: str
    parent_comment_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    author: Optional[AuthorBase] = None

class CommentWithReplies(Comment):
    """Top-level comment with its replies, oldest first"""
    replies: List[Comment] = []
