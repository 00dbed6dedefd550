from typing import Optional
from datetime import datetime

from fitsocial.core.schemas import CamelModel
from fitsocial.modules.posts.schemas.post import PostRecord
from fitsocial.modules.profiles.schemas.profile import AuthorBase

class RepostToggle(CamelModel):
    """Repost state of the current user after a toggle"""
    reposted: bool

class UserRepost(CamelModel):
    """A repost made by a user, with the original post and its author"""
    id: str
    reposted_by_user_id: str
    reposted_at: Optional[datetime] = None
    original_post: PostRecord
    original_author: Optional[AuthorBase] = None
