from typing import Optional
from datetime import datetime

from fitsocial.core.schemas import CamelModel

class AuthorBase(CamelModel):
    id: str
    username: Optional[str] = None
    full_name: Optional[str] = None
    avatar: Optional[str] = None

class AuthorSummary(AuthorBase):
    """Author identity embedded in feed entries"""
    is_following: bool = False

class Profile(CamelModel):
    """Profile returned to client"""
    id: str
    username: Optional[str] = None
    full_name: Optional[str] = None
    avatar: Optional[str] = None
    bio: Optional[str] = None
    fitness_level: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
