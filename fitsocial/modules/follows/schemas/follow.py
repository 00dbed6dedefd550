from fitsocial.core.schemas import CamelModel

class FollowState(CamelModel):
    """Follow state of the current user towards another user"""
    followed: bool

class FollowStats(CamelModel):
    followers_count: int = 0
    following_count: int = 0
    is_following: bool = False

class PostCount(CamelModel):
    count: int = 0
