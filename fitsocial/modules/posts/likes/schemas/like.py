from fitsocial.core.schemas import CamelModel

class LikeToggle(CamelModel):
    """Like state of the current user after a toggle"""
    liked: bool
