from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func

from fitsocial.db.session import Base

class PostRepost(Base):
    """Link entity: a user re-shared a post without changing its content"""
    __tablename__ = "post_reposts"

    id = Column(String, primary_key=True, index=True)
    original_post_id = Column(String, ForeignKey("posts.id"), index=True)
    reposted_by_user_id = Column(String, ForeignKey("profiles.id"), index=True)
    reposted_at = Column(DateTime, default=func.now())

    __table_args__ = (
        UniqueConstraint("original_post_id", "reposted_by_user_id", name="unique_post_repost"),
    )
