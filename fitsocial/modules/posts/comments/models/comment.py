from sqlalchemy import Column, String, DateTime, Text, ForeignKey
from sqlalchemy.sql import func

from fitsocial.db.session import Base

class PostComment(Base):
    __tablename__ = "post_comments"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("profiles.id"))
    post_id = Column(String, ForeignKey("posts.id"), index=True)
    content = Column(Text, nullable=False)
    parent_comment_id = Column(String, ForeignKey("post_comments.id"), nullable=True)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
