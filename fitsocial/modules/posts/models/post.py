from sqlalchemy import Boolean, Column, String, DateTime, Integer, Text, ForeignKey, JSON
from sqlalchemy.sql import func

from fitsocial.db.session import Base

class Post(Base):
    __tablename__ = "posts"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("profiles.id"), index=True)
    content = Column(Text, nullable=False)
    post_type = Column(String, default="general")  # achievement, routine, tip, progress, motivation, question, general
    workout_id = Column(String, ForeignKey("workouts.id"), nullable=True)
    image_urls = Column(JSON, default=list)
    hashtags = Column(JSON, default=list)

    # Denormalized counters. The feed recomputes likes/comments/reposts live.
    likes_count = Column(Integer, default=0)
    comments_count = Column(Integer, default=0)
    shares_count = Column(Integer, default=0)
    reposts_count = Column(Integer, default=0)

    is_public = Column(Boolean, default=True)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
