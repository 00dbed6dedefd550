from sqlalchemy import Boolean, Column, String, DateTime, Integer, Text, ForeignKey
from sqlalchemy.sql import func

from fitsocial.db.session import Base

class Workout(Base):
    __tablename__ = "workouts"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("profiles.id"), index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    type = Column(String, nullable=True)
    difficulty = Column(String, nullable=True)  # beginner, intermediate, advanced, expert
    duration_minutes = Column(Integer, nullable=True)
    is_public = Column(Boolean, default=False)
    is_shared = Column(Boolean, default=False)
    share_count = Column(Integer, default=0)
    like_count = Column(Integer, default=0)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
