from sqlalchemy import Boolean, Column, String, DateTime, Text
from sqlalchemy.sql import func

from fitsocial.db.session import Base

class Profile(Base):
    """Public profile of an account owned by the hosted auth provider"""
    __tablename__ = "profiles"

    id = Column(String, primary_key=True, index=True)
    username = Column(String, unique=True, index=True)
    full_name = Column(String, nullable=True)
    avatar_url = Column(String, nullable=True)
    bio = Column(Text, nullable=True)
    fitness_level = Column(String, default="beginner")  # beginner, intermediate, advanced, expert
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
