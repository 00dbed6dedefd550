from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from fitsocial.core.schemas import CamelModel

DIFFICULTIES = ["beginner", "intermediate", "advanced", "expert"]

class WorkoutCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    type: Optional[str] = Field(None, max_length=50)
    difficulty: Optional[str] = None
    duration_minutes: Optional[int] = Field(None, ge=1, le=300)
    is_public: bool = False

    @field_validator("difficulty")
    @classmethod
    def validate_difficulty(cls, v):
        if v is not None and v not in DIFFICULTIES:
            raise ValueError(f"Difficulty must be one of: {', '.join(DIFFICULTIES)}")
        return v

class WorkoutSummary(CamelModel):
    """Workout fields embedded in posts"""
    id: str
    name: str
    description: Optional[str] = None
    difficulty: Optional[str] = None
    duration_minutes: Optional[int] = None

class Workout(WorkoutSummary):
    """Workout returned to client"""
    user_id: str
    type: Optional[str] = None
    is_public: bool = False
    is_shared: bool = False
    share_count: int = 0
    like_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
