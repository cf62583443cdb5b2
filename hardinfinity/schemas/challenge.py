import uuid
from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

ChallengeStatus = Literal["active", "completed", "failed"]


class ChallengeCreateIn(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    program_length: Optional[int] = Field(default=None, ge=1)


class ChallengeUpdateIn(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current_day: Optional[int] = Field(default=None, ge=1)
    status: Optional[ChallengeStatus] = None
    program_length: Optional[int] = Field(default=None, ge=1)


class ChallengeOut(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    name: str
    description: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current_day: int
    status: str
    program_length: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ProgressOut(BaseModel):
    total_days: int
    current_day: int
    completed_days: int
    current_streak: int
    longest_streak: int
    status: str
    completion_rate: float
