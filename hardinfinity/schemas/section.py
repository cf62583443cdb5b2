import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SectionCreateIn(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    order: Optional[int] = Field(default=None, ge=0)


class SectionUpdateIn(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str = ""


class ReorderIn(BaseModel):
    order: int


class SectionOut(BaseModel):
    id: uuid.UUID
    challenge_id: uuid.UUID
    name: str
    description: str
    order: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
