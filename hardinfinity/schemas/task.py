import uuid
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

TaskType = Literal["boolean", "number", "text"]


class TaskCreateIn(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    task_type: TaskType = "boolean"
    required: bool = False
    restart_on_fail: bool = False
    strikes_enabled: bool = False
    strikes_limit: int = 0
    order: Optional[int] = Field(default=None, ge=0)


class TaskUpdateIn(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    task_type: TaskType
    required: bool = False
    restart_on_fail: bool = False
    strikes_enabled: bool = False
    strikes_limit: int = 0


class TaskOut(BaseModel):
    id: uuid.UUID
    section_id: uuid.UUID
    name: str
    description: str
    task_type: str
    required: bool
    restart_on_fail: bool
    strikes_enabled: bool
    strikes_limit: int
    order: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
