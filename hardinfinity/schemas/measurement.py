import datetime as dt
import uuid
from typing import Optional

from pydantic import BaseModel, Field


class MeasurementIn(BaseModel):
    day_number: Optional[int] = Field(default=None, ge=1)
    date: Optional[dt.date] = None
    weight: Optional[float] = Field(default=None, ge=0)
    chest: Optional[float] = Field(default=None, ge=0)
    waist: Optional[float] = Field(default=None, ge=0)
    hips: Optional[float] = Field(default=None, ge=0)
    arms: Optional[float] = Field(default=None, ge=0)
    thighs: Optional[float] = Field(default=None, ge=0)


class MeasurementOut(BaseModel):
    id: uuid.UUID
    challenge_id: uuid.UUID
    day_number: int
    date: dt.date
    weight: Optional[float] = None
    chest: Optional[float] = None
    waist: Optional[float] = None
    hips: Optional[float] = None
    arms: Optional[float] = None
    thighs: Optional[float] = None
    created_at: dt.datetime
    updated_at: dt.datetime

    class Config:
        from_attributes = True
