import datetime as dt
import uuid
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr, TypeAdapter, ValidationError

from hardinfinity.errors import InvalidArgumentError


class NumberValue(BaseModel):
    kind: Literal["number"] = "number"
    value: Union[StrictInt, StrictFloat]


class BooleanValue(BaseModel):
    kind: Literal["boolean"] = "boolean"
    value: StrictBool


class TextValue(BaseModel):
    kind: Literal["text"] = "text"
    value: StrictStr


TaskValue = Annotated[Union[NumberValue, BooleanValue, TextValue], Field(discriminator="kind")]

_task_value_adapter: TypeAdapter = TypeAdapter(TaskValue)


def parse_task_value(task_type: str, raw: Any) -> Optional[Union[NumberValue, BooleanValue, TextValue]]:
    """Validate a raw task-record payload against the referenced task's type.

    ``None`` means "no value recorded" and is accepted for every type.
    """
    if raw is None:
        return None
    try:
        return _task_value_adapter.validate_python({"kind": task_type, "value": raw})
    except ValidationError as exc:
        raise InvalidArgumentError(f"Value does not match task type '{task_type}'") from exc


class TaskRecordIn(BaseModel):
    task_id: Optional[str] = None
    completed: bool = False
    value: Any = None
    notes: str = ""


class DayRecordIn(BaseModel):
    completed: bool = False
    notes: str = ""
    progress_photo_url: str = ""
    energy_level: int = Field(default=0, ge=0, le=10)
    mood_level: int = Field(default=0, ge=0, le=10)
    task_records: List[TaskRecordIn] = Field(
        default_factory=list,
        validation_alias=AliasChoices("task_records", "task_entries"),
    )


class DayRecordOut(BaseModel):
    id: uuid.UUID
    challenge_id: uuid.UUID
    day_number: int
    date: dt.date
    completed: bool
    notes: str
    progress_photo_url: str
    energy_level: int
    mood_level: int
    created_at: dt.datetime
    updated_at: dt.datetime

    class Config:
        from_attributes = True


class TaskRecordOut(BaseModel):
    id: uuid.UUID
    day_record_id: uuid.UUID
    task_id: uuid.UUID
    completed: bool
    value: Any = None
    notes: str
    created_at: dt.datetime
    updated_at: dt.datetime

    class Config:
        from_attributes = True


class DayRecordDetailOut(BaseModel):
    entry: DayRecordOut
    task_records: List[TaskRecordOut]


class LedgerWriteOut(BaseModel):
    entry_id: uuid.UUID
    day_number: int
    current_day: int
    day_advanced: bool
