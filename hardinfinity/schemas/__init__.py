from hardinfinity.schemas.challenge import ChallengeCreateIn, ChallengeOut, ChallengeUpdateIn, ProgressOut
from hardinfinity.schemas.entry import (
    DayRecordDetailOut,
    DayRecordIn,
    DayRecordOut,
    LedgerWriteOut,
    TaskRecordIn,
    TaskRecordOut,
    TaskValue,
    parse_task_value,
)
from hardinfinity.schemas.measurement import MeasurementIn, MeasurementOut
from hardinfinity.schemas.section import ReorderIn, SectionCreateIn, SectionOut, SectionUpdateIn
from hardinfinity.schemas.task import TaskCreateIn, TaskOut, TaskUpdateIn

__all__ = [
    "ChallengeCreateIn",
    "ChallengeUpdateIn",
    "ChallengeOut",
    "ProgressOut",
    "SectionCreateIn",
    "SectionUpdateIn",
    "SectionOut",
    "ReorderIn",
    "TaskCreateIn",
    "TaskUpdateIn",
    "TaskOut",
    "DayRecordIn",
    "DayRecordOut",
    "DayRecordDetailOut",
    "TaskRecordIn",
    "TaskRecordOut",
    "TaskValue",
    "LedgerWriteOut",
    "parse_task_value",
    "MeasurementIn",
    "MeasurementOut",
]
