from hardinfinity.models.base import Base
from hardinfinity.models.challenge import Challenge
from hardinfinity.models.day_record import DayRecord
from hardinfinity.models.measurement import Measurement
from hardinfinity.models.section import Section
from hardinfinity.models.task import Task
from hardinfinity.models.task_record import TaskRecord
from hardinfinity.models.user import User

__all__ = [
    "Base",
    "User",
    "Challenge",
    "Section",
    "Task",
    "DayRecord",
    "TaskRecord",
    "Measurement",
]
