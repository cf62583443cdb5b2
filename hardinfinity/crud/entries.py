import logging
from datetime import date, datetime
from typing import Any, Dict, List, Tuple

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from hardinfinity.crud.ownership import parse_id
from hardinfinity.db import atomic
from hardinfinity.errors import ConflictError, InvalidArgumentError, NotFoundError
from hardinfinity.models import Challenge, DayRecord, Section, Task, TaskRecord
from hardinfinity.models.challenge import STATUS_ACTIVE
from hardinfinity.schemas import DayRecordIn, TaskRecordIn, parse_task_value

logger = logging.getLogger(__name__)


def list_day_records(db: Session, challenge: Challenge) -> List[DayRecord]:
    return list(
        db.scalars(
            select(DayRecord)
            .where(DayRecord.challenge_id == challenge.id)
            .order_by(DayRecord.day_number.asc())
        )
    )


def get_day_record(db: Session, challenge: Challenge, day_number: int) -> Tuple[DayRecord, List[TaskRecord]]:
    record = db.scalar(
        select(DayRecord).where(DayRecord.challenge_id == challenge.id, DayRecord.day_number == day_number)
    )
    if not record:
        raise NotFoundError("Entry")

    task_records = list(db.scalars(select(TaskRecord).where(TaskRecord.day_record_id == record.id)))
    return record, task_records


def upsert_today(db: Session, challenge: Challenge, payload: DayRecordIn) -> Dict[str, Any]:
    """Write the entry for ``challenge.current_day`` (not the calendar date)."""
    _ensure_active(challenge)
    return _write_day(db, challenge, challenge.current_day, payload)


def upsert_by_day(db: Session, challenge: Challenge, day_number: int, payload: DayRecordIn) -> Dict[str, Any]:
    _ensure_active(challenge)
    if day_number < 1:
        raise InvalidArgumentError("Day number must be a positive integer")
    if day_number > challenge.current_day:
        raise InvalidArgumentError("Day has not started yet")
    return _write_day(db, challenge, day_number, payload)


def _ensure_active(challenge: Challenge) -> None:
    if challenge.status != STATUS_ACTIVE:
        raise ConflictError("Can only add entries to active challenges")


def _resolve_task_records(db: Session, challenge: Challenge, items: List[TaskRecordIn]) -> List[Tuple[Task, TaskRecordIn, Any]]:
    if not items:
        return []

    latest: Dict[Any, TaskRecordIn] = {}
    for item in items:
        latest[parse_id(item.task_id, "Task")] = item

    tasks = {
        task.id: task
        for task in db.scalars(
            select(Task)
            .join(Section, Task.section_id == Section.id)
            .where(Section.challenge_id == challenge.id, Task.id.in_(list(latest)))
        )
    }

    resolved: List[Tuple[Task, TaskRecordIn, Any]] = []
    for task_id, item in latest.items():
        task = tasks.get(task_id)
        if not task:
            raise InvalidArgumentError(f"Task {task_id} does not belong to this challenge")
        value = parse_task_value(task.task_type, item.value)
        resolved.append((task, item, value.value if value is not None else None))
    return resolved


def _write_day(db: Session, challenge: Challenge, day_number: int, payload: DayRecordIn) -> Dict[str, Any]:
    with atomic(db):
        resolved = _resolve_task_records(db, challenge, payload.task_records)

        record = db.scalar(
            select(DayRecord).where(DayRecord.challenge_id == challenge.id, DayRecord.day_number == day_number)
        )
        existed = record is not None
        if not record:
            record = DayRecord(challenge_id=challenge.id, day_number=day_number, date=date.today())

        record.completed = payload.completed
        record.notes = payload.notes
        record.progress_photo_url = payload.progress_photo_url
        record.energy_level = payload.energy_level
        record.mood_level = payload.mood_level
        db.add(record)
        db.flush()

        for task, item, value in resolved:
            task_record = db.scalar(
                select(TaskRecord).where(TaskRecord.day_record_id == record.id, TaskRecord.task_id == task.id)
            )
            if not task_record:
                task_record = TaskRecord(day_record_id=record.id, task_id=task.id)
            task_record.completed = item.completed
            task_record.value = value
            task_record.notes = item.notes
            db.add(task_record)

        advanced = payload.completed and not existed and day_number == challenge.current_day
        if advanced:
            db.execute(
                update(Challenge)
                .where(Challenge.id == challenge.id)
                .values({Challenge.current_day: Challenge.current_day + 1, Challenge.updated_at: datetime.utcnow()})
                .execution_options(synchronize_session="fetch")
            )
        entry_id = record.id

    if advanced:
        db.refresh(challenge)
        logger.info("Challenge %s advanced to day %s", challenge.id, challenge.current_day)

    return {
        "entry_id": entry_id,
        "day_number": day_number,
        "current_day": challenge.current_day,
        "day_advanced": advanced,
    }
