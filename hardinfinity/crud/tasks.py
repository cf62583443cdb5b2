from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from hardinfinity.config import settings
from hardinfinity.crud.ordering import SiblingSet
from hardinfinity.db import atomic
from hardinfinity.models import Section, Task
from hardinfinity.schemas import TaskCreateIn, TaskUpdateIn


def _strikes_limit(enabled: bool, limit: int) -> int:
    if enabled and limit <= 0:
        return settings.DEFAULT_STRIKES_LIMIT
    return max(limit, 0)


def list_tasks(db: Session, section: Section) -> List[Task]:
    return list(db.scalars(select(Task).where(Task.section_id == section.id).order_by(Task.order.asc())))


def create_task(db: Session, section: Section, payload: TaskCreateIn) -> Task:
    task = Task(
        section_id=section.id,
        name=payload.name,
        description=payload.description,
        task_type=payload.task_type,
        required=payload.required,
        restart_on_fail=payload.restart_on_fail,
        strikes_enabled=payload.strikes_enabled,
        strikes_limit=_strikes_limit(payload.strikes_enabled, payload.strikes_limit),
    )
    with atomic(db):
        SiblingSet(db, Task, section.id).insert(task, payload.order)
    db.refresh(task)
    return task


def update_task(db: Session, task: Task, payload: TaskUpdateIn) -> Task:
    with atomic(db):
        task.name = payload.name
        task.description = payload.description
        task.task_type = payload.task_type
        task.required = payload.required
        task.restart_on_fail = payload.restart_on_fail
        task.strikes_enabled = payload.strikes_enabled
        task.strikes_limit = _strikes_limit(payload.strikes_enabled, payload.strikes_limit)
        db.add(task)
    db.refresh(task)
    return task


def reorder_task(db: Session, task: Task, new_order: int) -> bool:
    with atomic(db):
        changed = SiblingSet.of(db, task).move(task, new_order)
    return changed
