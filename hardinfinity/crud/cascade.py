import logging
from datetime import datetime

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from hardinfinity.crud.ordering import SiblingSet
from hardinfinity.db import atomic
from hardinfinity.errors import NotFoundError
from hardinfinity.models import Challenge, DayRecord, Measurement, Section, Task, TaskRecord, User
from hardinfinity.models.challenge import STATUS_ACTIVE

logger = logging.getLogger(__name__)


def delete_challenge(db: Session, user: User, challenge: Challenge) -> None:
    challenge_id = challenge.id
    with atomic(db):
        section_ids = list(db.scalars(select(Section.id).where(Section.challenge_id == challenge_id)))
        for section_id in section_ids:
            db.execute(delete(Task).where(Task.section_id == section_id))

        day_record_ids = list(db.scalars(select(DayRecord.id).where(DayRecord.challenge_id == challenge_id)))
        for day_record_id in day_record_ids:
            db.execute(delete(TaskRecord).where(TaskRecord.day_record_id == day_record_id))

        db.execute(delete(DayRecord).where(DayRecord.challenge_id == challenge_id))
        db.execute(delete(Measurement).where(Measurement.challenge_id == challenge_id))
        db.execute(delete(Section).where(Section.challenge_id == challenge_id))

        result = db.execute(
            delete(Challenge)
            .where(Challenge.id == challenge_id, Challenge.user_id == user.id)
            .execution_options(synchronize_session="fetch")
        )
        if result.rowcount == 0:
            raise NotFoundError("Challenge")

    logger.info(
        "Deleted challenge %s (%s sections, %s day records)", challenge_id, len(section_ids), len(day_record_ids)
    )


def reset_challenge(db: Session, user: User, challenge: Challenge) -> None:
    """Clear progress only: sections, tasks and measurements survive a reset."""
    challenge_id = challenge.id
    with atomic(db):
        result = db.execute(
            update(Challenge)
            .where(Challenge.id == challenge_id, Challenge.user_id == user.id)
            .values(
                {
                    Challenge.current_day: 1,
                    Challenge.status: STATUS_ACTIVE,
                    Challenge.updated_at: datetime.utcnow(),
                }
            )
            .execution_options(synchronize_session="fetch")
        )
        if result.rowcount == 0:
            raise NotFoundError("Challenge")

        day_records = select(DayRecord.id).where(DayRecord.challenge_id == challenge_id)
        db.execute(
            delete(TaskRecord)
            .where(TaskRecord.day_record_id.in_(day_records))
            .execution_options(synchronize_session=False)
        )
        db.execute(
            delete(DayRecord)
            .where(DayRecord.challenge_id == challenge_id)
            .execution_options(synchronize_session=False)
        )

    logger.info("Reset challenge %s to day 1", challenge_id)


def delete_section(db: Session, section: Section) -> None:
    section_id = section.id
    with atomic(db):
        task_ids = select(Task.id).where(Task.section_id == section_id)
        db.execute(
            delete(TaskRecord).where(TaskRecord.task_id.in_(task_ids)).execution_options(synchronize_session=False)
        )
        db.execute(delete(Task).where(Task.section_id == section_id).execution_options(synchronize_session=False))
        SiblingSet.of(db, section).remove(section)

    logger.info("Deleted section %s", section_id)


def delete_task(db: Session, task: Task) -> None:
    task_id = task.id
    with atomic(db):
        db.execute(delete(TaskRecord).where(TaskRecord.task_id == task_id).execution_options(synchronize_session=False))
        SiblingSet.of(db, task).remove(task)

    logger.info("Deleted task %s", task_id)
