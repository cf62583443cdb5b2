import uuid
from typing import Union

from sqlalchemy import select
from sqlalchemy.orm import Session

from hardinfinity.errors import InvalidArgumentError, NotFoundError
from hardinfinity.models import Challenge, Measurement, Section, Task, User


def parse_id(raw: Union[str, uuid.UUID, None], label: str) -> uuid.UUID:
    if isinstance(raw, uuid.UUID):
        return raw
    if not raw:
        raise InvalidArgumentError(f"{label} ID is required")
    try:
        return uuid.UUID(str(raw))
    except ValueError as exc:
        raise InvalidArgumentError(f"Invalid {label.lower()} ID format") from exc


def get_owned_challenge(db: Session, user: User, challenge_id: Union[str, uuid.UUID]) -> Challenge:
    cid = parse_id(challenge_id, "Challenge")
    challenge = db.scalar(select(Challenge).where(Challenge.id == cid, Challenge.user_id == user.id))
    if not challenge:
        raise NotFoundError("Challenge")
    return challenge


def get_owned_section(db: Session, user: User, section_id: Union[str, uuid.UUID]) -> Section:
    sid = parse_id(section_id, "Section")
    section = db.scalar(
        select(Section)
        .join(Challenge, Section.challenge_id == Challenge.id)
        .where(Section.id == sid, Challenge.user_id == user.id)
    )
    if not section:
        raise NotFoundError("Section")
    return section


def get_owned_task(db: Session, user: User, task_id: Union[str, uuid.UUID]) -> Task:
    tid = parse_id(task_id, "Task")
    task = db.scalar(
        select(Task)
        .join(Section, Task.section_id == Section.id)
        .join(Challenge, Section.challenge_id == Challenge.id)
        .where(Task.id == tid, Challenge.user_id == user.id)
    )
    if not task:
        raise NotFoundError("Task")
    return task


def get_owned_measurement(db: Session, user: User, measurement_id: Union[str, uuid.UUID]) -> Measurement:
    mid = parse_id(measurement_id, "Measurement")
    measurement = db.scalar(
        select(Measurement)
        .join(Challenge, Measurement.challenge_id == Challenge.id)
        .where(Measurement.id == mid, Challenge.user_id == user.id)
    )
    if not measurement:
        raise NotFoundError("Measurement")
    return measurement
