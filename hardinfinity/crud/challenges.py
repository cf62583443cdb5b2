from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from hardinfinity.config import settings
from hardinfinity.db import atomic
from hardinfinity.models import Challenge, User
from hardinfinity.models.challenge import STATUS_ACTIVE
from hardinfinity.schemas import ChallengeCreateIn, ChallengeUpdateIn


def list_challenges(db: Session, user: User) -> List[Challenge]:
    return list(
        db.scalars(select(Challenge).where(Challenge.user_id == user.id).order_by(Challenge.created_at.desc()))
    )


def create_challenge(db: Session, user: User, payload: ChallengeCreateIn) -> Challenge:
    challenge = Challenge(
        user_id=user.id,
        name=payload.name,
        description=payload.description,
        start_date=payload.start_date,
        end_date=payload.end_date,
        current_day=1,
        status=STATUS_ACTIVE,
        program_length=payload.program_length or settings.DEFAULT_PROGRAM_LENGTH,
    )
    with atomic(db):
        db.add(challenge)
    db.refresh(challenge)
    return challenge


def update_challenge(db: Session, challenge: Challenge, payload: ChallengeUpdateIn) -> Challenge:
    # last write wins; no version check
    with atomic(db):
        for field, value in payload.model_dump(exclude_unset=True).items():
            if value is None and field in ("name", "description", "current_day", "status", "program_length"):
                continue
            setattr(challenge, field, value)
        db.add(challenge)
    db.refresh(challenge)
    return challenge
