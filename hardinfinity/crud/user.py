import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hardinfinity.db import atomic
from hardinfinity.errors import StorageFailure
from hardinfinity.models import User

logger = logging.getLogger(__name__)


def get_user_by_external_id(db: Session, external_id: str) -> Optional[User]:
    return db.scalar(select(User).where(User.external_id == external_id))


def upsert_user(db: Session, external_id: str, email: Optional[str] = None, name: Optional[str] = None) -> User:
    user = get_user_by_external_id(db, external_id)
    if user:
        changed = (email and user.email != email) or (name and user.name != name)
        if not changed:
            return user
        with atomic(db):
            if email:
                user.email = email
            if name:
                user.name = name
            db.add(user)
        db.refresh(user)
        return user

    user = User(external_id=external_id, email=email, name=name)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # another request created the same subject first
        db.rollback()
        existing = get_user_by_external_id(db, external_id)
        if not existing:
            logger.exception("User insert for %s failed", external_id)
            raise StorageFailure()
        return existing
    db.refresh(user)
    return user
