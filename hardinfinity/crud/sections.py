from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from hardinfinity.crud.ordering import SiblingSet
from hardinfinity.db import atomic
from hardinfinity.models import Challenge, Section
from hardinfinity.schemas import SectionCreateIn, SectionUpdateIn


def list_sections(db: Session, challenge: Challenge) -> List[Section]:
    return list(db.scalars(select(Section).where(Section.challenge_id == challenge.id).order_by(Section.order.asc())))


def create_section(db: Session, challenge: Challenge, payload: SectionCreateIn) -> Section:
    section = Section(challenge_id=challenge.id, name=payload.name, description=payload.description)
    with atomic(db):
        SiblingSet(db, Section, challenge.id).insert(section, payload.order)
    db.refresh(section)
    return section


def update_section(db: Session, section: Section, payload: SectionUpdateIn) -> Section:
    with atomic(db):
        section.name = payload.name
        section.description = payload.description
        db.add(section)
    db.refresh(section)
    return section


def reorder_section(db: Session, section: Section, new_order: int) -> bool:
    with atomic(db):
        changed = SiblingSet.of(db, section).move(section, new_order)
    return changed
