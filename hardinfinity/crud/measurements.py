from datetime import date
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from hardinfinity.db import atomic
from hardinfinity.models import Challenge, Measurement
from hardinfinity.schemas import MeasurementIn

METRIC_FIELDS = ("weight", "chest", "waist", "hips", "arms", "thighs")


def list_measurements(db: Session, challenge: Challenge) -> List[Measurement]:
    return list(
        db.scalars(
            select(Measurement)
            .where(Measurement.challenge_id == challenge.id)
            .order_by(Measurement.date.asc(), Measurement.day_number.asc())
        )
    )


def add_measurement(db: Session, challenge: Challenge, payload: MeasurementIn) -> Measurement:
    measurement = Measurement(
        challenge_id=challenge.id,
        day_number=payload.day_number or challenge.current_day,
        date=payload.date or date.today(),
        **{field: getattr(payload, field) for field in METRIC_FIELDS},
    )
    with atomic(db):
        db.add(measurement)
    db.refresh(measurement)
    return measurement


def update_measurement(db: Session, measurement: Measurement, payload: MeasurementIn) -> Measurement:
    with atomic(db):
        if payload.day_number:
            measurement.day_number = payload.day_number
        if payload.date:
            measurement.date = payload.date
        for field in METRIC_FIELDS:
            setattr(measurement, field, getattr(payload, field))
        db.add(measurement)
    db.refresh(measurement)
    return measurement


def delete_measurement(db: Session, measurement: Measurement) -> None:
    with atomic(db):
        db.execute(delete(Measurement).where(Measurement.id == measurement.id))
