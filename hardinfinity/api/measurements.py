from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hardinfinity.api.deps import get_current_user, get_db
from hardinfinity.api.responses import envelope
from hardinfinity.crud import (
    add_measurement,
    delete_measurement,
    get_owned_challenge,
    get_owned_measurement,
    list_measurements,
    update_measurement,
)
from hardinfinity.models import User
from hardinfinity.schemas import MeasurementIn, MeasurementOut

router = APIRouter(prefix="/api", tags=["measurements"])


@router.get("/challenges/{challenge_id}/measurements")
def measurements_list(challenge_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Dict[str, Any]:
    challenge = get_owned_challenge(db, user, challenge_id)
    return envelope([MeasurementOut.model_validate(m) for m in list_measurements(db, challenge)])


@router.post("/challenges/{challenge_id}/measurements", status_code=201)
def measurements_add(
    challenge_id: str,
    payload: MeasurementIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    challenge = get_owned_challenge(db, user, challenge_id)
    return envelope(MeasurementOut.model_validate(add_measurement(db, challenge, payload)))


@router.put("/measurements/{measurement_id}")
def measurements_update(
    measurement_id: str,
    payload: MeasurementIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    measurement = get_owned_measurement(db, user, measurement_id)
    return envelope(MeasurementOut.model_validate(update_measurement(db, measurement, payload)))


@router.delete("/measurements/{measurement_id}")
def measurements_delete(measurement_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Dict[str, Any]:
    measurement = get_owned_measurement(db, user, measurement_id)
    delete_measurement(db, measurement)
    return envelope({"message": "Measurement deleted successfully"})
