from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hardinfinity.api.deps import get_current_user, get_db
from hardinfinity.api.responses import envelope
from hardinfinity.crud import get_day_record, get_owned_challenge, list_day_records, upsert_by_day, upsert_today
from hardinfinity.models import User
from hardinfinity.schemas import DayRecordDetailOut, DayRecordIn, DayRecordOut, LedgerWriteOut, TaskRecordOut

router = APIRouter(prefix="/api/challenges/{challenge_id}/entries", tags=["entries"])


@router.get("")
def entries_list(challenge_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Dict[str, Any]:
    challenge = get_owned_challenge(db, user, challenge_id)
    return envelope([DayRecordOut.model_validate(r) for r in list_day_records(db, challenge)])


@router.post("")
def entries_upsert_today(
    challenge_id: str,
    payload: DayRecordIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    challenge = get_owned_challenge(db, user, challenge_id)
    result = upsert_today(db, challenge, payload)
    return envelope(LedgerWriteOut(**result))


@router.get("/{day}")
def entries_get(challenge_id: str, day: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Dict[str, Any]:
    challenge = get_owned_challenge(db, user, challenge_id)
    record, task_records = get_day_record(db, challenge, day)
    return envelope(
        DayRecordDetailOut(
            entry=DayRecordOut.model_validate(record),
            task_records=[TaskRecordOut.model_validate(t) for t in task_records],
        )
    )


@router.put("/{day}")
def entries_upsert_day(
    challenge_id: str,
    day: int,
    payload: DayRecordIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    challenge = get_owned_challenge(db, user, challenge_id)
    result = upsert_by_day(db, challenge, day, payload)
    return envelope(LedgerWriteOut(**result))
