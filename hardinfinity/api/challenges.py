from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hardinfinity.api.deps import get_current_user, get_db
from hardinfinity.api.responses import envelope
from hardinfinity.crud import (
    create_challenge,
    delete_challenge,
    get_challenge_progress,
    get_owned_challenge,
    list_challenges,
    reset_challenge,
    update_challenge,
)
from hardinfinity.models import User
from hardinfinity.schemas import ChallengeCreateIn, ChallengeOut, ChallengeUpdateIn, ProgressOut

router = APIRouter(prefix="/api/challenges", tags=["challenges"])


@router.get("")
def challenges_list(user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Dict[str, Any]:
    return envelope([ChallengeOut.model_validate(c) for c in list_challenges(db, user)])


@router.post("", status_code=201)
def challenges_create(
    payload: ChallengeCreateIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)
) -> Dict[str, Any]:
    return envelope(ChallengeOut.model_validate(create_challenge(db, user, payload)))


@router.get("/{challenge_id}")
def challenges_get(challenge_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Dict[str, Any]:
    return envelope(ChallengeOut.model_validate(get_owned_challenge(db, user, challenge_id)))


@router.put("/{challenge_id}")
def challenges_update(
    challenge_id: str,
    payload: ChallengeUpdateIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    challenge = get_owned_challenge(db, user, challenge_id)
    return envelope(ChallengeOut.model_validate(update_challenge(db, challenge, payload)))


@router.delete("/{challenge_id}")
def challenges_delete(challenge_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Dict[str, Any]:
    challenge = get_owned_challenge(db, user, challenge_id)
    delete_challenge(db, user, challenge)
    return envelope({"message": "Challenge deleted successfully"})


@router.post("/{challenge_id}/reset")
def challenges_reset(challenge_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Dict[str, Any]:
    challenge = get_owned_challenge(db, user, challenge_id)
    reset_challenge(db, user, challenge)
    return envelope({"message": "Challenge reset successfully"})


@router.get("/{challenge_id}/progress")
def challenges_progress(challenge_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Dict[str, Any]:
    challenge = get_owned_challenge(db, user, challenge_id)
    return envelope(ProgressOut(**get_challenge_progress(db, challenge)))
