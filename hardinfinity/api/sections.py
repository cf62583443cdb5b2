from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hardinfinity.api.deps import get_current_user, get_db
from hardinfinity.api.responses import envelope
from hardinfinity.crud import (
    create_section,
    delete_section,
    get_owned_challenge,
    get_owned_section,
    list_sections,
    reorder_section,
    update_section,
)
from hardinfinity.models import User
from hardinfinity.schemas import ReorderIn, SectionCreateIn, SectionOut, SectionUpdateIn

router = APIRouter(prefix="/api", tags=["sections"])


@router.get("/challenges/{challenge_id}/sections")
def sections_list(challenge_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Dict[str, Any]:
    challenge = get_owned_challenge(db, user, challenge_id)
    return envelope([SectionOut.model_validate(s) for s in list_sections(db, challenge)])


@router.post("/challenges/{challenge_id}/sections", status_code=201)
def sections_create(
    challenge_id: str,
    payload: SectionCreateIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    challenge = get_owned_challenge(db, user, challenge_id)
    return envelope(SectionOut.model_validate(create_section(db, challenge, payload)))


@router.put("/sections/{section_id}")
def sections_update(
    section_id: str,
    payload: SectionUpdateIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    section = get_owned_section(db, user, section_id)
    return envelope(SectionOut.model_validate(update_section(db, section, payload)))


@router.delete("/sections/{section_id}")
def sections_delete(section_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Dict[str, Any]:
    section = get_owned_section(db, user, section_id)
    delete_section(db, section)
    return envelope({"message": "Section deleted successfully"})


@router.put("/sections/{section_id}/order")
def sections_reorder(
    section_id: str,
    payload: ReorderIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    section = get_owned_section(db, user, section_id)
    if not reorder_section(db, section, payload.order):
        return envelope({"message": "Order unchanged"})
    return envelope({"message": "Section reordered successfully"})
