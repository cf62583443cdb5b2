from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hardinfinity.api.deps import get_current_user, get_db
from hardinfinity.api.responses import envelope
from hardinfinity.crud import create_task, delete_task, get_owned_section, get_owned_task, list_tasks, reorder_task, update_task
from hardinfinity.models import User
from hardinfinity.schemas import ReorderIn, TaskCreateIn, TaskOut, TaskUpdateIn

router = APIRouter(prefix="/api", tags=["tasks"])


@router.get("/sections/{section_id}/tasks")
def tasks_list(section_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Dict[str, Any]:
    section = get_owned_section(db, user, section_id)
    return envelope([TaskOut.model_validate(t) for t in list_tasks(db, section)])


@router.post("/sections/{section_id}/tasks", status_code=201)
def tasks_create(
    section_id: str,
    payload: TaskCreateIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    section = get_owned_section(db, user, section_id)
    return envelope(TaskOut.model_validate(create_task(db, section, payload)))


@router.put("/tasks/{task_id}")
def tasks_update(
    task_id: str,
    payload: TaskUpdateIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    task = get_owned_task(db, user, task_id)
    return envelope(TaskOut.model_validate(update_task(db, task, payload)))


@router.delete("/tasks/{task_id}")
def tasks_delete(task_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Dict[str, Any]:
    task = get_owned_task(db, user, task_id)
    delete_task(db, task)
    return envelope({"message": "Task deleted successfully"})


@router.put("/tasks/{task_id}/order")
def tasks_reorder(
    task_id: str,
    payload: ReorderIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    task = get_owned_task(db, user, task_id)
    if not reorder_task(db, task, payload.order):
        return envelope({"message": "Order unchanged"})
    return envelope({"message": "Task reordered successfully"})
