from fastapi import APIRouter

from hardinfinity.api.challenges import router as challenges_router
from hardinfinity.api.entries import router as entries_router
from hardinfinity.api.measurements import router as measurements_router
from hardinfinity.api.sections import router as sections_router
from hardinfinity.api.tasks import router as tasks_router

router = APIRouter()
router.include_router(challenges_router)
router.include_router(sections_router)
router.include_router(tasks_router)
router.include_router(entries_router)
router.include_router(measurements_router)

__all__ = ["router"]
