from fastapi import APIRouter
from . import timers, internals, conditions, prometheus

router = APIRouter()

router.include_router(timers.router, prefix="/timers", tags=["Timers"])
router.include_router(conditions.router, prefix="/conditions", tags=["Conditions"])
router.include_router(prometheus.router, prefix="/metrics", tags=["Metrics"])
router.include_router(internals.router, prefix="/internals", tags=["Internals"])
