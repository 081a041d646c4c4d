from fastapi import APIRouter

from . import health, sensors

router = APIRouter()
router.include_router(sensors.router)
router.include_router(health.router)

__all__ = ["router"]
