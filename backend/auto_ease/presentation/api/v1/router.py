"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from auto_ease.presentation.api.v1.endpoints.actors import router as actors_router
from auto_ease.presentation.api.v1.endpoints.health import router as health_router
from auto_ease.presentation.api.v1.endpoints.service_entries import router as service_entries_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(service_entries_router)
router.include_router(actors_router)
