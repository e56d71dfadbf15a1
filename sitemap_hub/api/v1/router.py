from fastapi import APIRouter

from sitemap_hub.api.v1.endpoints.health import router as health_router
from sitemap_hub.api.v1.endpoints.sitemaps import router as sitemaps_router


router = APIRouter(prefix="/v1")
router.include_router(health_router, tags=["health"])
router.include_router(sitemaps_router, tags=["sitemaps"])
