from fastapi import FastAPI

from sitemap_hub.api.v1.router import router as v1_router
from sitemap_hub.core.logging import setup_logging
from sitemap_hub.core.telemetry import setup_telemetry

setup_logging()

app = FastAPI(title="Sitemap API", version="0.1.0")

setup_telemetry(app)
app.include_router(v1_router)
