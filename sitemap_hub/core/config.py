from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_PATH = Path(__file__).resolve().parents[2] / ".env"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=ENV_PATH,
        env_file_encoding="utf-8",
        env_prefix="SITEMAP_",
        extra="ignore",
    )

    # App
    env: str = "dev"
    service_name: str = "sitemap-api"
    log_level: str = "INFO"

    # XML namespaces
    sitemap_namespace: str = "http://www.sitemaps.org/schemas/sitemap/0.9"
    video_namespace: str = "http://www.google.com/schemas/sitemap-video/1.1"

    # Telemetry
    otlp_endpoint: str | None = None  # e.g. http://localhost:4318 (Jaeger OTLP HTTP)

    # Limits
    max_urls_per_sitemap: int = 50_000  # sitemaps.org protocol limit
    preview_max_urls: int = 1_000


settings = Settings()
