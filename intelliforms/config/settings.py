from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", populate_by_name=True
    )

    app_env: str = "dev"
    log_level: str = "INFO"

    api_key: str = ""
    cors_origins: str = "*"
    host: str = "0.0.0.0"
    port: int = 8080

    gcp_project_id: str = ""
    bucket_name: str = ""
    pubsub_topic: str = ""
    pubsub_subscription: str = ""
    signed_url_expiration_minutes: int = Field(
        default=15,
        validation_alias=AliasChoices(
            "SIGNED_URL_EXPIRATION_MINUTES", "URL_EXPIRATION_TIME"
        ),
    )

    storage_backend: str = "gcs"
    local_storage_root: Path = Path("storage")
    queue_backend: str = "pubsub"

    pdf_engine: str = "pdfplumber"
    ocr_engine: str = "vision"
    max_text_chars: int = 15000

    generation_provider: str = "gemini"
    generation_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GENERATION_API_KEY", "GEMINI_API_KEY"),
    )
    generation_model_name: str = "gemini-2.0-flash"
    generation_base_url: str = ""
    generation_timeout_seconds: int = 60
    generation_temperature: float = 0.2

    templates_dir: Path | None = None

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    @property
    def cors_origins_list(self) -> list[str]:
        if self.cors_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
