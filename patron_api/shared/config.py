# patron_api/shared/config.py
from enum import Enum
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.

    Built once by the DI container and passed to whoever needs it;
    there is no module-level instance.
    """

    # --- Application Meta ---
    APP_NAME: str = "patron-api"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- HTTP Server ---
    HOST: str = "0.0.0.0"
    PORT: int = Field(3000, ge=1, le=65535)
    API_PREFIX: str = "/api/v1"
    CORS_ORIGINS: List[str] = ["*"]

    # --- Persistence (MongoDB) ---
    MONGODB_URI: str = "mongodb://localhost:27017/fundacio-molins"
    MONGODB_DATABASE: str = "fundacio-molins"
    MONGODB_COLLECTION: str = "patrons"
    MONGODB_TIMEOUT_MS: int = 5000

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "patron-api"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == AppEnv.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == AppEnv.PRODUCTION

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
