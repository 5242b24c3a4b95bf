from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pagination_engine.constants import MAX_LIMIT, MIN_LIMIT


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True)

    # Pagination defaults applied when a request omits the parameter
    PAGINATION_DEFAULT_LIMIT: int = Field(default=10, ge=MIN_LIMIT, le=MAX_LIMIT)
    PAGINATION_DEFAULT_ORDERING: Literal["asc", "desc"] = "asc"

    # Logging settings
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_FILE_PATH: str | None = None

    # Loki settings
    LOKI_ENABLED: bool = False
    LOKI_URL: str = "http://loki:3100"
    LOKI_VERSION: str = "1"


app_settings = Settings()
