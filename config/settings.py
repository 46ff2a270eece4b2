from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Gateway
    SEEME_API_KEY: str = Field(default="")
    SEEME_API_URL: str = Field(default="https://seeme.hu/gateway")
    SEEME_FORMAT: str = Field(default="json")  # json | xml | string
    SEEME_METHOD: str = Field(default="curl")  # curl | file_get_contents
    SEEME_TIMEOUT_S: float = Field(default=30.0)

    # Diagnostics
    SEEME_LOG_FILE: str = Field(default="")  # empty disables the file sink
    LOG_LEVEL: str = Field(default="INFO")
    SERVICE_NAME: str = Field(default="seeme-gateway")


settings = Settings()
