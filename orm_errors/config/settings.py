from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    inspect_max_depth: int = Field(default=2, ge=0)
    inspect_max_items: int = Field(default=100, ge=0)
    inspect_max_string_length: int = Field(default=10000, ge=0)

    adapter_error_identifiers: list[str] = []
