"""Client configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseModel):
    base_url: str = "https://api.cloudflare.com/client/v4"
    token: Optional[str] = Field(default=None, repr=False)
    email: Optional[str] = None
    key: Optional[str] = Field(default=None, repr=False)
    timeout: int = 30
    user_agent: str = "cfworkers"


class Settings(BaseSettings):
    """Top-level client settings with nested sections."""

    model_config = SettingsConfigDict(
        env_prefix="CF_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    account_id: str = ""

    api: ApiSettings = ApiSettings()

    @property
    def base_url(self) -> str:
        return self.api.base_url

    @property
    def timeout(self) -> int:
        return self.api.timeout


@lru_cache()
def get_settings() -> Settings:
    return Settings()
