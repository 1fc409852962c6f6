from __future__ import annotations

from functools import lru_cache
from importlib.util import find_spec

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DOTENV_AVAILABLE = find_spec("dotenv") is not None


class Settings(BaseSettings):
    log_level: str = Field(default="INFO")
    log_file: str | None = Field(default=None)
    strict_relations: bool = Field(default=True)
    legacy_accessor_fallback: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_prefix="TGOBJECTS_",
        env_file=".env" if DOTENV_AVAILABLE else None,
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def reset_settings() -> None:
    get_settings.cache_clear()
