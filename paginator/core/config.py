from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # App
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Pagination (0 = return everything)
    default_page_size: int = Field(default=0, ge=0, alias="PAGINATION_DEFAULT_PAGE_SIZE")


@lru_cache
def get_settings() -> Settings:
    return Settings()
