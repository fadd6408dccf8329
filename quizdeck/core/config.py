from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_file: Path = Field(default=Path("data/quizdeck.txt"), alias="QUIZDECK_DATA_FILE")
    log_level: str = Field(default="WARNING", alias="QUIZDECK_LOG_LEVEL")
    shuffle_seed: int | None = Field(default=None, alias="QUIZDECK_SHUFFLE_SEED")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
