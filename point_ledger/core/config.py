"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000


class StorageSettings(BaseModel):
    backend: Literal["memory", "sqlalchemy"] = "memory"
    # Upper bound of the random delay each in-memory table access sleeps for.
    latency_ms: int = Field(default=0, ge=0)


class DatabaseSettings(BaseModel):
    url: str = "sqlite://"
    echo: bool = False


class PointSettings(BaseModel):
    charge_unit: int = Field(default=5_000, gt=0)
    spend_unit: int = Field(default=100, gt=0)
    max_balance: int = Field(default=100_000, gt=0)
    min_spend: int = Field(default=500, ge=0)
    history_limit: int = Field(default=5, gt=0)


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Point Ledger"
    api_prefix: str = ""
    log_level: str = "INFO"

    server: ServerSettings = ServerSettings()
    storage: StorageSettings = StorageSettings()
    database: DatabaseSettings = DatabaseSettings()
    points: PointSettings = PointSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port


@lru_cache()
def get_settings() -> Settings:
    return Settings()
