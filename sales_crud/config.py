"""
Configuration settings for the Sales CRUD CLI.

Uses Pydantic Settings to load environment variables (or a local `.env`) for
the MongoDB connection, logging, and menu behaviour.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional
from urllib.parse import quote_plus

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    mongo_uri: Optional[str] = Field(None, alias="MONGO_URI")
    mongo_host: str = Field("localhost", alias="MONGO_HOST")
    mongo_port: int = Field(27017, alias="MONGO_PORT")
    mongo_user: Optional[str] = Field(None, alias="MONGO_USER")
    mongo_password: Optional[str] = Field(None, alias="MONGO_PASSWORD")
    mongo_db: str = Field("test_db", alias="MONGO_DB")
    mongo_collection: str = Field("sales", alias="MONGO_COLLECTION")
    mongo_timeout_ms: int = Field(5000, alias="MONGO_TIMEOUT_MS")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")
    menu_repeat: bool = Field(False, alias="MENU_REPEAT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def connection_uri(self) -> str:
        """
        Build the connection string: `mongodb://<user>:<password>@<host>:<port>/<db>`.

        An explicit MONGO_URI always wins. Credentials are percent-escaped and
        left out entirely when no user is configured.
        """
        if self.mongo_uri:
            return self.mongo_uri
        credentials = ""
        if self.mongo_user:
            credentials = quote_plus(self.mongo_user)
            if self.mongo_password:
                credentials += ":" + quote_plus(self.mongo_password)
            credentials += "@"
        return f"mongodb://{credentials}{self.mongo_host}:{self.mongo_port}/{self.mongo_db}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
