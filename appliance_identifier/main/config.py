"""
Application Settings - Main Layer

Configuration from environment variables, a ``.env`` file and defaults,
grouped per concern with pydantic-settings.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from appliance_identifier.shared import EnumEnvironment, EnumLogLevel, EnumStorageBackend
from appliance_identifier.shared.env import load_secret_file_variables  # noqa: F401


class DatabaseSettings(BaseSettings):
    """MongoDB configuration settings."""

    mongo_uri: str = Field(
        default="mongodb://localhost:27017/appliance_identifier",
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="appliance_identifier", description="Name of the MongoDB database"
    )
    collection_name: str = Field(
        default="appliances", description="Collection holding appliance records"
    )
    server_selection_timeout_ms: int = Field(default=5000, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class StorageSettings(BaseSettings):
    """Record store selection."""

    backend: EnumStorageBackend = Field(
        default=EnumStorageBackend.MONGO,
        description="'mongo' for durable storage, 'memory' for a process-local store",
    )

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_", case_sensitive=False, extra="ignore"
    )


class ClassifierSettings(BaseSettings):
    """Classifier engine configuration."""

    label: str = Field(
        default="n04554684 washing_machine",
        description="Label reported by the static predictor",
    )
    confidence: float = Field(default=0.88, ge=0.0, le=1.0)
    max_workers: int = Field(default=1, ge=1, description="Inference threads")
    model_version: str = Field(default="1.0.0")

    model_config = SettingsConfigDict(
        env_prefix="CLASSIFIER_", case_sensitive=False, extra="ignore"
    )


class ImageSettings(BaseSettings):
    """Image handling configuration."""

    jpeg_quality: int = Field(
        default=80, ge=1, le=95, description="Quality of stored JPEG photos"
    )

    model_config = SettingsConfigDict(
        env_prefix="IMAGE_", case_sensitive=False, extra="ignore"
    )


class GESettings(BaseSettings):
    """Service identity settings."""

    title: str = Field(default="Appliance Identifier")
    description: str = Field(
        default="Identifies appliances from photos and estimates their "
        "electricity use and cost",
    )
    version: str = Field(default="1.0.0")
    git_commit: str = Field(
        default="unknown",
        validation_alias=AliasChoices("GE_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        validation_alias=AliasChoices("GE_BUILD_TIME", "BUILD_TIME"),
    )
    port: int = Field(default=8000, description="Port to bind the server")

    model_config = SettingsConfigDict(
        env_prefix="GE_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    classifier: ClassifierSettings = Field(default_factory=ClassifierSettings)
    image: ImageSettings = Field(default_factory=ImageSettings)
    ge: GESettings = Field(default_factory=GESettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Build the settings object.

    Kept as a function so tests can patch it.
    """
    return AppSettings()
