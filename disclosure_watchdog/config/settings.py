"""
Application settings using Pydantic Settings.

Environment variables are loaded from .env file.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Create a .env file in the project root to override any of these values.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # ========================================================================
    # Database - comment board only
    # ========================================================================
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "watchdog"
    # Milliseconds before a comment query gives up on server selection
    MONGODB_TIMEOUT_MS: int = 5000

    # ========================================================================
    # Disclosure documents
    # ========================================================================

    # Directory path or http(s):// base URL holding the JSON documents
    DATA_SOURCE_BASE: str = "data"
    ASSEMBLY_ASSETS_FILE: str = "assembly_assets.json"
    MEMBERS_INFO_FILE: str = "members_info.json"
    OFFICIALS_PROPERTY_FILE: str = "officials_property.json"

    # Seconds, only used when DATA_SOURCE_BASE is a URL
    HTTP_TIMEOUT: float = 30.0

    @property
    def data_source_is_remote(self) -> bool:
        """True when the documents are fetched over HTTP"""
        return self.DATA_SOURCE_BASE.startswith(("http://", "https://"))

    def data_location(self, filename: str) -> str:
        """Join the data base with a document file name"""
        base = self.DATA_SOURCE_BASE.rstrip("/")
        return f"{base}/{filename}"

    # ========================================================================
    # Logging
    # ========================================================================
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # ========================================================================
    # Application
    # ========================================================================
    APP_NAME: str = "WatchDog"


# Singleton instance
settings = Settings()
