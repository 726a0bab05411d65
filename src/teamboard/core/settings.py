"""Application settings and configuration.

This module defines all configuration options for the Teamboard application.
Settings are loaded from environment variables with sensible defaults.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AddPermissionMode(str, Enum):
    """How post creation is authorized.

    ``legacy`` only requires that the target discussion exists, matching the
    historical behavior of the posts API. ``strict`` applies the same team and
    discussion membership check used by listing, editing and deleting.
    """

    LEGACY = "legacy"
    STRICT = "strict"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Teamboard", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")

    # Security and authentication
    secret_key: str = Field(alias="SECRET_KEY")
    debug: bool = Field(default=False, alias="DEBUG")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 7,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )

    # Database configuration
    database_url: str = Field(default="sqlite:///./teamboard.db", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Posts
    post_add_permission: AddPermissionMode = Field(
        default=AddPermissionMode.LEGACY,
        alias="POST_ADD_PERMISSION",
    )

    # Markdown rendering
    markdown_hard_wrap: bool = Field(default=True, alias="MARKDOWN_HARD_WRAP")
    markdown_escape_html: bool = Field(default=True, alias="MARKDOWN_ESCAPE_HTML")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def database_url_sync(self) -> str:
        """Return a sync-compatible database URL for tooling.

        Converts asyncpg URLs to psycopg for synchronous database operations
        like Alembic migrations.
        """
        url = self.database_url
        if url.startswith("postgresql+asyncpg"):
            return url.replace("postgresql+asyncpg", "postgresql+psycopg", 1)
        return url


settings = Settings()  # type: ignore[call-arg]
