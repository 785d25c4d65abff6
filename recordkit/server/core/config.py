"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class DatabaseConfig(BaseModel):
    """Database connection configuration."""

    url: str = Field(
        default="sqlite+aiosqlite:///./recordkit.db",
        alias="DATABASE_URL",
        description="Async SQLAlchemy connection URL",
    )
    create_tables: bool = Field(
        default=True,
        alias="DATABASE_CREATE_TABLES",
        description="Create missing tables on startup (use Alembic in production)",
    )

    model_config = {"populate_by_name": True}


class TooltipConfig(BaseModel):
    """Defaults applied to every new tooltip."""

    icon_before: bool = Field(
        default=False,
        alias="RECORDKIT_TOOLTIP_ICON_BEFORE",
        description="Render the tooltip icon before the element instead of after it",
    )
    trigger: str = Field(
        default="click",
        alias="RECORDKIT_TOOLTIP_TRIGGER",
        description="Default tooltip trigger (click, hover, focus, manual)",
    )
    use_icon: bool = Field(
        default=False,
        alias="RECORDKIT_TOOLTIP_USE_ICON",
        description="Attach tooltips to a separate icon instead of the element itself",
    )
    html: bool = Field(
        default=False,
        alias="RECORDKIT_TOOLTIP_HTML",
        description="Allow HTML in tooltip titles",
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =====================================================================
    # Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="recordkit server host address to bind to",
        alias="RECORDKIT_SERVER_HOST",
    )
    server_port: int = Field(
        default=8000,
        description="recordkit server port number",
        alias="RECORDKIT_SERVER_PORT",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="RECORDKIT_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file",
        alias="LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write logs to a file under the log directory",
        alias="ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./recordkit.db",
        description="Async SQLAlchemy connection URL for the application database",
        alias="DATABASE_URL",
    )
    database_create_tables: bool = Field(
        default=True,
        description="Create missing tables on startup",
        alias="DATABASE_CREATE_TABLES",
    )

    # =====================================================================
    # Web Configuration
    # =====================================================================
    web_root: str = Field(
        default="/",
        description="Base URL that relative links are resolved against",
        alias="RECORDKIT_WEB_ROOT",
    )
    html_encoding: str = Field(
        default="utf-8",
        description="Character set announced by forms and documents",
        alias="RECORDKIT_HTML_ENCODING",
    )

    # =====================================================================
    # Tooltip Configuration
    # =====================================================================
    tooltip_icon_before: bool = Field(default=False, alias="RECORDKIT_TOOLTIP_ICON_BEFORE")
    tooltip_trigger: str = Field(default="click", alias="RECORDKIT_TOOLTIP_TRIGGER")
    tooltip_use_icon: bool = Field(default=False, alias="RECORDKIT_TOOLTIP_USE_ICON")
    tooltip_html: bool = Field(default=False, alias="RECORDKIT_TOOLTIP_HTML")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def database(self) -> DatabaseConfig:
        """Get database configuration from environment variables."""
        return DatabaseConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def tooltips(self) -> TooltipConfig:
        """Get tooltip defaults from environment variables."""
        return TooltipConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
