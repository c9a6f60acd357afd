"""
Application configuration management.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """CLI settings loaded from SHADCN_UI_* environment variables."""

    # Logging
    log_level: str = "WARNING"

    # Project layout
    config_file_name: str = "shadcn-ui.yaml"
    mod_file_name: str = "mod.rs"
    component_extension: str = ".rs"

    # Registry / canonical sources
    registry_file: Optional[str] = None  # YAML catalog replacing the built-in one
    source_dir: Optional[str] = None  # Directory holding canonical component sources

    # Sync
    diff_context: int = 3
    backup_suffix: str = ".bak"

    model_config = SettingsConfigDict(
        env_prefix="SHADCN_UI_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
