"""
Media RSS library configuration.

This module provides settings for XML output and namespace handling
loaded from environment variables.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Find .env file in project root
_env_file = Path(__file__).parent.parent / ".env"


class MediaRssSettings(BaseSettings):
    """
    Media RSS settings from environment variables.

    All settings are prefixed with MRSS_ in environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="MRSS_",
        env_file=str(_env_file) if _env_file.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    # to_xml() layout
    indent_output: bool = True
    indent_space: str = "  "

    # Accept http://search.yahoo.com/mrss (no trailing slash) when resolving media: children
    accept_legacy_namespace: bool = True


# Global instance
settings = MediaRssSettings()
