"""
Configuration management for bookforge.

Uses pydantic-settings for environment-based configuration with validation.
All settings can be overridden via environment variables with BOOKFORGE_ prefix.
"""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class ResolverSettings(BaseSettings):
    """Settings for parsable file resolution."""

    model_config = SettingsConfigDict(env_prefix="BOOKFORGE_RESOLVER_")

    # Raise collaborator errors instead of skipping the candidate
    strict: bool = Field(default=False)


class StructureSettings(BaseSettings):
    """File names of the structure documents of a book."""

    model_config = SettingsConfigDict(env_prefix="BOOKFORGE_STRUCTURE_")

    readme: str = Field(default="README.md", min_length=1)
    summary: str = Field(default="SUMMARY.md", min_length=1)
    glossary: str = Field(default="GLOSSARY.md", min_length=1)
    langs: str = Field(default="LANGS.md", min_length=1)

    def filename_for(self, kind: str) -> str:
        """
        Get the configured file name for a structure document.

        Args:
            kind: One of "readme", "summary", "glossary" or "langs".

        Returns:
            The logical file name to resolve.

        Raises:
            ValueError: If the kind is not a structure document.
        """
        if kind not in ("readme", "summary", "glossary", "langs"):
            raise ValueError(f"Unknown structure file: {kind}")
        return getattr(self, kind)


class Settings(BaseSettings):
    """Main library settings aggregating all subsettings."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKFORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="bookforge")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Subsettings
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)
    structure: StructureSettings = Field(default_factory=StructureSettings)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level


# Global settings instance - lazy loaded
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if necessary."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(settings: Optional[Settings] = None, **kwargs) -> Settings:
    """
    Configure the global settings.

    Args:
        settings: Optional Settings instance to use directly
        **kwargs: Settings overrides

    Returns:
        The configured Settings instance
    """
    global _settings
    if settings is not None:
        _settings = settings
    elif kwargs:
        _settings = Settings(**kwargs)
    else:
        _settings = Settings()
    return _settings
