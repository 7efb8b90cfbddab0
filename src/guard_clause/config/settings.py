"""
Settings for guard_clause.

GUARD_* variables control name capture, violation logging and the clause
messages; LOG_* variables feed configure_logging(). A YAML file with the same
sections can be used instead of the environment.
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GuardSettings(BaseSettings):
    """
    Guard behaviour: call-site parameter capture, violation logging,
    and the default messages used by the fluent clause.
    """

    model_config = SettingsConfigDict(env_prefix="GUARD_", extra="ignore")

    capture_param_names: bool = Field(
        default=True,
        description="Recover the argument's source text when against() is called without param_name",
    )
    log_violations: bool = Field(default=True, description="Emit a debug log event before raising")
    default_message: str = Field(default="Invalid value.", description="Message used by when() if none is given")
    not_null_message: str = Field(default="Value must be None.", description="Message used by when_not_null()")


class LoggingSettings(BaseSettings):
    """Level and renderer used by configure_logging()."""

    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_format: str = Field(default="json", description="Format: 'json' or 'console'")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = ("json", "console")
        if v.lower() not in allowed:
            raise ValueError(f"log_format must be one of {allowed}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        u = v.upper()
        if u not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return u


class Settings(BaseSettings):
    """Guard and logging settings, read from the environment and an optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    guard: GuardSettings = Field(default_factory=GuardSettings, description="Guard behaviour config")
    logging: LoggingSettings = Field(default_factory=LoggingSettings, description="Logging config")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """
        Build Settings from a YAML file with optional ``guard`` and ``logging`` sections.

        Sections that are missing fall back to the environment and defaults.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        sections: dict[str, Any] = {
            "guard": GuardSettings,
            "logging": LoggingSettings,
        }
        return cls(
            **{
                name: model_class.model_validate(data[name])
                for name, model_class in sections.items()
                if isinstance(data.get(name), dict)
            }
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the shared Settings, creating it on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Rebuild the shared Settings, e.g. after the environment changed."""
    global _settings
    _settings = Settings()
    return _settings
