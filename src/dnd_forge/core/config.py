"""Configuration management for the D&D 5E character forge.

Settings are loaded with pydantic-settings from environment variables and
an optional .env file.

Example:
    >>> from dnd_forge.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.rules.require_full_point_spend
    True

Environment Variables:
    DND_FORGE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DND_FORGE_DEBUG: Add module/function/line fields to log entries
    DND_FORGE_JSON_LOGS: Emit JSON log lines instead of console output
    DND_FORGE_LOG_FILE: Also write log lines to this file
    DND_FORGE_RULES_REQUIRE_FULL_POINT_SPEND: Require all 27 points at submission
    DND_FORGE_RULES_REFERENCE_DATA_PATH: JSON file with races/classes/backgrounds
    DND_FORGE_DICE_SEED: Seed for the default dice roller
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dnd_forge.core.constants import (
    DEFAULT_HIT_DIE,
    MAX_DICE_COUNT,
    MAX_ROLL_MODIFIER,
    VALID_HIT_DICE,
)
from dnd_forge.core.exceptions import ConfigurationError


class RulesSettings(BaseSettings):
    """Configuration for character creation rules.

    Attributes:
        require_full_point_spend: Final submissions must spend exactly 27 points.
        reference_data_path: Optional JSON file replacing the built-in catalog.
        default_hit_die: Hit die used when a class cannot be found.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_FORGE_RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    require_full_point_spend: bool = Field(
        default=True,
        description="Require exactly 27 points spent on submission",
    )
    reference_data_path: Path | None = Field(
        default=None,
        description="JSON reference data file",
    )
    default_hit_die: int = Field(
        default=DEFAULT_HIT_DIE,
        description="Fallback hit die for unknown classes",
    )

    @field_validator("reference_data_path", mode="after")
    @classmethod
    def ensure_reference_file_exists(cls, value: Path | None) -> Path | None:
        """Ensure a configured reference data file exists.

        Args:
            value: The configured path, if any.

        Returns:
            The validated path.

        Raises:
            ConfigurationError: If the path is set but is not a file.
        """
        if value is not None and not value.is_file():
            raise ConfigurationError(
                f"Reference data file not found: {value}",
                config_key="reference_data_path",
            )
        return value

    @model_validator(mode="after")
    def validate_default_hit_die(self) -> "RulesSettings":
        """Ensure the fallback hit die is a real die size.

        Raises:
            ConfigurationError: If default_hit_die is not 4, 6, 8, 10 or 12.
        """
        if self.default_hit_die not in VALID_HIT_DICE:
            raise ConfigurationError(
                f"default_hit_die must be one of {VALID_HIT_DICE}, "
                f"got {self.default_hit_die}",
                config_key="default_hit_die",
            )
        return self


class DiceSettings(BaseSettings):
    """Configuration for the dice engine.

    Attributes:
        seed: Optional seed for the default roller (reproducible sessions).
        max_dice_count: Largest dice count accepted by roll requests.
        max_modifier: Largest absolute modifier accepted by roll requests.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_FORGE_DICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    seed: int | None = Field(default=None, description="Default roller seed")
    max_dice_count: int = Field(
        default=MAX_DICE_COUNT,
        ge=1,
        le=100,
        description="Maximum dice per request",
    )
    max_modifier: int = Field(
        default=MAX_ROLL_MODIFIER,
        ge=0,
        le=1000,
        description="Maximum absolute modifier per request",
    )


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode (adds call-site fields to log entries).
        log_level: Application logging level.
        json_logs: Render logs as JSON.
        log_file: Optional log file.
        rules: Character creation rules settings.
        dice: Dice engine settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_FORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="D&D 5E Character Forge",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional file that also receives log lines",
    )

    rules: RulesSettings = Field(default_factory=RulesSettings)
    dice: DiceSettings = Field(default_factory=DiceSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "RulesSettings",
    "DiceSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
