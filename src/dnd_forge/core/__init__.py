"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        DndForgeError: Base exception for all library errors.
        ConfigurationError: Configuration-related errors.
        ValidationError: Data validation errors.
        MalformedInputError: Structurally invalid input (programmer error).
        DiceRollError: Dice engine errors.
        ReferenceDataError: Unloadable reference data.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from dnd_forge.core.config import (
    DiceSettings,
    RulesSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from dnd_forge.core.exceptions import (
    ConfigurationError,
    DiceRollError,
    DndForgeError,
    MalformedInputError,
    ReferenceDataError,
    RulesEngineError,
    ValidationError,
)
from dnd_forge.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "DndForgeError",
    "ConfigurationError",
    "ValidationError",
    "MalformedInputError",
    "RulesEngineError",
    "DiceRollError",
    "ReferenceDataError",
    # Configuration
    "Settings",
    "RulesSettings",
    "DiceSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
