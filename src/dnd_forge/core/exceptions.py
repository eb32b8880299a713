"""Custom exception hierarchy for the D&D 5E character forge.

All exceptions inherit from DndForgeError so callers can catch everything
the library raises at a single boundary. Rule violations a player can
trigger (an over-spent point buy, a homebrew race) are NOT exceptions;
they come back as structured results. Only programmer and integration
errors are raised.

Example:
    >>> from dnd_forge.core.exceptions import DiceRollError
    >>> raise DiceRollError("Unknown dice type", expression="d7")
"""

from __future__ import annotations

from typing import Any


class DndForgeError(Exception):
    """Base exception for all character forge errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = dict(details or {})
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(DndForgeError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = dict(details or {})
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(DndForgeError):
    """Raised when data validation fails.

    This covers request payloads that break the gameplay API's bounds,
    such as a count of 50 dice or both advantage and disadvantage.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = dict(details or {})
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


class MalformedInputError(ValidationError):
    """Raised when input is structurally invalid.

    A missing ability key, a string where a score belongs, or a level of 0
    indicate an integration bug rather than a player mistake, so they fail
    loudly instead of defaulting.
    """


# =============================================================================
# Rules Engine Exceptions
# =============================================================================


class RulesEngineError(DndForgeError):
    """Base exception for rules engine errors."""


class DiceRollError(RulesEngineError):
    """Raised when a dice roll cannot be performed.

    Typically an unknown dice type or a non-positive dice count.
    """

    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize dice roll error with expression context.

        Args:
            message: Human-readable error description.
            expression: The dice expression that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = dict(details or {})
        if expression:
            combined_details["expression"] = expression
        super().__init__(message, details=combined_details)


class ReferenceDataError(RulesEngineError):
    """Raised when a reference data source cannot be loaded.

    A race or class that is simply absent from the catalog is not an
    error; this is for unreadable or malformed data files.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize reference data error with source context.

        Args:
            message: Human-readable error description.
            source: Path or name of the data source that failed.
            details: Optional dictionary containing additional error context.
        """
        combined_details = dict(details or {})
        if source:
            combined_details["source"] = source
        super().__init__(message, details=combined_details)


__all__ = [
    "DndForgeError",
    "ConfigurationError",
    "ValidationError",
    "MalformedInputError",
    "RulesEngineError",
    "DiceRollError",
    "ReferenceDataError",
]
