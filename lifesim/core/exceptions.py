"""Custom exceptions used throughout the lifesim package."""

from typing import Any, Optional


class LifeSimError(Exception):
    """Base exception for all lifesim errors.

    All lifesim-specific exceptions should inherit from this class.
    This allows catching all lifesim errors with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(LifeSimError):
    """Raised when there's an error in configuration.

    This includes:
    - Unparseable YAML
    - Missing or mistyped configuration values
    - Values outside their allowed range
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class PatternError(LifeSimError):
    """Raised when a seed pattern cannot be found, registered or read.

    Examples:
    - Unknown pattern name
    - Registering the same name twice
    - Pattern file missing or unreadable
    """

    def __init__(
        self,
        name: str,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if message is None:
            message = f"Pattern error for '{name}'"
        details = details or {}
        details["pattern"] = name
        super().__init__(message=message, details=details)
        self.name = name


class RenderError(LifeSimError):
    """Raised when a rendered field cannot be written to its output sink."""
