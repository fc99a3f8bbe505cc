"""Custom exceptions used throughout the lifesim package."""

from typing import Any, Optional


class LifeError(Exception):
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


class ConfigurationError(LifeError):
    """Raised when there's an error in configuration.

    This includes:
    - Invalid configuration value
    - Missing required configuration
    - Configuration validation failures
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


class InvalidLengthError(LifeError):
    """Raised when a cell sequence cannot form a rectangular grid.

    Examples:
    - 15 cells with a row size of 4
    - An empty cell sequence
    - A row size of zero
    """

    def __init__(
        self,
        length: int,
        row_size: int,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details["length"] = length
        details["row_size"] = row_size
        message = (
            f"Invalid board length {length}: "
            f"must be a positive multiple of row size {row_size}"
        )
        super().__init__(message=message, details=details)
        self.length = length
        self.row_size = row_size


class InvalidCellError(LifeError):
    """Raised when a value does not name a cell state."""

    def __init__(self, value: Any, details: Optional[dict[str, Any]] = None):
        details = details or {}
        details["value"] = repr(value)
        super().__init__(message=f"Invalid cell value: {value!r}", details=details)
        self.value = value
