"""
Custom exception hierarchy for the kinship engine.

Provides a structured exception hierarchy for different error scenarios:
- AppException: Base for all application errors
- ConfigError: Configuration-related errors
- KinshipError: Kinship computation and relationship storage errors
- ValidationError: Input validation errors

Each exception includes:
- Descriptive message
- Optional error code for programmatic handling
- Optional context dictionary for debugging

Example:
    >>> from kinship.utils.exceptions import ArtworkNotFoundError
    >>> raise ArtworkNotFoundError(artwork_id="a1")
"""

from __future__ import annotations

from typing import Any, Dict, Optional


# ============================================
# Base Exception
# ============================================


class AppException(Exception):
    """
    Base exception for all kinship engine errors.

    Attributes:
        message: Human-readable error description.
        code: Optional error code for programmatic handling.
        context: Optional dictionary with debugging context.

    Example:
        >>> try:
        ...     raise AppException("Something went wrong", code="APP_001")
        ... except AppException as e:
        ...     print(f"Error {e.code}: {e.message}")
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code or self._default_code()
        self.context = context or {}
        super().__init__(self.message)

    def _default_code(self) -> str:
        """Generate default error code from class name."""
        # CamelCase -> UPPER_SNAKE_CASE
        name = self.__class__.__name__
        code = ""
        for i, char in enumerate(name):
            if char.isupper() and i > 0:
                code += "_"
            code += char.upper()
        return code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code!r}, "
            f"context={self.context!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "context": self.context,
        }


# ============================================
# Configuration Errors
# ============================================


class ConfigError(AppException):
    """
    Base exception for configuration-related errors.

    Raised when there are issues with:
    - Loading configuration files
    - Parsing YAML
    - Validating configuration values
    """

    pass


class ConfigFileNotFoundError(ConfigError):
    """
    Raised when a required configuration file is not found.

    Example:
        >>> raise ConfigFileNotFoundError(path="/path/to/config.yaml")
    """

    def __init__(
        self,
        message: str = "Configuration file not found",
        path: Optional[str] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if path:
            context["path"] = path
        super().__init__(message, code="CONFIG_FILE_NOT_FOUND", context=context, **kwargs)


class ConfigurationError(ConfigError):
    """
    Raised when configuration is invalid or cannot be parsed.

    Example:
        >>> raise ConfigurationError(
        ...     "Invalid vector weights: must sum to 1",
        ...     context={"weights": {"visual": 0.9, "medium": 0.2, "year": 0.1}}
        ... )
    """

    def __init__(
        self,
        message: str = "Invalid configuration",
        **kwargs,
    ) -> None:
        super().__init__(message, code="CONFIG_INVALID", **kwargs)


# ============================================
# Kinship Errors
# ============================================


class KinshipError(AppException):
    """
    Base exception for kinship computation errors.

    Raised when there are issues with:
    - Locating the artwork a computation was requested for
    - Persisting relationship proposals
    """

    pass


class ArtworkNotFoundError(KinshipError):
    """
    Raised when the source artwork of a computation does not exist.

    Example:
        >>> raise ArtworkNotFoundError(artwork_id="abc-123")
    """

    def __init__(
        self,
        message: str = "Artwork not found",
        artwork_id: Optional[str] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if artwork_id:
            context["artwork_id"] = artwork_id
        super().__init__(message, code="ARTWORK_NOT_FOUND", context=context, **kwargs)


class DuplicateRelationshipError(KinshipError):
    """
    Raised when a relationship for an already linked artwork pair is inserted.

    Example:
        >>> raise DuplicateRelationshipError(pair=("a1", "b2"))
    """

    def __init__(
        self,
        message: str = "Relationship already exists for artwork pair",
        pair: Optional[tuple] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if pair:
            context["pair"] = list(pair)
        super().__init__(message, code="DUPLICATE_RELATIONSHIP", context=context, **kwargs)


# ============================================
# Validation Errors
# ============================================


class ValidationError(AppException):
    """
    Base exception for input validation errors.

    Raised when caller input fails validation.
    """

    pass


class InvalidInputError(ValidationError):
    """Raised when input data is invalid."""

    def __init__(
        self,
        message: str = "Invalid input",
        field: Optional[str] = None,
        value: Any = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if field:
            context["field"] = field
        if value is not None:
            context["value"] = str(value)[:100]  # Limit value length
        super().__init__(message, code="INVALID_INPUT", context=context, **kwargs)
