"""
Custom exception classes for acffields.

Provides structured error handling with domain-specific exceptions
for the reader, the providers and the configuration layer.
"""

from enum import Enum
from typing import Any, Dict, Optional


class AcfFieldsException(Exception):
    """Base exception class for all acffields exceptions."""

    pass


class InvalidArgumentError(AcfFieldsException, ValueError):
    """
    Raised when a lookup is given an entity reference it cannot encode.

    Typical causes:
    - A taxonomy term that is neither a ``Term`` nor a ``[taxonomy, term_id]`` pair
    - An unknown entity kind passed to ``FieldReader.get_fields``

    Example:
        >>> raise InvalidArgumentError(
        ...     reason="term must be a Term or a [taxonomy, term_id] pair",
        ...     details={"term": ["category"]}
        ... )
    """

    def __init__(self, reason: str, details: Optional[Dict[str, Any]] = None):
        self.reason = reason
        self.details = details or {}
        message = f"{reason}"
        if self.details:
            message += f" - {self.details}"
        super().__init__(message)


class ProviderError(AcfFieldsException):
    """Raised when a field provider fails to return field objects."""

    pass


class ProviderRegistryError(AcfFieldsException, RuntimeError):
    pass


class ConfigError(AcfFieldsException):
    """Raised when a reader configuration cannot be loaded."""

    pass


class ProviderErrorPolicy(Enum):
    """Policy for handling provider failures during a lookup."""

    FAIL = "fail"              # Raise ProviderError
    WARN = "warn"              # Log warning and return an empty mapping (default)
    ALLOW = "allow"            # Return an empty mapping silently


class ProviderFailureHandler:
    """
    Handles provider failures based on configured policy.

    Usage:
        >>> handler = ProviderFailureHandler(policy=ProviderErrorPolicy.FAIL)
        >>> handler.handle(exc, details={"key": "user_42"})
        # Raises ProviderError

        >>> handler = ProviderFailureHandler(policy=ProviderErrorPolicy.WARN, logger=log)
        >>> handler.handle(exc, details={"key": "user_42"})
        # Logs warning, caller degrades to {}
    """

    def __init__(
        self,
        policy: ProviderErrorPolicy = ProviderErrorPolicy.WARN,
        logger: Optional[Any] = None,
    ):
        self.policy = policy
        self.logger = logger

    def handle(self, error: Exception, details: Optional[Dict[str, Any]] = None) -> None:
        """
        Handle a provider failure based on policy.

        Args:
            error: The exception raised by the provider
            details: Additional context about the lookup

        Raises:
            ProviderError: If policy is FAIL
        """
        details = details or {}

        if self.policy == ProviderErrorPolicy.FAIL:
            if isinstance(error, ProviderError):
                raise error
            raise ProviderError(f"Field provider failed: {error} - {details}") from error

        elif self.policy == ProviderErrorPolicy.WARN:
            if self.logger:
                self.logger.warning(
                    f"Field provider failed, returning no fields: {error} - {details}",
                    exc_info=error,
                )
            else:
                import warnings
                warnings.warn(f"Field provider failed: {error} - {details}", UserWarning)
