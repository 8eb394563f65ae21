"""Standardized exception hierarchy for imagecanvas services.

Exception Hierarchy:
    ServiceError (base)
        ConfigurationError
        ExternalServiceError
            DownstreamError
        DomainError
            ValidationError
            ImageProcessingError
                DecodeError
                EncodeError

Usage:
    from imagecanvas.services.exceptions import (
        DecodeError,
        ServiceError,
        ValidationError,
    )

    try:
        transformer.transform(source, background, target)
    except ValidationError:
        # Reject the request before any work is done
        pass
    except DecodeError:
        # The payload is not an image the codec can read
        pass
    except ServiceError:
        # Catch-all for any service-related error
        pass
"""

from typing import Any


class ServiceError(Exception):
    """Base exception for all service-related errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the exception with message and optional details.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class ConfigurationError(ServiceError):
    """Raised when service configuration is missing or invalid.

    This includes:
    - Missing storage bucket or credentials
    - Invalid limits in settings
    """

    pass


class ExternalServiceError(ServiceError):
    """Base exception for errors from external services (object storage, remote hosts)."""

    pass


class DownstreamError(ExternalServiceError):
    """Raised when an external collaborator fails, e.g. an S3 write or a remote fetch.

    Attributes:
        status_code: Optional HTTP status code reported by the remote side.
    """

    def __init__(self, message: str, status_code: int | None = None, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)
        self.status_code = status_code

    def __str__(self) -> str:
        base_msg = self.message
        if self.status_code:
            base_msg = f"[HTTP {self.status_code}] {base_msg}"
        if self.details:
            base_msg = f"{base_msg} (details: {self.details})"
        return base_msg


class DomainError(ServiceError):
    """Base exception for domain/business logic errors."""

    pass


class ValidationError(DomainError):
    """Raised when caller input is rejected before any image work starts.

    Examples: no source supplied, both a file and a URL supplied, an empty
    batch or a batch larger than the allowed maximum.
    """

    pass


class ImageProcessingError(DomainError):
    """Base exception for codec failures on a single image."""

    pass


class DecodeError(ImageProcessingError):
    """Raised when source bytes cannot be decoded as an image."""

    pass


class EncodeError(ImageProcessingError):
    """Raised when the codec fails to produce the target format."""

    pass
