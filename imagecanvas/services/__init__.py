"""imagecanvas services module.

This module provides the canvas normalization pipeline and its storage and
download collaborators.
"""

from imagecanvas.services.exceptions import (
    ConfigurationError,
    DecodeError,
    DomainError,
    DownstreamError,
    EncodeError,
    ExternalServiceError,
    ImageProcessingError,
    ServiceError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "DomainError",
    "DownstreamError",
    "EncodeError",
    "ExternalServiceError",
    "ImageProcessingError",
    "ServiceError",
    "ValidationError",
]
