"""Models for the ImageKit metadata client."""

from typing import TYPE_CHECKING, Optional

from imagekit_metadata.models.custom_fields import (
    CreateFieldParam,
    CustomField,
    CustomFieldSchema,
    FieldType,
    UpdateCustomFieldParam,
)
from imagekit_metadata.models.metadata import (
    Exif,
    ExifTree,
    Gps,
    ImageExif,
    Interoperability,
    Metadata,
    ThumbnailExif,
)

if TYPE_CHECKING:
    from imagekit_metadata.utils.http import ApiResponse


class ImageKitError(Exception):
    """Base exception for ImageKit operations."""


class ConfigurationError(ImageKitError):
    """Raised when the client configuration is incomplete."""


class InvalidArgumentError(ImageKitError, ValueError):
    """Raised when a required argument is empty; no request is sent."""


class MalformedURLError(ImageKitError, ValueError):
    """Raised when the request URL cannot be built."""

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        message = f"Malformed request URL {url!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class TransportError(ImageKitError):
    """Raised when the HTTP call itself fails before a response arrives."""


class RequestCancelledError(TransportError):
    """Raised when the request deadline expires before the response arrives."""


class ApiError(ImageKitError):
    """Raised for responses that cannot be turned into a result.

    The envelope stays attached so callers can inspect the raw status and body.
    """

    def __init__(self, message: str, response: Optional["ApiResponse"] = None):
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status_code if self.response is not None else 0

    @property
    def body(self) -> bytes:
        return self.response.body if self.response is not None else b""


class ServiceError(ApiError):
    """Non-2xx response carrying a structured error body."""

    def __init__(self, message: str, response: Optional["ApiResponse"] = None, help: str = ""):
        super().__init__(message, response)
        self.message = message
        self.help = help

    def __str__(self) -> str:
        return f"{self.status_code}: {self.message}"


class UnexpectedResponseError(ApiError):
    """Non-2xx response whose body is not a structured error."""


class DecodeError(ApiError):
    """Response body that does not match the expected shape."""

    def __init__(self, reason: str, path: str = "", response: Optional["ApiResponse"] = None):
        super().__init__(f"{path}: {reason}" if path else reason, response)
        self.reason = reason
        self.path = path

    def with_response(self, response: "ApiResponse") -> "DecodeError":
        return DecodeError(self.reason, self.path, response)


__all__ = [
    "ApiError",
    "ConfigurationError",
    "CreateFieldParam",
    "CustomField",
    "CustomFieldSchema",
    "DecodeError",
    "Exif",
    "ExifTree",
    "FieldType",
    "Gps",
    "ImageExif",
    "ImageKitError",
    "Interoperability",
    "InvalidArgumentError",
    "MalformedURLError",
    "Metadata",
    "RequestCancelledError",
    "ServiceError",
    "ThumbnailExif",
    "TransportError",
    "UnexpectedResponseError",
    "UpdateCustomFieldParam",
]
