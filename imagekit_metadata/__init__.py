"""Client for the ImageKit metadata and custom metadata field endpoints."""

from imagekit_metadata.config import Configuration
from imagekit_metadata.metadata_api import (
    CustomFieldResponse,
    CustomFieldsResponse,
    MetadataAPI,
    MetadataResponse,
)
from imagekit_metadata.models import (
    ApiError,
    CreateFieldParam,
    CustomField,
    CustomFieldSchema,
    DecodeError,
    ExifTree,
    FieldType,
    ImageKitError,
    InvalidArgumentError,
    MalformedURLError,
    Metadata,
    RequestCancelledError,
    ServiceError,
    TransportError,
    UnexpectedResponseError,
    UpdateCustomFieldParam,
)
from imagekit_metadata.utils.http import ApiResponse

__all__ = [
    "ApiError",
    "ApiResponse",
    "Configuration",
    "CreateFieldParam",
    "CustomField",
    "CustomFieldResponse",
    "CustomFieldSchema",
    "CustomFieldsResponse",
    "DecodeError",
    "ExifTree",
    "FieldType",
    "ImageKitError",
    "InvalidArgumentError",
    "MalformedURLError",
    "Metadata",
    "MetadataAPI",
    "MetadataResponse",
    "RequestCancelledError",
    "ServiceError",
    "TransportError",
    "UnexpectedResponseError",
    "UpdateCustomFieldParam",
]
