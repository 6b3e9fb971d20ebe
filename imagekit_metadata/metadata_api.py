"""Metadata API of ImageKit: image metadata and custom metadata fields."""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Type
from urllib.parse import quote

import httpx

from imagekit_metadata.config import Configuration
from imagekit_metadata.models import (
    ApiError,
    CreateFieldParam,
    CustomField,
    CustomFieldSchema,
    DecodeError,
    FieldType,
    InvalidArgumentError,
    Metadata,
    UnexpectedResponseError,
    UpdateCustomFieldParam,
)
from imagekit_metadata.utils.decoding import decode_json
from imagekit_metadata.utils.http import ApiResponse, TimeoutTypes, build_request, send

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


@dataclass
class MetadataResponse:
    """Decoded metadata together with the raw response."""
    data: Metadata = field(default_factory=Metadata)
    response: ApiResponse = field(default_factory=ApiResponse)


@dataclass
class CustomFieldResponse:
    data: CustomField = field(default_factory=CustomField)
    response: ApiResponse = field(default_factory=ApiResponse)


@dataclass
class CustomFieldsResponse:
    data: List[CustomField] = field(default_factory=list)
    response: ApiResponse = field(default_factory=ApiResponse)


def _segment(value: str) -> str:
    return quote(value, safe="")


def _require(value: Optional[str], name: str) -> None:
    if not value:
        raise InvalidArgumentError(f"{name} can not be blank")


def _require_type(schema: CustomFieldSchema) -> None:
    if schema.type is None:
        allowed = ", ".join(member.value for member in FieldType)
        raise InvalidArgumentError(f"schema type can not be blank, use one of {allowed}")


def _raise_for_status(response: ApiResponse, status_code: int) -> None:
    """Raise the error for a response that does not carry ``status_code``."""
    if response.status_code == status_code:
        return
    if response.is_success:
        error: ApiError = UnexpectedResponseError(
            f"Expected status {status_code}, got {response.status_code}", response
        )
    else:
        error = response.parse_error()
    logger.warning(
        "%s: status %s with %s byte body",
        type(error).__name__, response.status_code, len(response.body),
    )
    raise error


class MetadataAPI:
    """Client for the metadata endpoints.

    One instance can be shared between threads: the configuration is
    immutable and every call works on its own request and response.
    """

    def __init__(
        self,
        config: Configuration,
        client: Optional[httpx.Client] = None,
        timeout: TimeoutTypes = DEFAULT_TIMEOUT,
    ):
        """Initialize the API.

        Args:
            config: Credentials and API prefix
            client: HTTP client to send requests with; one is created and
                owned by the API when omitted
            timeout: Default deadline of the owned client
        """
        self.config = config
        if client is None:
            self.client = httpx.Client(timeout=timeout)
            self._owns_client = True
        else:
            self.client = client
            self._owns_client = False

    @classmethod
    def from_env(cls, client: Optional[httpx.Client] = None) -> "MetadataAPI":
        """Create an API configured from ``IMAGEKIT_*`` environment variables."""
        return cls(Configuration.from_env(), client=client)

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "MetadataAPI":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _call(
        self,
        method: str,
        path: str,
        query: Optional[Mapping[str, str]] = None,
        json_body: Any = None,
        timeout: TimeoutTypes = None,
    ) -> ApiResponse:
        request = build_request(
            self.client, self.config, method, path, query=query, json_body=json_body, timeout=timeout
        )
        return send(self.client, request)

    def _expect(self, response: ApiResponse, status_code: int, target: Type[Any]) -> Any:
        """Decode a response that must carry ``status_code``."""
        _raise_for_status(response, status_code)
        try:
            return decode_json(response.body, target)
        except DecodeError as e:
            logger.warning("Could not decode %s response: %s", target, e)
            raise e.with_response(response) from e

    def from_asset(self, asset_id: str, timeout: TimeoutTypes = None) -> MetadataResponse:
        """Fetch metadata of a file in the media library.

        Args:
            asset_id: Identifier of the file
            timeout: Deadline for this call

        Returns:
            Decoded metadata and the raw response

        Raises:
            InvalidArgumentError: If asset_id is empty
            ApiError: If the service rejects the request or the body is malformed
            TransportError: If the request could not be completed
        """
        _require(asset_id, "asset_id")
        response = self._call("GET", f"files/{_segment(asset_id)}/metadata", timeout=timeout)
        data = self._expect(response, 200, Metadata)
        return MetadataResponse(data=data, response=response)

    def from_url(self, url: str, timeout: TimeoutTypes = None) -> MetadataResponse:
        """Fetch metadata of an image at a public URL.

        Raises the same errors as ``from_asset``.
        """
        _require(url, "url")
        response = self._call("GET", "metadata", query={"url": url}, timeout=timeout)
        data = self._expect(response, 200, Metadata)
        return MetadataResponse(data=data, response=response)

    def create_custom_field(
        self, param: CreateFieldParam, timeout: TimeoutTypes = None
    ) -> CustomFieldResponse:
        """Create a custom metadata field."""
        _require(param.name, "name")
        _require(param.label, "label")
        _require_type(param.field_schema)
        body = param.model_dump(mode="json", by_alias=True, exclude_none=True)

        response = self._call("POST", "customFields", json_body=body, timeout=timeout)
        data = self._expect(response, 201, CustomField)
        logger.info("Created custom field %s (%s)", data.name, data.id)
        return CustomFieldResponse(data=data, response=response)

    def custom_fields(
        self, include_deleted: bool = False, timeout: TimeoutTypes = None
    ) -> CustomFieldsResponse:
        """List custom metadata fields in the order the service returns them."""
        query = {"includeDeletedFields": "true" if include_deleted else "false"}
        response = self._call("GET", "customFields", query=query, timeout=timeout)
        data = self._expect(response, 200, List[CustomField])
        return CustomFieldsResponse(data=data, response=response)

    def update_custom_field(
        self, param: UpdateCustomFieldParam, timeout: TimeoutTypes = None
    ) -> CustomFieldResponse:
        """Update the label and/or schema of a custom metadata field.

        Only the attributes set on ``param`` are sent.
        """
        _require(param.field_id, "field_id")
        if param.label is None and param.field_schema is None:
            raise InvalidArgumentError("nothing to update, set label or schema")

        if param.field_schema is not None:
            _require_type(param.field_schema)
        body = param.model_dump(mode="json", by_alias=True, exclude_none=True)

        response = self._call(
            "PATCH", f"customFields/{_segment(param.field_id)}", json_body=body, timeout=timeout
        )
        data = self._expect(response, 200, CustomField)
        return CustomFieldResponse(data=data, response=response)

    def delete_custom_field(self, field_id: str, timeout: TimeoutTypes = None) -> ApiResponse:
        """Delete a custom metadata field.

        Returns:
            The raw response, which has an empty body on success
        """
        _require(field_id, "field_id")
        response = self._call("DELETE", f"customFields/{_segment(field_id)}", timeout=timeout)
        _raise_for_status(response, 204)
        logger.info("Deleted custom field %s", field_id)
        return response
