"""Data models for custom metadata fields."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from imagekit_metadata.models.base import ImageKitModel


class FieldType(str, Enum):
    """Value type of a custom metadata field."""
    NUMBER = "Number"
    TEXT = "Text"
    DATE = "Date"
    BOOLEAN = "Boolean"
    SINGLE_SELECT = "SingleSelect"
    MULTI_SELECT = "MultiSelect"


class CustomFieldSchema(ImageKitModel):
    """Validation schema of a custom metadata field.

    Bounds are numbers for ``Number`` fields and date strings for ``Date``
    fields, so they are left untyped. ``type`` also accepts the plain type
    name, anything outside ``FieldType`` is rejected.
    """
    type: Optional[FieldType] = Field(None, alias="type", strict=False)
    default_value: Any = Field(None, alias="defaultValue")
    select_options: Optional[List[Any]] = Field(None, alias="selectOptions")
    is_value_required: Optional[bool] = Field(None, alias="isValueRequired")
    min_value: Any = Field(None, alias="minValue")
    max_value: Any = Field(None, alias="maxValue")
    min_length: Optional[int] = Field(None, alias="minLength")
    max_length: Optional[int] = Field(None, alias="maxLength")


class CustomField(ImageKitModel):
    """Custom metadata field as stored by the service."""
    id: str = Field("", alias="id")
    name: str = Field("", alias="name")
    label: str = Field("", alias="label")
    field_schema: CustomFieldSchema = Field(default_factory=CustomFieldSchema, alias="schema")


class CreateFieldParam(ImageKitModel):
    """Parameters for creating a custom metadata field."""
    name: str = Field("", alias="name")
    label: str = Field("", alias="label")
    field_schema: CustomFieldSchema = Field(default_factory=CustomFieldSchema, alias="schema")


class UpdateCustomFieldParam(ImageKitModel):
    """Parameters for updating a custom metadata field.

    Only the attributes that are set are sent to the service.
    """
    field_id: str = Field("", exclude=True)
    label: Optional[str] = Field(None, alias="label")
    field_schema: Optional[CustomFieldSchema] = Field(None, alias="schema")
