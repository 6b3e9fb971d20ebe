"""Base model for payloads exchanged with the service."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class ImageKitModel(BaseModel):
    """Strictly typed payload whose fields are keyed by their JSON names.

    A JSON ``null`` is read as a missing key, so the field keeps its default.
    """
    model_config = ConfigDict(strict=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
