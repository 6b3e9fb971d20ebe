"""Validation of response bodies against the pydantic models."""

from functools import lru_cache
from typing import Any, Sequence, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from imagekit_metadata.models import DecodeError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def error_path(loc: Sequence[Union[int, str]]) -> str:
    """Render a pydantic error location as ``exif.gps.GPSVersionID[1]``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


def _decode_error(exc: ValidationError) -> DecodeError:
    first = exc.errors()[0]
    return DecodeError(first["msg"], error_path(first["loc"]))


def decode(data: Any, target: Type[T]) -> T:
    """Validate already parsed JSON against ``target``.

    Raises:
        DecodeError: If a value does not match the declared type
    """
    try:
        return _adapter(target).validate_python(data)
    except ValidationError as e:
        raise _decode_error(e) from e


def decode_json(body: Union[bytes, str], target: Type[T]) -> T:
    """Parse a JSON document and validate it against ``target``.

    Args:
        body: Raw response body
        target: Model class or ``List[...]`` of a model class

    Returns:
        Instance of ``target``

    Raises:
        DecodeError: If the body is not JSON or a value has the wrong type
    """
    try:
        return _adapter(target).validate_json(body)
    except ValidationError as e:
        raise _decode_error(e) from e
