"""
Shared helpers for pexelkit data models.

Field coercion follows one rule: a missing key or JSON null becomes the zero
value of the field's type, while a value of the wrong type raises ValueError.
The client turns that ValueError into a ProtocolError.
"""

from dataclasses import fields, is_dataclass
from typing import Any, Dict, List


class ToDictMixin:
    """
    Mixin that adds to_dict() method to dataclasses.

    Handles nested dataclasses, tuples, lists and dicts.

    Example:
        @dataclass(frozen=True)
        class Thumb(ToDictMixin):
            id: int
            image_url: str

        Thumb(id=1, image_url="u").to_dict()  # {"id": 1, "image_url": "u"}
    """

    def to_dict(self) -> Dict[str, Any]:
        """Convert dataclass to dictionary, handling nested structures."""
        if not is_dataclass(self):
            raise TypeError(f"{self.__class__.__name__} is not a dataclass")

        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            result[f.name] = self._serialize_value(value)

        return result

    def _serialize_value(self, value: Any) -> Any:
        """Serialize a single value for dict output."""
        if value is None:
            return None
        if isinstance(value, (str, int, float, bool)):
            return value
        if isinstance(value, (list, tuple)):
            return [self._serialize_value(v) for v in value]
        if isinstance(value, dict):
            return {k: self._serialize_value(v) for k, v in value.items()}
        if hasattr(value, "to_dict"):
            return value.to_dict()
        return str(value)


def as_int(data: Dict[str, Any], key: str) -> int:
    """Read an integer field; missing or null reads as 0."""
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(f"Field '{key}' must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(f"Field '{key}' must be an integer, got {value!r}")


def as_float(data: Dict[str, Any], key: str) -> float:
    """Read a numeric field as float; missing or null reads as 0.0."""
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Field '{key}' must be a number, got {value!r}")
    return float(value)


def as_str(data: Dict[str, Any], key: str) -> str:
    """Read a string field; missing or null reads as an empty string."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"Field '{key}' must be a string, got {value!r}")
    return value


def as_list(data: Dict[str, Any], key: str) -> List[Any]:
    """Read an array field; missing or null reads as an empty list."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"Field '{key}' must be an array, got {type(value).__name__}")
    return value


def as_object(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Read a nested object field; missing or null reads as an empty dict."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Field '{key}' must be an object, got {type(value).__name__}")
    return value


def require_object(data: Any, what: str) -> Dict[str, Any]:
    """Ensure a decoded JSON value is an object before reading fields from it."""
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object for {what}, got {type(data).__name__}")
    return data
