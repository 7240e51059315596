"""
Base Schema Classes

This module provides base classes for request payloads and resource models
with common serialization and deserialization methods, plus the timestamp
helpers shared by every resource.
"""

import json
import re
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Type, TypeVar, Union

T = TypeVar("T", bound="BaseModel")

Timestamp = Union[datetime, str, int, float]

_FRACTION = re.compile(r"\.(\d+)")


def frozen_map(items: Any = None) -> Mapping:
    """Read-only view over a new dict built from `items`."""
    return MappingProxyType(dict(items or {}))


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_timestamp(value: Timestamp) -> datetime:
    """
    Convert a wire timestamp into an aware datetime.

    Args:
        value: ISO 8601 string (a trailing 'Z' is accepted), epoch
            milliseconds, or an existing datetime.

    Returns:
        Timezone-aware datetime (naive values are assumed to be UTC).

    Raises:
        ValueError: If the value cannot be interpreted as a timestamp.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid timestamp: {value!r}")
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        # fromisoformat wants exactly six fractional digits
        text = _FRACTION.sub(
            lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1
        )
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"Invalid timestamp: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_wire(value: Any) -> Any:
    """
    Recursively convert a value into JSON-compatible data.

    Enums become their wire value, datetimes become ISO 8601 strings and
    nested models become dictionaries.
    """
    if isinstance(value, BaseModel):
        return value.to_dict()
    if isinstance(value, Enum):
        return getattr(value, "wire_value", value.value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {to_wire(key): to_wire(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    return value


class BaseModel:
    """
    Base class for resource models and request payloads.

    Subclasses are frozen dataclasses whose collections are tuples and
    read-only mappings, so decoded resources cannot be changed in place.
    Models holding mappings compare by value but are not hashable.

    Deserialization goes through `_from_data`, which subclasses override
    when nested values need converting. Serialization emits every field,
    or only the set ones for partial updates that override `to_dict`.
    """

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary keyed by field name.
        """
        if not is_dataclass(self):
            raise TypeError(f"{type(self).__name__} is not a dataclass")
        return {
            f.name: to_wire(getattr(self, f.name))
            for f in fields(self)
        }

    def to_json(self) -> str:
        """
        Convert to JSON string.

        Returns:
            JSON string representation of the model.
        """
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """
        Create instance from dictionary.

        Args:
            data: Dictionary as decoded from the wire.

        Returns:
            Instance of the model class.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Expected an object for {cls.__name__}, "
                f"got {type(data).__name__}"
            )
        return cls._from_data(data)

    @classmethod
    def from_json(cls: Type[T], json_str: str) -> T:
        """
        Create instance from JSON string.

        Args:
            json_str: JSON string containing the model.

        Returns:
            Instance of the model class.
        """
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def _from_data(cls: Type[T], data: Dict[str, Any]) -> T:
        """
        Create instance from a data dictionary.

        Should be overridden by subclasses for custom deserialization.
        """
        return cls(**data)
