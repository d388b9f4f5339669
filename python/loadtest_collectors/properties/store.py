"""
Property store used to persist collector settings.

The load-testing host keeps element settings as named string properties and
string lists. Collector configs only depend on this narrow interface, so any
host (GUI element, test-plan file, plain dict) can back them.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

PropertyValue = Union[str, List[str]]


class PropertyStore(ABC):
    """Abstract key/value store of strings and string lists."""

    @abstractmethod
    def get_string(self, key: str, default: str = "") -> str:
        """
        Get a property as a string.

        Args:
            key: Property name
            default: Returned when the property is missing

        Returns:
            Stored string value or default
        """

    @abstractmethod
    def set_string(self, key: str, value: str) -> None:
        """Set a string property."""

    @abstractmethod
    def get_string_list(self, key: str) -> List[str]:
        """Get a property as a list of strings (empty if missing)."""

    @abstractmethod
    def set_string_list(self, key: str, values: Iterable[str]) -> None:
        """Set a string list property."""

    @abstractmethod
    def keys(self) -> List[str]:
        """Property names in insertion order."""

    def has(self, key: str) -> bool:
        """Check whether a property is set."""
        return key in self.keys()


class DictPropertyStore(PropertyStore):
    """In-memory property store backed by an insertion-ordered dict."""

    def __init__(self, properties: Optional[Mapping[str, Any]] = None):
        self._properties: Dict[str, PropertyValue] = {}
        if properties:
            for key, value in properties.items():
                self._put(key, value)

    def _put(self, key: str, value: Any) -> None:
        if isinstance(value, (list, tuple)):
            self._properties[key] = [str(item) for item in value]
        elif value is None:
            self._properties[key] = ""
        else:
            self._properties[key] = str(value)

    def get_string(self, key: str, default: str = "") -> str:
        value = self._properties.get(key)
        if value is None:
            return default
        if isinstance(value, list):
            return ",".join(value)
        return value

    def set_string(self, key: str, value: str) -> None:
        self._properties[key] = "" if value is None else str(value)

    def get_string_list(self, key: str) -> List[str]:
        value = self._properties.get(key)
        if value is None:
            return []
        if isinstance(value, list):
            return list(value)
        return value.split(",") if value else []

    def set_string_list(self, key: str, values: Iterable[str]) -> None:
        self._properties[key] = [str(item) for item in values]

    def keys(self) -> List[str]:
        return list(self._properties.keys())

    def to_dict(self) -> Dict[str, PropertyValue]:
        """Copy of the stored properties, lists copied as well."""
        return {
            key: list(value) if isinstance(value, list) else value
            for key, value in self._properties.items()
        }

    @classmethod
    def from_dict(cls, properties: Mapping[str, Any]) -> "DictPropertyStore":
        """Build a store from a plain mapping (e.g. decoded JSON)."""
        return cls(properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"DictPropertyStore({self._properties!r})"
