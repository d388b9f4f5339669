"""Collector kinds supported by the factory."""

from enum import Enum
from typing import Union


class CollectorKind(Enum):
    """Prometheus collector types."""
    COUNTER = "COUNTER"
    GAUGE = "GAUGE"
    HISTOGRAM = "HISTOGRAM"
    SUMMARY = "SUMMARY"

    @classmethod
    def parse(cls, value: Union["CollectorKind", str]) -> "CollectorKind":
        """
        Resolve a kind from an enum member or its name (case-insensitive).

        Raises:
            ValueError: If the name is not a known collector kind
        """
        if isinstance(value, cls):
            return value
        if value is None:
            raise ValueError("Collector kind must not be None")
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            valid = ", ".join(kind.value for kind in cls)
            raise ValueError(f"Unknown collector kind {value!r} (expected one of {valid})") from None
