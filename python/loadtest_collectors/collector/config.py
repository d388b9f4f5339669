"""
Collector configuration.

Holds the textual settings of one collector, as entered in the load-testing
GUI or read from a test-plan file, and parses the numeric payload on read.
"""

import logging
import random
import string
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ..properties.store import DictPropertyStore, PropertyStore
from .kinds import CollectorKind
from .parsing import DEFAULT_BUCKET_SIZES_STRING, parse_buckets, parse_quantiles
from .quantiles import DEFAULT_QUANTILES_STRING, QuantileDefinition

logger = logging.getLogger("loadtest.collector")

# Property keys
HELP = "collector.help"
NAME = "collector.metric_name"
TYPE = "collector.type"
LABELS = "collector.labels"
QUANTILES_OR_BUCKETS = "collector.quantiles_or_buckets"

DEFAULT_HELP_STRING = "default help string"
METRIC_NAME_BASE = "loadtest_autogenerated_metric_"

_NAME_ALPHABET = string.ascii_letters + string.digits
_NAME_SUFFIX_LENGTH = 8


def random_metric_name() -> str:
    """Generate ``METRIC_NAME_BASE`` plus 8 random alphanumerics."""
    suffix = "".join(random.choices(_NAME_ALPHABET, k=_NAME_SUFFIX_LENGTH))
    return METRIC_NAME_BASE + suffix


class CollectorConfig:
    """
    Settings for a single Prometheus collector.

    Fields are kept as strings in a PropertyStore so the host can persist
    them verbatim. Help and metric name fall back to defaults when empty,
    labels never keep empty entries, and buckets/quantiles are parsed from
    the shared ``quantile_or_bucket`` text on every read.
    """

    def __init__(self, store: Optional[PropertyStore] = None):
        """
        Initialize collector config.

        Args:
            store: Existing property store to read from. A missing metric
                name is generated and stored. When omitted, a new in-memory
                store is created and filled with defaults.
        """
        if store is not None:
            self._store = store
            if not store.get_string(NAME, ""):
                self.set_metric_name(None)
            return

        self._store = DictPropertyStore()
        self.set_help(DEFAULT_HELP_STRING)
        self.set_metric_name(None)
        self.set_kind(CollectorKind.COUNTER)
        self.set_labels([])
        self.set_quantile_or_bucket("")

    @property
    def store(self) -> PropertyStore:
        """Backing property store."""
        return self._store

    # Help
    @property
    def help(self) -> str:
        return self._store.get_string(HELP, DEFAULT_HELP_STRING) or DEFAULT_HELP_STRING

    def set_help(self, help_text: Optional[str]) -> None:
        """Set help text, empty restores the default."""
        self._store.set_string(HELP, help_text or DEFAULT_HELP_STRING)

    # Metric name
    @property
    def metric_name(self) -> str:
        name = self._store.get_string(NAME, "")
        return name or random_metric_name()

    def set_metric_name(self, name: Optional[str]) -> None:
        """Set the metric name, empty generates a unique one."""
        self._store.set_string(NAME, name or random_metric_name())

    # Kind
    @property
    def kind(self) -> CollectorKind:
        """
        Collector kind.

        Raises:
            ValueError: If the store holds an unknown kind name
        """
        return CollectorKind.parse(self._store.get_string(TYPE, CollectorKind.COUNTER.value))

    def set_kind(self, kind: Union[CollectorKind, str]) -> None:
        """
        Set the collector kind.

        Switching to HISTOGRAM or SUMMARY fills an empty quantile_or_bucket
        field with the matching default list.

        Raises:
            ValueError: If kind is not a known collector kind
        """
        kind = CollectorKind.parse(kind)
        self._store.set_string(TYPE, kind.value)

        if kind is CollectorKind.HISTOGRAM and not self.quantile_or_bucket:
            self.set_quantile_or_bucket(DEFAULT_BUCKET_SIZES_STRING)
        elif kind is CollectorKind.SUMMARY and not self.quantile_or_bucket:
            self.set_quantile_or_bucket(DEFAULT_QUANTILES_STRING)

    # Labels
    @property
    def labels(self) -> List[str]:
        return [label for label in self._store.get_string_list(LABELS) if label]

    def set_labels(self, labels: Union[str, Iterable[Optional[str]], None]) -> None:
        """Set label names from a list or a comma separated string."""
        if labels is None:
            labels = []
        elif isinstance(labels, str):
            labels = labels.split(",")
        self._store.set_string_list(LABELS, [label for label in labels if label])

    @property
    def labels_as_string(self) -> str:
        return ",".join(self.labels)

    # Quantiles / buckets
    @property
    def quantile_or_bucket(self) -> str:
        return self._store.get_string(QUANTILES_OR_BUCKETS, "")

    def set_quantile_or_bucket(self, value: Optional[str]) -> None:
        self._store.set_string(QUANTILES_OR_BUCKETS, value or "")

    def get_buckets(self) -> List[float]:
        """Histogram bucket boundaries parsed from quantile_or_bucket."""
        return parse_buckets(self.quantile_or_bucket, self.metric_name)

    def get_quantiles(self) -> List[QuantileDefinition]:
        """Summary quantile definitions parsed from quantile_or_bucket."""
        return parse_quantiles(self.quantile_or_bucket, self.metric_name)

    # Serialization
    def to_dict(self) -> Dict[str, Any]:
        """Plain dict of the stored properties."""
        return {
            HELP: self._store.get_string(HELP, DEFAULT_HELP_STRING),
            NAME: self._store.get_string(NAME, ""),
            TYPE: self._store.get_string(TYPE, CollectorKind.COUNTER.value),
            LABELS: self.labels,
            QUANTILES_OR_BUCKETS: self.quantile_or_bucket,
        }

    @classmethod
    def from_dict(cls, properties: Mapping[str, Any]) -> "CollectorConfig":
        """
        Build a config from stored properties.

        Missing help or name are filled in the same way the setters do, and
        labels are cleaned of empty entries. The kind is kept verbatim so an
        invalid value surfaces when the collector is built.
        """
        cfg = cls(DictPropertyStore.from_dict(properties))
        cfg.set_help(cfg._store.get_string(HELP, ""))
        cfg.set_metric_name(cfg._store.get_string(NAME, ""))
        cfg.set_labels(cfg._store.get_string_list(LABELS))
        if not cfg._store.has(TYPE):
            cfg._store.set_string(TYPE, CollectorKind.COUNTER.value)
        if not cfg._store.has(QUANTILES_OR_BUCKETS):
            cfg.set_quantile_or_bucket("")
        return cfg

    def __str__(self) -> str:
        parts = []
        for key in self._store.keys():
            if key == LABELS:
                value = self.labels_as_string
            else:
                value = self._store.get_string(key, "")
            parts.append(f"{key}: {value}, ")
        return "[" + "".join(parts) + "]"

    def __repr__(self) -> str:
        return f"CollectorConfig({self.to_dict()!r})"
