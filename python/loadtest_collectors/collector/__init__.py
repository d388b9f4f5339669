"""Collector configuration and construction."""
from .kinds import CollectorKind
from .quantiles import (
    DEFAULT_QUANTILES,
    DEFAULT_QUANTILES_STRING,
    QuantileDefinition,
    quantiles_to_string,
)
from .parsing import DEFAULT_BUCKET_SIZES, DEFAULT_BUCKET_SIZES_STRING, parse_buckets, parse_quantiles
from .config import CollectorConfig, DEFAULT_HELP_STRING, METRIC_NAME_BASE, random_metric_name
from .factory import from_kind, new_counter, new_gauge, new_histogram, new_summary
from .definitions import DefinitionsError, load_definitions, save_definitions

__all__ = [
    "CollectorKind",
    "QuantileDefinition",
    "DEFAULT_QUANTILES",
    "DEFAULT_QUANTILES_STRING",
    "quantiles_to_string",
    "DEFAULT_BUCKET_SIZES",
    "DEFAULT_BUCKET_SIZES_STRING",
    "parse_buckets",
    "parse_quantiles",
    "CollectorConfig",
    "DEFAULT_HELP_STRING",
    "METRIC_NAME_BASE",
    "random_metric_name",
    "from_kind",
    "new_counter",
    "new_gauge",
    "new_histogram",
    "new_summary",
    "DefinitionsError",
    "load_definitions",
    "save_definitions",
]
