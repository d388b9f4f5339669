"""
Loadtest Collectors - Prometheus collectors from load-test configuration text.

Turns the string settings of a load-testing tool's metric element into
prometheus_client collectors:
- help text and metric name with generated defaults
- counter, gauge, histogram and summary kinds
- bucket lists (``100,500,1000,3000``) and quantile lists (``0.75,0.5|0.95,0.1``)

Usage:
    python -m loadtest_collectors --definitions collectors.json

Environment Variables:
    LOADTEST_DEFINITIONS_PATH - JSON collector definitions file
    LOADTEST_EXPORTER_PORT - Prometheus HTTP port (default: 9270)
    LOADTEST_LOG_LEVEL - Log level (DEBUG, INFO, WARNING, ERROR)
"""

__version__ = "1.0.0"

from .collector import CollectorConfig, CollectorKind, QuantileDefinition, from_kind
from .config import ExporterConfig, get_config
from .metrics import CollectorExporter

__all__ = [
    "CollectorConfig",
    "CollectorKind",
    "QuantileDefinition",
    "from_kind",
    "ExporterConfig",
    "get_config",
    "CollectorExporter",
]
