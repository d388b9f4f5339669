"""
Prometheus exporter for configured collectors.

Builds collectors from CollectorConfig definitions into a private registry
and serves that registry over HTTP for scraping.
"""

import logging
from typing import Dict, Iterable, List, Optional

from prometheus_client import CollectorRegistry, generate_latest, start_http_server
from prometheus_client.metrics import MetricWrapperBase

from ..collector.config import CollectorConfig
from ..collector.factory import from_kind
from ..config.settings import get_config

logger = logging.getLogger("loadtest.exporter")


class CollectorExporter:
    """
    Registry of configured collectors plus the HTTP endpoint serving them.

    Configs that fail to build are logged and skipped, so one bad
    definition never stops the rest from being exported.
    """

    def __init__(
        self,
        port: int = 9270,
        host: str = "0.0.0.0",
        registry: Optional[CollectorRegistry] = None,
    ):
        """
        Initialize exporter.

        Args:
            port: Port for Prometheus HTTP server
            host: Host to bind to
            registry: Registry to populate (a fresh one if omitted)
        """
        self.port = port
        self.host = host
        self.registry = registry if registry is not None else CollectorRegistry()
        self._collectors: Dict[str, MetricWrapperBase] = {}
        self._started = False

    def register(self, cfg: CollectorConfig) -> Optional[MetricWrapperBase]:
        """
        Build and register the collector for a config.

        Returns:
            The collector, or None if it could not be built
        """
        name = cfg.metric_name
        collector = from_kind(cfg, self.registry)
        if collector is None:
            logger.warning(f"Skipping collector {name}")
            return None

        self._collectors[name] = collector
        logger.info(f"Registered {cfg.kind.value.lower()} collector {name}")
        return collector

    def register_all(self, configs: Iterable[CollectorConfig]) -> int:
        """
        Register every config, skipping failures.

        Returns:
            Number of collectors registered
        """
        registered = 0
        for cfg in configs:
            if self.register(cfg) is not None:
                registered += 1
        return registered

    def unregister(self, name: str) -> bool:
        """Remove a collector by metric name."""
        collector = self._collectors.pop(name, None)
        if collector is None:
            return False
        self.registry.unregister(collector)
        logger.info(f"Unregistered collector {name}")
        return True

    def get(self, name: str) -> Optional[MetricWrapperBase]:
        """Look up a registered collector by metric name."""
        return self._collectors.get(name)

    @property
    def names(self) -> List[str]:
        """Metric names in registration order."""
        return list(self._collectors.keys())

    def __len__(self) -> int:
        return len(self._collectors)

    def render(self) -> str:
        """Current text exposition of the registry."""
        return generate_latest(self.registry).decode("utf-8")

    def start(self) -> bool:
        """
        Start the Prometheus HTTP server.

        Returns:
            True if started (or already running), False on failure
        """
        if self._started:
            return True

        try:
            start_http_server(self.port, addr=self.host, registry=self.registry)
        except OSError as e:
            logger.error(f"Failed to start metrics server on {self.host}:{self.port}: {e}")
            return False

        self._started = True
        logger.info(f"Prometheus metrics server started on {self.host}:{self.port}")
        return True

    @property
    def is_started(self) -> bool:
        return self._started


_exporter: Optional[CollectorExporter] = None


def get_exporter() -> CollectorExporter:
    """Get or create the global exporter."""
    global _exporter
    if _exporter is None:
        config = get_config()
        _exporter = CollectorExporter(port=config.port, host=config.host)
    return _exporter


def reset_exporter() -> None:
    """Drop the global exporter (useful for testing)."""
    global _exporter
    _exporter = None
