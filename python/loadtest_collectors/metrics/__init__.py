"""Metrics export module."""
from .exporter import CollectorExporter, get_exporter, reset_exporter

__all__ = ["CollectorExporter", "get_exporter", "reset_exporter"]
