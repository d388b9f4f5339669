"""Pytest configuration and fixtures."""

import os
import sys
import pytest

# Add python directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../../python'))


def pytest_configure(config):
    """Configure pytest."""
    os.environ['LOADTEST_LOG_LEVEL'] = 'WARNING'


@pytest.fixture
def registry():
    """Fresh registry so tests never touch the global one."""
    from prometheus_client import CollectorRegistry
    return CollectorRegistry()


@pytest.fixture
def definitions_file(tmp_path):
    """Write a definitions document to a temp file and return its path."""
    import json

    def _write(document):
        path = tmp_path / "collectors.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
