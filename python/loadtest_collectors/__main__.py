"""
Loadtest collectors entry point.

Usage:
    python -m loadtest_collectors [--definitions PATH] [--port N] [--host H] [--check]

Environment Variables:
    LOADTEST_DEFINITIONS_PATH - JSON collector definitions file
    LOADTEST_EXPORTER_PORT - Prometheus HTTP port (default: 9270)
    LOADTEST_EXPORTER_HOST - Host to bind to (default: 0.0.0.0)
    LOADTEST_LOG_LEVEL - Log level (DEBUG, INFO, WARNING, ERROR)
"""

import argparse
import signal
import sys
import threading
from typing import List, Optional

from prometheus_client import CollectorRegistry

from .collector import DefinitionsError, from_kind, load_definitions
from .config import get_config, setup_logging
from .metrics import CollectorExporter


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    config = get_config()
    parser = argparse.ArgumentParser(
        prog="loadtest_collectors",
        description="Export Prometheus collectors defined in a JSON definitions file",
    )
    parser.add_argument("--definitions", default=config.definitions_path,
                        help="Collector definitions file (default: $LOADTEST_DEFINITIONS_PATH)")
    parser.add_argument("--port", type=int, default=config.port, help="HTTP port")
    parser.add_argument("--host", default=config.host, help="Host to bind to")
    parser.add_argument("--check", action="store_true",
                        help="Only build each collector and report the result")
    return parser.parse_args(argv)


def check(configs) -> int:
    """Build every config into a throwaway registry and print the outcome."""
    registry = CollectorRegistry()
    failed = 0
    for cfg in configs:
        ok = from_kind(cfg, registry) is not None
        if not ok:
            failed += 1
        print(f"{'OK  ' if ok else 'FAIL'} {cfg}")
    return 1 if failed else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    try:
        config = get_config()
    except ValueError as e:
        setup_logging().error(f"Invalid exporter configuration: {e}")
        return 1

    logger = setup_logging(level=config.log_level)
    args = parse_args(argv)

    if not args.definitions:
        logger.error("No collector definitions configured.")
        logger.error("Pass --definitions or set LOADTEST_DEFINITIONS_PATH.")
        return 1

    try:
        configs = load_definitions(args.definitions)
    except (OSError, DefinitionsError) as e:
        logger.error(f"Cannot load collector definitions: {e}")
        return 1

    if args.check:
        return check(configs)

    exporter = CollectorExporter(port=args.port, host=args.host)
    registered = exporter.register_all(configs)
    logger.info(f"Registered {registered}/{len(configs)} collectors")

    if not exporter.start():
        return 1

    shutdown_event = threading.Event()

    def signal_handler(signum, frame):
        logger.info("Shutdown requested...")
        shutdown_event.set()

    for sig in (signal.SIGINT, signal.SIGTERM):
        signal.signal(sig, signal_handler)

    shutdown_event.wait()
    return 0


if __name__ == "__main__":
    sys.exit(main())
