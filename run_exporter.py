#!/usr/bin/env python3
"""
Loadtest Collectors Runner.

Convenience script to run the exporter from a source checkout.

Usage:
    python run_exporter.py --definitions collectors.json

Or run as module:
    python -m loadtest_collectors
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'python'))

if __name__ == "__main__":
    from loadtest_collectors.__main__ import main
    sys.exit(main())
