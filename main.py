#!/usr/bin/env python3
"""
dc-sequence - Development CLI wrapper.

Convenience script for running the CLI without installing the package.
For production use, install the package and use: dc-sequence

Usage:
    python main.py
    python main.py --action export
"""

import sys

from dc_sequence.cli import main

if __name__ == "__main__":
    sys.exit(main())
