#!/usr/bin/env python3
"""
Main CLI for fontpack
=====================

Run from a checkout without installing:

    python main.py generate --src dejavu-fonts-ttf-2.37.zip --output-dir fonts
"""

import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

try:
    from fontpack.cli import cli
except ImportError as e:
    logging.basicConfig(level=logging.INFO)
    logger.exception(f"Import failed: {e}")
    logger.exception("Make sure you have all dependencies installed: pip install -e .")
    sys.exit(1)


if __name__ == "__main__":
    cli()
