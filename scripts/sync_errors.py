#!/usr/bin/env python3
"""Sync errors.json from the EZ repo's ERRORS.md, straight from a source checkout.

Fetches ERRORS.md (or reads a local checkout), parses its tables, merges
src/data/error-enrichments.json and writes src/data/errors.json.

Usage:
    python scripts/sync_errors.py                  # Fetch from GitHub
    python scripts/sync_errors.py --local ../EZ    # Read from a local checkout
    python scripts/sync_errors.py --check          # CI: exit 1 if errors.json is stale

Environment variables:
    ERRSYNC_SOURCE_URL  Upstream ERRORS.md URL override
    ERRSYNC_DATA_DIR    Data directory override (default: src/data)
"""

from __future__ import annotations

import sys
from pathlib import Path

# Run from a checkout without `pip install -e .`: import the package from ../src.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from errsync.cli import main  # noqa: E402

if __name__ == "__main__":
    main()
