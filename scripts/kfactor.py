#!/usr/bin/env python3
"""Run the ledger CLI from a source checkout without installing it."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from cli import app

if __name__ == "__main__":
    app()
