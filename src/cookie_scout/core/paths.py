"""Packaged data directory resolution."""

from __future__ import annotations

from pathlib import Path

# src/cookie_scout/core/paths.py → src/cookie_scout/_shared/
SHARED_DIR = Path(__file__).resolve().parent.parent / "_shared"
