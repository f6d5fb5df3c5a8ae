"""
conftest.py  –  Root-level pytest configuration for modelpack.
Makes the engine/backend/shared_schemas packages importable from a checkout.
"""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure repo root is importable even when invoked from elsewhere
_ROOT = Path(__file__).resolve().parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))
