"""Pytest configuration.

Puts the project root on sys.path so the flat-layout packages import, and
selects a non-interactive matplotlib backend for the plotting tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))
