"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Path to a configuration file that does not exist yet."""

    return tmp_path / "config.yaml"
