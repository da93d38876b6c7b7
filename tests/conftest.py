"""Shared test fixtures and configuration."""

import os
import sys
from pathlib import Path

# Add proto_lint/ to Python path so `from protolint.xxx` imports work
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "proto_lint"))

import pytest

os.environ["PROTOLINT_DEV_MODE"] = "true"
os.environ.setdefault("PROTOLINT_OPTIONS_PATH", "/nonexistent/options.json")


@pytest.fixture
def well_formed_proto() -> str:
    from protolint.examples import EXAMPLE_PROTO

    return EXAMPLE_PROTO
