"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from checkie.core.engine import GameEngine
from checkie.core.notation import engine_from_notation

# Black man on d5, White man on e6, f7 empty; Black to move.
CAPTURE_NOTATION = "8/8/4w3/3b4/8/8/8/8 b 0"


@pytest.fixture
def engine() -> GameEngine:
    """Fresh engine in the standard starting position."""
    return GameEngine()


@pytest.fixture
def capture_engine() -> GameEngine:
    """Engine where Black can jump d5 over e6 onto f7."""
    return engine_from_notation(CAPTURE_NOTATION)
