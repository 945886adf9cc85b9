"""
Basic test fixtures for the skirmish test suite.

Provides the default hero-versus-goblin battle and engine factories.
"""

import sys
import os
import pytest

# Add the project root and src/ to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)
sys.path.insert(0, os.path.join(project_root, "src"))

from skirmish.core.engine import BattleEngine, ScriptedRandom
from skirmish.game.log_manager import LogManager, LogLevel
from tests.test_utils import BattleStateBuilder


@pytest.fixture
def builder():
    """Builder preloaded with the default hero and goblin."""
    return BattleStateBuilder()


@pytest.fixture
def default_state():
    """Hero (active, at (1, 1)) adjacent to a goblin at (1, 2) on a 10x10 grid."""
    return BattleStateBuilder().build()


@pytest.fixture
def engine_with():
    """Factory for engines fed a scripted sequence of random values."""
    def _make(*values: int) -> BattleEngine:
        return BattleEngine(ScriptedRandom(*values))
    return _make


@pytest.fixture
def log_manager():
    """Log manager that keeps debug output."""
    return LogManager(max_messages=100, default_level=LogLevel.DEBUG)


@pytest.fixture
def project_config_path():
    """Path of the engine config shipped with the repository."""
    return os.path.join(project_root, "assets", "config", "engine.yaml")
