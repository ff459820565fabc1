"""
Pytest Configuration
====================

Shared fixtures for the mindplot test suite.
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent.absolute()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from mindplot.engine import Engine  # noqa: E402
from mindplot.mindmap import MindMap  # noqa: E402
from mindplot.models import GraphModel  # noqa: E402


@pytest.fixture
def engine():
    return Engine()


@pytest.fixture
def graph(engine):
    return GraphModel(engine)


@pytest.fixture
def mind_map():
    return MindMap()
