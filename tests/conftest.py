"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from test_fixtures import InMemoryDocumentStore, make_client  # noqa: E402


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def client(store):
    """Client for an app without language model or food database configured"""
    return make_client(store=store)
