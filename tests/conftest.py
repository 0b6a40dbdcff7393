# Ensure the project root is on sys.path so tests can "import showcase"
# without installing the package first.
import random
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import showcase  # noqa: E402


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    """Strip ANSI styling so assertions see bare text."""
    monkeypatch.setattr(showcase, "_SUPPORTS_COLOR", False)


@pytest.fixture
def rng():
    return random.Random(1234)
