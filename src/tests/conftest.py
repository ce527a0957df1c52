"""Shared pytest fixtures for svg-less tests."""

import sys
from pathlib import Path

import pytest
from loguru import logger

# Add src/ to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

FIXTURES_DIR = Path(__file__).parent / "data" / "fixtures"


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(message.record), level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR
