"""
Pytest configuration and fixtures for lexshift tests.

Specialized fixtures are organized in the fixtures/ directory:
- fixtures.inflection: Engine and YAML config fixtures
- fixtures.inflection_cases: Word tables shared by the inflection tests
"""

import logging

import pytest

# Load fixture modules
pytest_plugins = [
    "tests.fixtures.inflection",
]


@pytest.fixture
def heredoc():
    """Indented multi-line text with a blank line."""
    return "      foo\n        bar\n\n      baz\n"


@pytest.fixture(autouse=True)
def reset_lexshift_logger():
    """Drop handlers that setup_logging() attached during a test."""
    logger = logging.getLogger("lexshift")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
