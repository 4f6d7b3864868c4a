# ABOUTME: pytest configuration for flyweight tests
# ABOUTME: Configures per-marker timeouts and quiets loguru output during test runs

import pytest
from loguru import logger

from flyweight.config.settings import get_settings


def pytest_configure(config):
    """Configure pytest for flyweight tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "contract: Contract tests with 60-second timeout")
    config.addinivalue_line("markers", "benchmark: Benchmark tests with 60-second timeout")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        # Respect an explicit timeout marker
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif any(item.get_closest_marker(mark) for mark in ["integration", "contract", "benchmark"]):
            item.add_marker(pytest.mark.timeout(60))


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Clear the settings cache so environment patches take effect per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} | {message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def output_lines():
    """Collect lines written by shared objects."""
    return []
