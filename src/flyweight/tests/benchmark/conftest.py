# ABOUTME: Benchmark test configuration for the shared-object registry
# ABOUTME: Provides pytest-benchmark setup and fixtures for performance testing

import pytest


def pytest_collection_modifyitems(config, items):
    """Add benchmark marker to all tests in benchmark directory."""
    for item in items:
        if "benchmark" in str(item.fspath):
            item.add_marker(pytest.mark.benchmark)


@pytest.fixture
def silent_writer():
    """Writer that discards operation output."""
    return lambda line: None
