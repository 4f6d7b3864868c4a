# ABOUTME: Contract test configuration and fixtures
# ABOUTME: Provides writer fixtures shared by all contract tests

import pytest


@pytest.fixture
def sink():
    """Collect lines written by shared objects under contract."""
    lines = []
    yield lines
    lines.clear()
