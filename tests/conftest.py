"""
Pytest Configuration and Shared Fixtures
========================================

Common fixtures used across all test modules.

For Developers:
    - Import fixtures by name in test files (pytest auto-discovers conftest.py)
    - Property tests live under tests/property and are marked `property`
      automatically (deselect with `pytest -m "not property"`)
    - Assert on expected logs explicitly with caplog and the helpers below
"""

import logging
import os
from pathlib import Path

import pytest

# =============================================================================
# Pytest Marker Registration
# =============================================================================


def pytest_configure(config):
    """Register custom markers to avoid warnings."""
    config.addinivalue_line(
        "markers",
        "property: hypothesis property tests (deselect with '-m \"not property\"')",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests under tests/property with the `property` marker."""
    property_marker = pytest.mark.property

    for item in items:
        test_file = Path(item.path)
        if "property" in test_file.parts:
            item.add_marker(property_marker)


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables after each test.

    EnvironPathInfoSource reads os.environ by default, so tests that set
    PATH_INFO must not leak it into other tests.
    """
    original_env = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def cgi_environ():
    """
    CGI environment for GET /cgi-bin/app.py/yesterday-monday/tomorrow-wednesday.
    """
    return {
        "REQUEST_METHOD": "GET",
        "SCRIPT_NAME": "/cgi-bin/app.py",
        "PATH_INFO": "/yesterday-monday/tomorrow-wednesday",
        "QUERY_STRING": "",
    }


@pytest.fixture
def api_gateway_event():
    """
    API Gateway Proxy Integration event for a /params/{proxy+} resource.
    """
    return {
        "resource": "/params/{proxy+}",
        "path": "/params/ticker-BRK%2EB/range-1W",
        "httpMethod": "GET",
        "headers": {"accept": "application/json"},
        "queryStringParameters": None,
        "pathParameters": {"proxy": "ticker-BRK%2EB/range-1W"},
        "requestContext": {"requestId": "test-request-id"},
    }


# =============================================================================
# Log Validation Helpers
# =============================================================================


def assert_warning_logged(caplog, pattern: str):
    """
    Helper to assert a WARNING log was captured.

    Args:
        caplog: pytest caplog fixture
        pattern: String pattern to search for in log messages

    Raises:
        AssertionError: If no WARNING log matches the pattern
    """
    assert any(
        pattern in record.message
        for record in caplog.records
        if record.levelno == logging.WARNING
    ), f"Expected WARNING log matching '{pattern}' not found"
