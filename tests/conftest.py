"""Global test configuration for the GHL MCP server."""

import os

import pytest


@pytest.fixture(autouse=True, scope="session")
def _set_test_env_vars():
    """Set dummy GHL credentials for Settings.

    Only sets values that aren't already present, so real env vars take
    precedence.
    """
    defaults = {
        "GHL_API_KEY": "test-ghl-key",
        "GHL_LOCATION_ID": "loc_test",
    }
    originals = {}
    for key, value in defaults.items():
        if key not in os.environ:
            os.environ[key] = value
            originals[key] = None
        else:
            originals[key] = os.environ[key]

    # Clear the lru_cache on get_settings so it picks up the new env vars
    from ghl_mcp.config import get_settings
    get_settings.cache_clear()

    yield

    for key, original in originals.items():
        if original is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original
    get_settings.cache_clear()
