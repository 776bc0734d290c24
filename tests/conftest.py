"""
conftest.py

Shared fixtures: a patched requests.get and helpers to script API responses.
"""

import pytest
from unittest.mock import patch

from confluxscan.utils.config import ApiConfig


@pytest.fixture
def api_config():
    """Mainnet settings with an API key"""
    return ApiConfig(target="mainnet", api_key="test-key", timeout=5)


@pytest.fixture
def mock_get():
    """Patch the transport's requests.get for the duration of a test"""
    with patch('confluxscan.api.base.requests.get') as mock_get:
        mock_get.return_value.ok = True
        mock_get.return_value.status_code = 200
        yield mock_get


@pytest.fixture
def respond(mock_get):
    """Script the next envelope returned by the patched transport"""

    def _respond(result, status="1", message="OK"):
        mock_get.return_value.json.return_value = {
            "status": status,
            "message": message,
            "result": result,
        }
        return mock_get

    return _respond


@pytest.fixture
def sent_params(mock_get):
    """Return the query parameters of the last request"""

    def _sent_params():
        return mock_get.call_args[1]['params']

    return _sent_params


@pytest.fixture(autouse=True)
def reset_sentry_state():
    """Keep Sentry uninitialized between tests"""
    import confluxscan.utils.sentry as sentry_module
    sentry_module._sentry_initialized = False
    yield
    sentry_module._sentry_initialized = False


@pytest.fixture
def wrapper(api_config):
    """Dual-mode scanner; its raw counterpart is ``wrapper.scanner``"""
    from confluxscan.wrapper import ESpaceScannerWrapper
    return ESpaceScannerWrapper(api_config)
