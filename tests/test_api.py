"""
test_api.py

Tests for the transport: query building, envelope handling and error mapping.
"""

import dataclasses

import pytest
import requests
from unittest.mock import patch

from confluxscan.api.base import ESpaceApi, build_query
from confluxscan.errors import APIError, TransportError
from confluxscan.utils.config import ApiConfig, MAINNET_HOST, TESTNET_HOST


@pytest.fixture
def api(api_config):
    return ESpaceApi(api_config)


class TestBuildQuery:
    """Tests for build_query()"""

    def test_drops_none_and_stringifies(self):
        query = build_query({"module": "account", "page": 1, "sort": None, "withBrief": True})
        assert query == {"module": "account", "page": "1", "withBrief": "true"}

    def test_appends_api_key(self):
        assert build_query({}, "secret") == {"apiKey": "secret"}

    def test_without_api_key(self):
        assert build_query({"a": False}) == {"a": "false"}


class TestESpaceApiInit:
    """Tests for host selection"""

    def test_mainnet_default(self):
        assert ESpaceApi(ApiConfig()).base_url == MAINNET_HOST

    def test_testnet(self):
        assert ESpaceApi(ApiConfig(target="testnet")).base_url == TESTNET_HOST

    def test_host_override(self):
        api = ESpaceApi(ApiConfig(host="https://scan.example.org/"))
        assert api.base_url == "https://scan.example.org"

    def test_unknown_target(self):
        with pytest.raises(ValueError):
            ApiConfig(target="devnet")

    def test_config_is_frozen(self):
        config = ApiConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.api_key = "changed"


class TestFetch:
    """Tests for ESpaceApi.fetch()"""

    def test_successful_request(self, api, respond):
        mock_get = respond("123")

        data = api.fetch("/api", {"module": "account", "action": "balance", "tag": None})

        assert data["result"] == "123"
        mock_get.assert_called_once_with(
            f"{MAINNET_HOST}/api",
            params={"module": "account", "action": "balance", "apiKey": "test-key"},
            timeout=5,
        )

    def test_numeric_status_is_success(self, api, mock_get):
        mock_get.return_value.json.return_value = {"status": 1, "message": "OK", "result": []}
        assert api.fetch_result("/statistics/tps") == []

    def test_http_error(self, api, mock_get):
        mock_get.return_value.ok = False
        mock_get.return_value.status_code = 503

        with pytest.raises(TransportError, match="HTTP error! status: 503") as exc_info:
            api.fetch("/api")

        assert exc_info.value.status_code == 503
        mock_get.return_value.json.assert_not_called()

    def test_application_error(self, api, respond):
        respond("Error! Invalid address format", status="0", message="NOTOK")

        with pytest.raises(APIError, match="NOTOK") as exc_info:
            api.fetch("/api")

        assert exc_info.value.status == "0"
        assert exc_info.value.result == "Error! Invalid address format"

    def test_missing_message(self, api, mock_get):
        mock_get.return_value.json.return_value = {"status": "0"}
        with pytest.raises(APIError, match="Unknown error"):
            api.fetch("/api")

    def test_non_object_body(self, api, mock_get):
        mock_get.return_value.json.return_value = ["unexpected"]
        with pytest.raises(APIError, match="Invalid response format from API"):
            api.fetch("/api")

    @patch('confluxscan.api.base.capture_exception')
    def test_non_json_body_reported(self, mock_capture, api, mock_get):
        decode_error = requests.JSONDecodeError("Expecting value", "<html>", 0)
        mock_get.return_value.json.side_effect = decode_error
        with pytest.raises(APIError, match="Invalid response format from API") as exc_info:
            api.fetch("/api", {"module": "account"})
        assert exc_info.value.__cause__ is decode_error
        mock_capture.assert_called_once()
        assert mock_capture.call_args[0][0] is decode_error

    def test_network_errors_propagate(self, api, mock_get):
        mock_get.side_effect = requests.Timeout("timed out")
        with pytest.raises(requests.Timeout):
            api.fetch("/api")
        assert mock_get.call_count == 1

    @patch('confluxscan.api.base.capture_message')
    def test_application_error_reported(self, mock_capture, api, respond):
        respond(None, status="0", message="Rate limit")
        with pytest.raises(APIError):
            api.fetch("/api", {"module": "account"})
        mock_capture.assert_called_once()
        assert mock_capture.call_args[1]['level'] == "error"

    @patch('confluxscan.api.base.capture_exception')
    def test_http_error_reported_without_api_key(self, mock_capture, api, mock_get):
        mock_get.return_value.ok = False
        mock_get.return_value.status_code = 500
        with pytest.raises(TransportError):
            api.fetch("/api", {"module": "account"})
        context = mock_capture.call_args[0][1]
        assert context["request"]["params"] == {"module": "account"}
