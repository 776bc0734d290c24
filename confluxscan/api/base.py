"""
base.py

This module sends requests to the ConfluxScan eSpace API and unwraps its
``{status, message, result}`` envelope.

Each call issues exactly one GET request. Failures are logged, reported to
Sentry when it is enabled, and raised to the caller; nothing is retried.
"""

from typing import Any, Dict, Mapping, Optional

import requests

from confluxscan.errors import APIError, TransportError
from confluxscan.utils.config import ApiConfig
from confluxscan.utils.logger import get_logger
from confluxscan.utils.sentry import add_breadcrumb, capture_exception, capture_message

logger = get_logger(__name__)


def build_query(params: Optional[Mapping[str, Any]], api_key: Optional[str] = None) -> Dict[str, str]:
    """
    Converts request parameters to query-string values.

    None values are dropped, booleans become 'true'/'false', and the API key is
    appended as ``apiKey`` when set.

    :param params: Request parameters.
    :param api_key: Optional API key.
    :return: The query parameters as strings.
    """
    query = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[key] = "true" if value else "false"
        else:
            query[key] = str(value)
    if api_key:
        query["apiKey"] = api_key
    return query


class ESpaceApi:
    """
    ESpaceApi handles communication with one ConfluxScan eSpace host.
    """

    def __init__(self, config: Optional[ApiConfig] = None):
        """
        Initializes the transport.

        :param config: Connection settings; loaded from the environment when omitted.
        """
        self.config = config if config is not None else ApiConfig.from_config()
        self.base_url = self.config.base_url
        logger.debug(f"ESpaceApi initialized for {self.config.target} at {self.base_url}")

    def fetch(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Performs a GET request and returns the successful envelope.

        :param endpoint: Path on the host, e.g. '/api' or '/statistics/tps'.
        :param params: Query parameters; None values are omitted.
        :return: The decoded envelope with status "1".
        :raises TransportError: If the HTTP status is not 2xx.
        :raises APIError: If the body is not JSON, not an envelope, or its status is not "1".
        """
        url = f"{self.base_url}{endpoint}"
        query = build_query(params, self.config.api_key)
        # Never log the key
        logged = {key: value for key, value in query.items() if key != "apiKey"}

        logger.debug(f"Requesting {endpoint} with params {logged}")
        add_breadcrumb(f"GET {endpoint}", category="http", data=logged)

        try:
            response = requests.get(url, params=query, timeout=self.config.timeout)
        except requests.RequestException as e:
            logger.error(f"Request to {endpoint} failed: {e}")
            capture_exception(e, {"request": {"endpoint": endpoint, "params": logged}})
            raise

        if not response.ok:
            error = TransportError(response.status_code, getattr(response, "reason", None))
            logger.error(f"API request to {endpoint} failed with status {response.status_code}")
            capture_exception(error, {"request": {"endpoint": endpoint, "params": logged}})
            raise error

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Response from {endpoint} is not valid JSON: {e}")
            capture_exception(e, {"request": {"endpoint": endpoint, "params": logged}})
            raise APIError("Invalid response format from API") from e

        if not isinstance(data, dict):
            logger.error(f"Invalid response format from {endpoint}: {type(data).__name__}")
            raise APIError("Invalid response format from API")

        if str(data.get("status")) != "1":
            message = data.get("message") or "Unknown error"
            logger.error(f"API returned error for {endpoint}: {message}")
            capture_message(f"API error on {endpoint}: {message}", level="error",
                            context={"request": {"endpoint": endpoint, "params": logged}})
            raise APIError(message, status=data.get("status"), result=data.get("result"))

        logger.debug(f"API request to {endpoint} successful")
        return data

    def fetch_result(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Performs a request and returns only the envelope's ``result``."""
        return self.fetch(endpoint, params).get("result")


class ApiModule:
    """
    Base for the per-domain request builders; all share one transport.
    """

    def __init__(self, api: ESpaceApi):
        self.api = api

    def _get(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.api.fetch_result(endpoint, params)
