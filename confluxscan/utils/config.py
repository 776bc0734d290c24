"""
config.py

This module contains configuration loaded from environment variables and the
immutable per-client settings derived from it.

`Config` mirrors the process environment (API target, logging, error tracking).
`ApiConfig` is the frozen value handed to a scanner; it is read-only after
construction and never shared through module state.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

MAINNET_HOST = "https://evmapi.confluxscan.io"
TESTNET_HOST = "https://evmapi-testnet.confluxscan.io"

DEFAULT_HOSTS = {
    "mainnet": MAINNET_HOST,
    "testnet": TESTNET_HOST,
}


class Config:
    """
    Configuration class that loads all settings from environment variables.

    Attributes:
        TARGET (str): The network to query ('mainnet' or 'testnet').
        API_KEY (str): Optional ConfluxScan API key.
        HOST (str): Optional host override for the scanner API.
        REQUEST_TIMEOUT (int): The timeout for HTTP requests in seconds.
        ENVIRONMENT (str): The application environment (e.g., 'development', 'production').
        LOG_LEVEL (str): The logging level for the application.
        LOG_FILE (str): Optional path of a log file; empty disables file logging.
        SENTRY_DSN (str): The DSN for Sentry error tracking.
        SENTRY_ENABLED (bool): A flag to enable or disable Sentry.
        SENTRY_ENVIRONMENT (str): The Sentry environment.
        SENTRY_TRACES_SAMPLE_RATE (float): The traces sample rate for Sentry.
    """

    def __init__(self):
        """
        Initializes the configuration from environment variables.
        """
        # Scanner API Configuration
        self.TARGET = os.getenv("CONFLUXSCAN_TARGET", "mainnet").lower()
        self.API_KEY = os.getenv("CONFLUXSCAN_API_KEY", "")
        self.HOST = os.getenv("CONFLUXSCAN_HOST", "")

        # Request Configuration
        self.REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "10"))

        # Environment Settings
        self.ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_FILE = os.getenv("LOG_FILE", "")

        # Sentry Configuration
        self.SENTRY_DSN = os.getenv("SENTRY_DSN", "")
        self.SENTRY_ENABLED = os.getenv("SENTRY_ENABLED", "false").lower() == "true"
        self.SENTRY_ENVIRONMENT = os.getenv("SENTRY_ENVIRONMENT", self.ENVIRONMENT)
        self.SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "1.0"))

    def validate(self) -> bool:
        """
        Validates the loaded configuration values.

        Returns:
            bool: True if the configuration is valid.

        Raises:
            ValueError: If a configuration value is missing or invalid.
        """
        errors = []

        if self.TARGET not in DEFAULT_HOSTS:
            errors.append("CONFLUXSCAN_TARGET must be 'mainnet' or 'testnet'")

        if self.REQUEST_TIMEOUT <= 0:
            errors.append("REQUEST_TIMEOUT must be positive")

        if self.SENTRY_ENABLED and not self.SENTRY_DSN:
            errors.append("SENTRY_DSN is required when SENTRY_ENABLED is true")

        if not 0.0 <= self.SENTRY_TRACES_SAMPLE_RATE <= 1.0:
            errors.append("SENTRY_TRACES_SAMPLE_RATE must be between 0 and 1")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        return True

    def to_dict(self) -> Dict[str, Any]:
        """
        Converts the configuration to a dictionary.

        Returns:
            Dict[str, Any]: A dictionary containing all configuration values.
        """
        return {
            key: value
            for key, value in self.__dict__.items()
            if not key.startswith("_")
        }


@dataclass(frozen=True)
class ApiConfig:
    """
    Connection settings for one scanner client.

    Attributes:
        target (str): 'mainnet' or 'testnet'.
        api_key (Optional[str]): Appended to every request as ``apiKey`` when set.
        host (Optional[str]): Overrides the target's default host.
        timeout (int): Seconds passed to every HTTP request.
    """

    target: str = "mainnet"
    api_key: Optional[str] = None
    host: Optional[str] = None
    timeout: int = 10

    def __post_init__(self):
        if self.target not in DEFAULT_HOSTS:
            raise ValueError(f"Unknown target network: {self.target}")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @property
    def base_url(self) -> str:
        """The host requests are sent to, without a trailing slash."""
        return (self.host or DEFAULT_HOSTS[self.target]).rstrip("/")

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "ApiConfig":
        """
        Builds client settings from the environment configuration.

        :param config: A loaded Config; the global instance is used when omitted.
        :return: A frozen ApiConfig.
        """
        config = config or get_config()
        return cls(
            target=config.TARGET,
            api_key=config.API_KEY or None,
            host=config.HOST or None,
            timeout=config.REQUEST_TIMEOUT,
        )


# Global configuration instance
_config = None


def get_config() -> Config:
    """
    Gets the global configuration instance.

    This function ensures that the configuration is loaded only once and returns
    the same instance on subsequent calls.

    Returns:
        Config: The global configuration object.
    """
    global _config
    if _config is None:
        _config = Config()
    return _config
