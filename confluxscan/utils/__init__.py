"""
Utilities Module

This module provides configuration management, logging, Sentry integration,
and parameter validation helpers.
"""

from confluxscan.utils.config import ApiConfig, Config, get_config
from confluxscan.utils.logger import get_logger
from confluxscan.utils.sentry import (
    init_sentry,
    capture_exception,
    capture_message,
    add_breadcrumb,
    close_sentry
)
from confluxscan.utils.validation import (
    AddressValidator,
    is_valid_address,
    is_valid_address_list,
)

__all__ = [
    'ApiConfig',
    'Config',
    'get_config',
    'get_logger',
    'init_sentry',
    'capture_exception',
    'capture_message',
    'add_breadcrumb',
    'close_sentry',
    'AddressValidator',
    'is_valid_address',
    'is_valid_address_list',
]
