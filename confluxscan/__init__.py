"""
confluxscan

Client for the ConfluxScan eSpace API with optional human-readable formatting
of amounts and timestamps.
"""

__version__ = "0.1.0"

from confluxscan.errors import (
    APIError,
    NotFoundError,
    ScanError,
    TransportError,
    ValidationError,
)
from confluxscan.utils.config import ApiConfig
from confluxscan.api import ESpaceApi, ESpaceScanner
from confluxscan.wrapper import ESpaceScannerWrapper

__all__ = [
    'APIError',
    'ApiConfig',
    'ESpaceApi',
    'ESpaceScanner',
    'ESpaceScannerWrapper',
    'NotFoundError',
    'ScanError',
    'TransportError',
    'ValidationError',
    '__version__',
]
