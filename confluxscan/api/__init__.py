"""
API Module

This module provides the transport for the ConfluxScan eSpace API and the
raw scanner built on it.
"""

from confluxscan.api.base import ESpaceApi, build_query
from confluxscan.api.scanner import ESpaceScanner

__all__ = [
    'ESpaceApi',
    'ESpaceScanner',
    'build_query',
]
