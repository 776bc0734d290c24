"""
Wrapper Module

Dual-mode client: formatted results by default, raw results on request.
"""

from confluxscan.wrapper.base import BaseWrapper
from confluxscan.wrapper.scanner import ESpaceScannerWrapper

__all__ = [
    'BaseWrapper',
    'ESpaceScannerWrapper',
]
