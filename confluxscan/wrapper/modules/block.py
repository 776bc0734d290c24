"""
block.py

Dual-mode block lookups. Block numbers are returned as sent in both modes.
"""

from confluxscan.formatters.responses import PASSTHROUGH
from confluxscan.wrapper.base import BaseWrapper


class BlockWrapper(BaseWrapper):

    def get_block_number_by_time(self, *args, return_raw=False, **kwargs):
        """Formatted ``BlockModule.get_block_number_by_time``."""
        return self._present(self.raw.get_block_number_by_time(*args, **kwargs), PASSTHROUGH, return_raw)
