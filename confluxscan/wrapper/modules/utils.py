"""
utils.py

Dual-mode method decoding.
"""

from confluxscan.formatters.responses import PASSTHROUGH
from confluxscan.wrapper.base import BaseWrapper


class UtilsWrapper(BaseWrapper):

    def decode_method(self, *args, return_raw=False, **kwargs):
        """Formatted ``UtilsModule.decode_method``."""
        return self._present(self.raw.decode_method(*args, **kwargs), PASSTHROUGH, return_raw)

    def decode_method_raw(self, *args, return_raw=False, **kwargs):
        """Formatted ``UtilsModule.decode_method_raw``."""
        return self._present(self.raw.decode_method_raw(*args, **kwargs), PASSTHROUGH, return_raw)
