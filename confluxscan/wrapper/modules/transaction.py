"""
transaction.py

Dual-mode transaction status checks. Status records carry nothing to format.
"""

from confluxscan.formatters.responses import PASSTHROUGH
from confluxscan.wrapper.base import BaseWrapper


class TransactionWrapper(BaseWrapper):

    def get_status(self, *args, return_raw=False, **kwargs):
        """Formatted ``TransactionModule.get_status``."""
        return self._present(self.raw.get_status(*args, **kwargs), PASSTHROUGH, return_raw)

    def get_receipt_status(self, *args, return_raw=False, **kwargs):
        """Formatted ``TransactionModule.get_receipt_status``."""
        return self._present(self.raw.get_receipt_status(*args, **kwargs), PASSTHROUGH, return_raw)
