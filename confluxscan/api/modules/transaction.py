"""
transaction.py

Execution and receipt status checks under ``/api?module=transaction``.
"""

from confluxscan.api.base import ApiModule
from confluxscan.utils.validation import require_present


class TransactionModule(ApiModule):

    def get_status(self, txhash: str):
        """
        Fetches the execution status of a transaction.

        :param txhash: The transaction hash.
        :return: A record with ``isError`` and ``errDescription``.
        :raises ValidationError: If no hash is given.
        """
        require_present(txhash, "Transaction hash is required for checking status")
        return self._get("/api", {"module": "transaction", "action": "getstatus", "txhash": txhash})

    def get_receipt_status(self, txhash: str):
        """
        Fetches the receipt status of a transaction.

        :param txhash: The transaction hash.
        :return: A record with ``status``.
        :raises ValidationError: If no hash is given.
        """
        require_present(txhash, "Transaction hash is required for checking receipt status")
        return self._get("/api", {"module": "transaction", "action": "gettxreceiptstatus",
                                  "txhash": txhash})
