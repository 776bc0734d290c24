"""
account.py

Dual-mode account queries: balances in CFX, gas in Gdrip, timestamps in UTC.
"""

from confluxscan.formatters.responses import (
    GAS,
    NATIVE,
    TIMESTAMP,
    FieldMap,
    scalar,
    token_amount,
)
from confluxscan.wrapper.base import BaseWrapper

GAS_FIELDS = {
    "gas": GAS,
    "gasPrice": GAS,
    "gasUsed": GAS,
    "cumulativeGasUsed": GAS,
}

BALANCE = scalar(NATIVE)

BALANCE_MULTI = FieldMap(fields={"balance": NATIVE}, pair=NATIVE)

TRANSACTIONS = FieldMap(fields={
    "timeStamp": TIMESTAMP,
    "timestamp": TIMESTAMP,
    "value": NATIVE,
    **GAS_FIELDS,
})

INTERNAL_TRANSACTIONS = FieldMap(fields={
    "timeStamp": TIMESTAMP,
    "timestamp": TIMESTAMP,
    "value": NATIVE,
    "gas": GAS,
    "gasUsed": GAS,
})

TOKEN_TRANSFERS = FieldMap(fields={
    "timeStamp": TIMESTAMP,
    "timestamp": TIMESTAMP,
    "value": token_amount("tokenDecimal"),
    **GAS_FIELDS,
})

NFT_TRANSFERS = FieldMap(fields={
    "timeStamp": TIMESTAMP,
    "timestamp": TIMESTAMP,
    **GAS_FIELDS,
})

MINED_BLOCKS = FieldMap(fields={
    "timeStamp": TIMESTAMP,
    "blockReward": NATIVE,
})


class AccountWrapper(BaseWrapper):
    """
    Formatted counterparts of AccountModule. Arguments are forwarded unchanged.
    """

    def get_balance(self, *args, return_raw=False, **kwargs):
        """
        Formatted ``AccountModule.get_balance``.

        Native balance, e.g. ``'1.5 CFX'``; ``'0'`` renders as ``'0 CFX'``.
        """
        return self._present(self.raw.get_balance(*args, **kwargs), BALANCE, return_raw)

    def get_balance_multi(self, *args, return_raw=False, **kwargs):
        """Formatted ``AccountModule.get_balance_multi``. Native balances for several addresses."""
        return self._present(self.raw.get_balance_multi(*args, **kwargs), BALANCE_MULTI, return_raw)

    def get_transaction_list(self, *args, return_raw=False, **kwargs):
        """Formatted ``AccountModule.get_transaction_list``."""
        return self._present(self.raw.get_transaction_list(*args, **kwargs), TRANSACTIONS, return_raw)

    def get_internal_transaction_list(self, *args, return_raw=False, **kwargs):
        """Formatted ``AccountModule.get_internal_transaction_list``."""
        return self._present(self.raw.get_internal_transaction_list(*args, **kwargs),
                             INTERNAL_TRANSACTIONS, return_raw)

    def get_token_transfers(self, *args, return_raw=False, **kwargs):
        """
        Formatted ``AccountModule.get_token_transfers``.

        ERC-20 transfers; ``value`` is scaled by each record's ``tokenDecimal``.
        """
        return self._present(self.raw.get_token_transfers(*args, **kwargs), TOKEN_TRANSFERS, return_raw)

    def get_nft_transfers(self, *args, return_raw=False, **kwargs):
        """Formatted ``AccountModule.get_nft_transfers``."""
        return self._present(self.raw.get_nft_transfers(*args, **kwargs), NFT_TRANSFERS, return_raw)

    def get_mined_blocks(self, *args, return_raw=False, **kwargs):
        """Formatted ``AccountModule.get_mined_blocks``."""
        return self._present(self.raw.get_mined_blocks(*args, **kwargs), MINED_BLOCKS, return_raw)

    def get_balance_history(self, *args, return_raw=False, **kwargs):
        """Formatted ``AccountModule.get_balance_history``."""
        return self._present(self.raw.get_balance_history(*args, **kwargs), BALANCE, return_raw)
