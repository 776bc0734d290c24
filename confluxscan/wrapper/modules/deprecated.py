"""
deprecated.py

Dual-mode legacy account listings.

ERC-20 style transfer listings carry token metadata once per contract in
``addressInfo``; amounts are scaled by the decimals found there (18 if absent).
"""

from confluxscan.formatters.numbers import NATIVE_DECIMALS
from confluxscan.formatters.responses import (
    GAS,
    NATIVE,
    PASSTHROUGH,
    TIMESTAMP,
    FieldMap,
    token_amount,
    token_amount_from_address_info,
)
from confluxscan.wrapper.base import BaseWrapper


def listing(**item_fields) -> FieldMap:
    return FieldMap(children={"list": FieldMap(fields={"timestamp": TIMESTAMP, **item_fields})})


ACCOUNT_TRANSACTIONS = listing(gasPrice=GAS, gasFee=GAS, value=NATIVE)
CFX_TRANSFERS = listing(amount=NATIVE)
TOKEN_TRANSFERS = listing(amount=token_amount_from_address_info("contract"))
NFT_TRANSFERS = listing()
ACCOUNT_TOKENS = FieldMap(children={
    "list": FieldMap(fields={"amount": token_amount("decimals", default=NATIVE_DECIMALS)}),
})


class DeprecatedWrapper(BaseWrapper):
    """
    Formatted counterparts of DeprecatedModule. Arguments are forwarded unchanged.
    """

    def account_transactions(self, *args, return_raw=False, **kwargs):
        """Formatted ``DeprecatedModule.account_transactions``."""
        return self._present(self.raw.account_transactions(*args, **kwargs),
                             ACCOUNT_TRANSACTIONS, return_raw)

    def cfx_transfers(self, *args, return_raw=False, **kwargs):
        """Formatted ``DeprecatedModule.cfx_transfers``."""
        return self._present(self.raw.cfx_transfers(*args, **kwargs), CFX_TRANSFERS, return_raw)

    def erc20_transfers(self, *args, return_raw=False, **kwargs):
        """Formatted ``DeprecatedModule.erc20_transfers``."""
        return self._present(self.raw.erc20_transfers(*args, **kwargs), TOKEN_TRANSFERS, return_raw)

    def erc721_transfers(self, *args, return_raw=False, **kwargs):
        """Formatted ``DeprecatedModule.erc721_transfers``."""
        return self._present(self.raw.erc721_transfers(*args, **kwargs), NFT_TRANSFERS, return_raw)

    def erc1155_transfers(self, *args, return_raw=False, **kwargs):
        """Formatted ``DeprecatedModule.erc1155_transfers``."""
        return self._present(self.raw.erc1155_transfers(*args, **kwargs), NFT_TRANSFERS, return_raw)

    def erc3525_transfers(self, *args, return_raw=False, **kwargs):
        """Formatted ``DeprecatedModule.erc3525_transfers``."""
        return self._present(self.raw.erc3525_transfers(*args, **kwargs), NFT_TRANSFERS, return_raw)

    def account_transfers(self, *args, return_raw=False, **kwargs):
        """Formatted ``DeprecatedModule.account_transfers``."""
        return self._present(self.raw.account_transfers(*args, **kwargs), TOKEN_TRANSFERS, return_raw)

    def account_approvals(self, *args, return_raw=False, **kwargs):
        """Formatted ``DeprecatedModule.account_approvals``."""
        return self._present(self.raw.account_approvals(*args, **kwargs), PASSTHROUGH, return_raw)

    def account_tokens(self, *args, return_raw=False, **kwargs):
        """Formatted ``DeprecatedModule.account_tokens``."""
        return self._present(self.raw.account_tokens(*args, **kwargs), ACCOUNT_TOKENS, return_raw)

    def token_infos(self, *args, return_raw=False, **kwargs):
        """Formatted ``DeprecatedModule.token_infos``."""
        return self._present(self.raw.token_infos(*args, **kwargs), PASSTHROUGH, return_raw)
