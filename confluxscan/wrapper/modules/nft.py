"""
nft.py

Dual-mode NFT queries.
"""

from confluxscan.formatters.responses import NUMBER, PASSTHROUGH, TIMESTAMP, FieldMap
from confluxscan.wrapper.base import BaseWrapper

BALANCES = FieldMap(children={"list": FieldMap(fields={"balance": NUMBER, "amount": NUMBER})})

PREVIEW = FieldMap(fields={"mintTimestamp": TIMESTAMP})

OWNERS = FieldMap(children={"list": FieldMap(fields={"quantity": NUMBER, "amount": NUMBER})})

TRANSFERS = FieldMap(children={"list": FieldMap(fields={"timestamp": TIMESTAMP})})


class NFTWrapper(BaseWrapper):
    """
    Formatted counterparts of NFTModule: counts are grouped, timestamps rendered in UTC.
    """

    def balances(self, *args, return_raw=False, **kwargs):
        """Formatted ``NFTModule.balances``."""
        return self._present(self.raw.balances(*args, **kwargs), BALANCES, return_raw)

    def tokens(self, *args, return_raw=False, **kwargs):
        """Formatted ``NFTModule.tokens``."""
        return self._present(self.raw.tokens(*args, **kwargs), PASSTHROUGH, return_raw)

    def preview(self, *args, return_raw=False, **kwargs):
        """Formatted ``NFTModule.preview``."""
        return self._present(self.raw.preview(*args, **kwargs), PREVIEW, return_raw)

    def fts(self, *args, return_raw=False, **kwargs):
        """Formatted ``NFTModule.fts``."""
        return self._present(self.raw.fts(*args, **kwargs), PASSTHROUGH, return_raw)

    def owners(self, *args, return_raw=False, **kwargs):
        """Formatted ``NFTModule.owners``."""
        return self._present(self.raw.owners(*args, **kwargs), OWNERS, return_raw)

    def transfers(self, *args, return_raw=False, **kwargs):
        """Formatted ``NFTModule.transfers``."""
        return self._present(self.raw.transfers(*args, **kwargs), TRANSFERS, return_raw)
