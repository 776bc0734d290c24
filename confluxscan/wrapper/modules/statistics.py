"""
statistics.py

Dual-mode network statistics and the field maps shared with the stats shortcuts.

Time series have the shape ``{total, list: [{statTime, ...}]}``; top-N rankings
have ``{maxTime, valueTotal, list: [...]}``.
"""

from confluxscan.formatters.responses import (
    GAS,
    NATIVE,
    NUMBER,
    TIMESTAMP,
    FieldMap,
    paged,
)
from confluxscan.wrapper.base import BaseWrapper

SUPPLY = FieldMap(fields={
    "totalIssued": NATIVE,
    "totalCirculating": NATIVE,
    "totalStaking": NATIVE,
    "totalCollateral": NATIVE,
    "nullAddressBalance": NATIVE,
    "twoYearUnlockBalance": NATIVE,
    "fourYearUnlockBalance": NATIVE,
})

MINING = paged({"difficulty": NUMBER, "hashRate": NUMBER})
TPS = paged()
CONTRACT = paged({"count": NUMBER, "total": NUMBER})
COUNT_SERIES = paged({"count": NUMBER})
CFX_TRANSFER = paged({"transferCount": NUMBER, "userCount": NUMBER, "amount": NATIVE})
TOKEN_TRANSFER = paged({"transferCount": NUMBER, "userCount": NUMBER})

TOKEN_HOLDER = paged({"holderCount": NUMBER})
UNIQUE_SENDER = paged({"uniqueSenderCount": NUMBER})
UNIQUE_RECEIVER = paged({"uniqueReceiverCount": NUMBER})
UNIQUE_PARTICIPANT = paged({"uniqueParticipantCount": NUMBER})

BLOCK_BASE_FEE = paged({"timestamp": TIMESTAMP, "baseFee": GAS})
BLOCK_AVG_PRIORITY_FEE = paged({"timestamp": TIMESTAMP, "avgPriorityFee": GAS})
BLOCK_GAS_USED = paged({"timestamp": TIMESTAMP, "gasUsed": NUMBER})
BLOCK_TXS_BY_TYPE = paged({"timestamp": TIMESTAMP})


def top(time_formatter=TIMESTAMP, total=None, **item_fields) -> FieldMap:
    """Plan for a top-N ranking; ``total`` formats ``valueTotal``."""
    fields = {"maxTime": time_formatter}
    if time_formatter is not TIMESTAMP:
        fields["minTime"] = time_formatter
    if total is not None:
        fields["valueTotal"] = total
    return FieldMap(fields=fields, children={"list": FieldMap(fields=item_fields)})


TOP_GAS_USED = FieldMap(
    fields={"maxTime": TIMESTAMP, "gasTotal": GAS},
    children={"list": FieldMap(fields={"gas": GAS})},
)
TOP_MINER = top(blockCntr=NUMBER, rewardSum=NATIVE, txFeeSum=NATIVE, hashRate=NUMBER)
TOP_TRANSACTION = top(total=NUMBER, value=NUMBER)
TOP_CFX = top(total=NATIVE, value=NATIVE)
TOP_TOKEN = top(total=NUMBER, value=NUMBER, transferCntr=NUMBER)


class StatisticsWrapper(BaseWrapper):
    """
    Formatted counterparts of StatisticsModule.
    """

    def get_supply(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_supply``. Supply breakdown with every balance in CFX."""
        return self._present(self.raw.get_supply(*args, **kwargs), SUPPLY, return_raw)

    def get_mining(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_mining``."""
        return self._present(self.raw.get_mining(*args, **kwargs), MINING, return_raw)

    def get_tps(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_tps``; ``tps`` values are left as sent."""
        return self._present(self.raw.get_tps(*args, **kwargs), TPS, return_raw)

    def get_contract(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_contract``."""
        return self._present(self.raw.get_contract(*args, **kwargs), CONTRACT, return_raw)

    def get_cfx_holder(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_cfx_holder``."""
        return self._present(self.raw.get_cfx_holder(*args, **kwargs), COUNT_SERIES, return_raw)

    def get_account_growth(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_account_growth``."""
        return self._present(self.raw.get_account_growth(*args, **kwargs), COUNT_SERIES, return_raw)

    def get_account_active(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_account_active``."""
        return self._present(self.raw.get_account_active(*args, **kwargs), COUNT_SERIES, return_raw)

    def get_account_active_overall(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_account_active_overall``."""
        return self._present(self.raw.get_account_active_overall(*args, **kwargs),
                             COUNT_SERIES, return_raw)

    def get_transaction(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_transaction``."""
        return self._present(self.raw.get_transaction(*args, **kwargs), COUNT_SERIES, return_raw)

    def get_cfx_transfer(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_cfx_transfer``."""
        return self._present(self.raw.get_cfx_transfer(*args, **kwargs), CFX_TRANSFER, return_raw)

    def get_token_transfer(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_token_transfer``."""
        return self._present(self.raw.get_token_transfer(*args, **kwargs), TOKEN_TRANSFER, return_raw)

    def get_top_gas_used(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_top_gas_used``."""
        return self._present(self.raw.get_top_gas_used(*args, **kwargs), TOP_GAS_USED, return_raw)

    def get_top_miner(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_top_miner``."""
        return self._present(self.raw.get_top_miner(*args, **kwargs), TOP_MINER, return_raw)

    def get_top_transaction_sender(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_top_transaction_sender``."""
        return self._present(self.raw.get_top_transaction_sender(*args, **kwargs),
                             TOP_TRANSACTION, return_raw)

    def get_top_transaction_receiver(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_top_transaction_receiver``."""
        return self._present(self.raw.get_top_transaction_receiver(*args, **kwargs),
                             TOP_TRANSACTION, return_raw)

    def get_top_cfx_sender(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_top_cfx_sender``."""
        return self._present(self.raw.get_top_cfx_sender(*args, **kwargs), TOP_CFX, return_raw)

    def get_top_cfx_receiver(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_top_cfx_receiver``."""
        return self._present(self.raw.get_top_cfx_receiver(*args, **kwargs), TOP_CFX, return_raw)

    def get_top_token_transfer(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_top_token_transfer``."""
        return self._present(self.raw.get_top_token_transfer(*args, **kwargs), TOP_TOKEN, return_raw)

    def get_top_token_sender(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_top_token_sender``."""
        return self._present(self.raw.get_top_token_sender(*args, **kwargs), TOP_TOKEN, return_raw)

    def get_top_token_receiver(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_top_token_receiver``."""
        return self._present(self.raw.get_top_token_receiver(*args, **kwargs), TOP_TOKEN, return_raw)

    def get_top_token_participant(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_top_token_participant``."""
        return self._present(self.raw.get_top_token_participant(*args, **kwargs), TOP_TOKEN, return_raw)

    def get_token_holder(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_token_holder``."""
        return self._present(self.raw.get_token_holder(*args, **kwargs), TOKEN_HOLDER, return_raw)

    def get_token_unique_sender(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_token_unique_sender``."""
        return self._present(self.raw.get_token_unique_sender(*args, **kwargs), UNIQUE_SENDER, return_raw)

    def get_token_unique_receiver(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_token_unique_receiver``."""
        return self._present(self.raw.get_token_unique_receiver(*args, **kwargs),
                             UNIQUE_RECEIVER, return_raw)

    def get_token_unique_participant(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_token_unique_participant``."""
        return self._present(self.raw.get_token_unique_participant(*args, **kwargs),
                             UNIQUE_PARTICIPANT, return_raw)

    def get_block_base_fee(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_block_base_fee``."""
        return self._present(self.raw.get_block_base_fee(*args, **kwargs), BLOCK_BASE_FEE, return_raw)

    def get_block_avg_priority_fee(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_block_avg_priority_fee``."""
        return self._present(self.raw.get_block_avg_priority_fee(*args, **kwargs),
                             BLOCK_AVG_PRIORITY_FEE, return_raw)

    def get_block_gas_used(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_block_gas_used``."""
        return self._present(self.raw.get_block_gas_used(*args, **kwargs), BLOCK_GAS_USED, return_raw)

    def get_block_txs_by_type(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatisticsModule.get_block_txs_by_type``."""
        return self._present(self.raw.get_block_txs_by_type(*args, **kwargs),
                             BLOCK_TXS_BY_TYPE, return_raw)
