"""
stats.py

Dual-mode statistics shortcuts. Field maps are shared with the statistics
wrapper, except that top token rankings show ``maxTime``/``minTime`` as dates.
"""

from confluxscan.formatters.responses import DATE, NUMBER
from confluxscan.wrapper.base import BaseWrapper
from confluxscan.wrapper.modules.statistics import (
    BLOCK_AVG_PRIORITY_FEE,
    BLOCK_BASE_FEE,
    BLOCK_GAS_USED,
    BLOCK_TXS_BY_TYPE,
    CFX_TRANSFER,
    CONTRACT,
    COUNT_SERIES,
    MINING,
    SUPPLY,
    TOKEN_HOLDER,
    TOKEN_TRANSFER,
    TOP_CFX,
    TOP_GAS_USED,
    TOP_MINER,
    TOP_TRANSACTION,
    TPS,
    UNIQUE_PARTICIPANT,
    UNIQUE_RECEIVER,
    UNIQUE_SENDER,
    top,
)

TOP_TOKEN_BY_DAY = top(DATE, total=NUMBER, value=NUMBER, transferCntr=NUMBER)


class StatsWrapper(BaseWrapper):
    """
    Formatted counterparts of StatsModule. Arguments are forwarded unchanged.
    """

    def get_active_account_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_active_account_stats``."""
        return self._present(self.raw.get_active_account_stats(*args, **kwargs), COUNT_SERIES, return_raw)

    def get_cfx_holder_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_cfx_holder_stats``."""
        return self._present(self.raw.get_cfx_holder_stats(*args, **kwargs), COUNT_SERIES, return_raw)

    def get_account_growth_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_account_growth_stats``."""
        return self._present(self.raw.get_account_growth_stats(*args, **kwargs), COUNT_SERIES, return_raw)

    def get_contract_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_contract_stats``."""
        return self._present(self.raw.get_contract_stats(*args, **kwargs), CONTRACT, return_raw)

    def get_transaction_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_transaction_stats``."""
        return self._present(self.raw.get_transaction_stats(*args, **kwargs), COUNT_SERIES, return_raw)

    def get_cfx_transfer_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_cfx_transfer_stats``; ``amount`` in CFX."""
        return self._present(self.raw.get_cfx_transfer_stats(*args, **kwargs), CFX_TRANSFER, return_raw)

    def get_tps_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_tps_stats``."""
        return self._present(self.raw.get_tps_stats(*args, **kwargs), TPS, return_raw)

    def get_supply_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_supply_stats``; balances in CFX."""
        return self._present(self.raw.get_supply_stats(*args, **kwargs), SUPPLY, return_raw)

    def get_mining_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_mining_stats``."""
        return self._present(self.raw.get_mining_stats(*args, **kwargs), MINING, return_raw)

    def get_active_account_overall_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_active_account_overall_stats``."""
        return self._present(self.raw.get_active_account_overall_stats(*args, **kwargs),
                             COUNT_SERIES, return_raw)

    def get_token_transfer_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_token_transfer_stats``."""
        return self._present(self.raw.get_token_transfer_stats(*args, **kwargs), TOKEN_TRANSFER, return_raw)

    def get_top_gas_used(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_top_gas_used``."""
        return self._present(self.raw.get_top_gas_used(*args, **kwargs), TOP_GAS_USED, return_raw)

    def get_top_transaction_senders(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_top_transaction_senders``."""
        return self._present(self.raw.get_top_transaction_senders(*args, **kwargs),
                             TOP_TRANSACTION, return_raw)

    def get_top_transaction_receivers(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_top_transaction_receivers``."""
        return self._present(self.raw.get_top_transaction_receivers(*args, **kwargs),
                             TOP_TRANSACTION, return_raw)

    def get_top_cfx_senders(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_top_cfx_senders``."""
        return self._present(self.raw.get_top_cfx_senders(*args, **kwargs), TOP_CFX, return_raw)

    def get_top_cfx_receivers(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_top_cfx_receivers``."""
        return self._present(self.raw.get_top_cfx_receivers(*args, **kwargs), TOP_CFX, return_raw)

    def get_top_token_transfers(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_top_token_transfers``; times as dates."""
        return self._present(self.raw.get_top_token_transfers(*args, **kwargs),
                             TOP_TOKEN_BY_DAY, return_raw)

    def get_top_token_senders(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_top_token_senders``; times as dates."""
        return self._present(self.raw.get_top_token_senders(*args, **kwargs), TOP_TOKEN_BY_DAY, return_raw)

    def get_top_token_receivers(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_top_token_receivers``; times as dates."""
        return self._present(self.raw.get_top_token_receivers(*args, **kwargs),
                             TOP_TOKEN_BY_DAY, return_raw)

    def get_top_token_participants(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_top_token_participants``; times as dates."""
        return self._present(self.raw.get_top_token_participants(*args, **kwargs),
                             TOP_TOKEN_BY_DAY, return_raw)

    def get_top_miner(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_top_miner``."""
        return self._present(self.raw.get_top_miner(*args, **kwargs), TOP_MINER, return_raw)

    def get_token_holder_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_token_holder_stats``."""
        return self._present(self.raw.get_token_holder_stats(*args, **kwargs), TOKEN_HOLDER, return_raw)

    def get_token_unique_sender_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_token_unique_sender_stats``."""
        return self._present(self.raw.get_token_unique_sender_stats(*args, **kwargs),
                             UNIQUE_SENDER, return_raw)

    def get_token_unique_receiver_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_token_unique_receiver_stats``."""
        return self._present(self.raw.get_token_unique_receiver_stats(*args, **kwargs),
                             UNIQUE_RECEIVER, return_raw)

    def get_token_unique_participant_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_token_unique_participant_stats``."""
        return self._present(self.raw.get_token_unique_participant_stats(*args, **kwargs),
                             UNIQUE_PARTICIPANT, return_raw)

    def get_block_base_fee_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_block_base_fee_stats``; fees in Gdrip."""
        return self._present(self.raw.get_block_base_fee_stats(*args, **kwargs), BLOCK_BASE_FEE, return_raw)

    def get_block_gas_used_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_block_gas_used_stats``."""
        return self._present(self.raw.get_block_gas_used_stats(*args, **kwargs), BLOCK_GAS_USED, return_raw)

    def get_block_avg_priority_fee_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_block_avg_priority_fee_stats``; fees in Gdrip."""
        return self._present(self.raw.get_block_avg_priority_fee_stats(*args, **kwargs),
                             BLOCK_AVG_PRIORITY_FEE, return_raw)

    def get_block_txs_by_type_stats(self, *args, return_raw=False, **kwargs):
        """Formatted ``StatsModule.get_block_txs_by_type_stats``."""
        return self._present(self.raw.get_block_txs_by_type_stats(*args, **kwargs),
                             BLOCK_TXS_BY_TYPE, return_raw)
