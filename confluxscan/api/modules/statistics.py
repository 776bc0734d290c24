"""
statistics.py

Network statistics under ``/statistics``.

Time-series endpoints share the paging parameters ``minTimestamp``,
``maxTimestamp``, ``sort``, ``skip`` and ``limit``; top-N endpoints take a
``spanType`` such as '24h', '3d' or '7d'.
"""

from typing import Optional

from confluxscan.api.base import ApiModule
from confluxscan.utils.validation import AddressValidator


class StatisticsModule(ApiModule):
    """
    One method per statistics endpoint; results are returned as sent.
    """

    def _series(self, path: str, min_timestamp: Optional[int] = None,
                max_timestamp: Optional[int] = None, sort: Optional[str] = None,
                skip: Optional[int] = None, limit: Optional[int] = None, **extra):
        return self._get(f"/statistics/{path}", {
            "minTimestamp": min_timestamp,
            "maxTimestamp": max_timestamp,
            "sort": sort,
            "skip": skip,
            "limit": limit,
            **extra,
        })

    def _top(self, path: str, span_type: Optional[str] = None):
        return self._get(f"/statistics/top/{path}", {"spanType": span_type})

    def _token_series(self, path: str, contract: str, **params):
        AddressValidator.validate_address(contract, "contract address")
        return self._series(path, contract=contract, **params)

    # Supply and network activity

    def get_supply(self):
        """Native currency supply breakdown, in drip."""
        return self._get("/statistics/supply")

    def get_mining(self, interval_type: Optional[str] = None, **params):
        """Difficulty, hash rate and block time series."""
        return self._series("mining", intervalType=interval_type, **params)

    def get_tps(self, interval_type: Optional[str] = None, **params):
        """Transactions-per-second series."""
        return self._series("tps", intervalType=interval_type, **params)

    def get_contract(self, **params):
        return self._series("contract", **params)

    def get_cfx_holder(self, **params):
        return self._series("account/cfx/holder", **params)

    def get_account_growth(self, **params):
        return self._series("account/growth", **params)

    def get_account_active(self, **params):
        return self._series("account/active", **params)

    def get_account_active_overall(self, **params):
        return self._series("account/active/overall", **params)

    def get_transaction(self, **params):
        return self._series("transaction", **params)

    def get_cfx_transfer(self, **params):
        return self._series("cfx/transfer", **params)

    def get_token_transfer(self, **params):
        return self._series("token/transfer", **params)

    # Top-N rankings

    def get_top_gas_used(self, span_type: Optional[str] = None):
        return self._top("gas/used", span_type)

    def get_top_miner(self, span_type: Optional[str] = None):
        return self._top("miner", span_type)

    def get_top_transaction_sender(self, span_type: Optional[str] = None):
        return self._top("transaction/sender", span_type)

    def get_top_transaction_receiver(self, span_type: Optional[str] = None):
        return self._top("transaction/receiver", span_type)

    def get_top_cfx_sender(self, span_type: Optional[str] = None):
        return self._top("cfx/sender", span_type)

    def get_top_cfx_receiver(self, span_type: Optional[str] = None):
        return self._top("cfx/receiver", span_type)

    def get_top_token_transfer(self, span_type: Optional[str] = None):
        return self._top("token/transfer", span_type)

    def get_top_token_sender(self, span_type: Optional[str] = None):
        return self._top("token/sender", span_type)

    def get_top_token_receiver(self, span_type: Optional[str] = None):
        return self._top("token/receiver", span_type)

    def get_top_token_participant(self, span_type: Optional[str] = None):
        return self._top("token/participant", span_type)

    # Per-token series

    def get_token_holder(self, contract: str, **params):
        """
        Holder count series of one token.

        :raises ValidationError: If the contract address is invalid.
        """
        return self._token_series("token/holder", contract, **params)

    def get_token_unique_sender(self, contract: str, **params):
        return self._token_series("token/unique/sender", contract, **params)

    def get_token_unique_receiver(self, contract: str, **params):
        return self._token_series("token/unique/receiver", contract, **params)

    def get_token_unique_participant(self, contract: str, **params):
        return self._token_series("token/unique/participant", contract, **params)

    # Block series

    def get_block_base_fee(self, **params):
        return self._series("block/base-fee", **params)

    def get_block_avg_priority_fee(self, **params):
        return self._series("block/avg-priority-fee", **params)

    def get_block_gas_used(self, **params):
        return self._series("block/gas-used", **params)

    def get_block_txs_by_type(self, **params):
        return self._series("block/txs-by-type", **params)
