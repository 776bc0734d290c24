"""
stats.py

Convenience statistics with defaults filled in.

Time-series calls default to the last 24 hours, newest first, ten rows; top-N
calls default to a 24h span. Unlike StatisticsModule, an empty result is an
error here.
"""

from typing import Any, Dict, Optional

from confluxscan.api.base import ApiModule
from confluxscan.errors import NotFoundError
from confluxscan.formatters.dates import get_24_hours_ago, get_current_timestamp
from confluxscan.utils.logger import get_logger
from confluxscan.utils.validation import AddressValidator

logger = get_logger(__name__)

DEFAULT_SPAN = "24h"
DEFAULT_SORT = "DESC"
DEFAULT_LIMIT = 10


class StatsModule(ApiModule):
    """
    Statistics shortcuts: basic series, top-N rankings and per-token series.
    """

    def _require_result(self, endpoint: str, result: Any) -> Any:
        if not result:
            logger.error(f"No result returned for {endpoint}")
            raise NotFoundError(f"No result returned for {endpoint}")
        return result

    def _basic_stats(self, endpoint: str, min_timestamp: Optional[int] = None,
                     max_timestamp: Optional[int] = None, sort: Optional[str] = None,
                     skip: Optional[int] = None, limit: Optional[int] = None,
                     **extra) -> Any:
        params: Dict[str, Any] = {
            "minTimestamp": get_24_hours_ago() if min_timestamp is None else min_timestamp,
            "maxTimestamp": get_current_timestamp() if max_timestamp is None else max_timestamp,
            "sort": DEFAULT_SORT if sort is None else sort,
            "skip": 0 if skip is None else skip,
            "limit": DEFAULT_LIMIT if limit is None else limit,
            **extra,
        }
        logger.debug(f"Getting basic stats from {endpoint}")
        return self._require_result(endpoint, self._get(endpoint, params))

    def _top_stats(self, endpoint: str, span_type: str = DEFAULT_SPAN) -> Any:
        logger.debug(f"Getting top stats from {endpoint} for {span_type}")
        return self._require_result(endpoint, self._get(endpoint, {"spanType": span_type}))

    def _token_stats(self, endpoint: str, contract: str, **params) -> Any:
        AddressValidator.validate_address(contract, "contract address")
        return self._basic_stats(endpoint, contract=contract, **params)

    # Basic series

    def get_active_account_stats(self, **params):
        """
        Active account counts.

        :param params: min_timestamp, max_timestamp, sort, skip, limit.
        :raises NotFoundError: If the API returns no data.
        """
        return self._basic_stats("/statistics/account/active", **params)

    def get_cfx_holder_stats(self, **params):
        return self._basic_stats("/statistics/account/cfx/holder", **params)

    def get_account_growth_stats(self, **params):
        return self._basic_stats("/statistics/account/growth", **params)

    def get_contract_stats(self, **params):
        return self._basic_stats("/statistics/contract", **params)

    def get_transaction_stats(self, **params):
        return self._basic_stats("/statistics/transaction", **params)

    def get_cfx_transfer_stats(self, **params):
        return self._basic_stats("/statistics/cfx/transfer", **params)

    def get_tps_stats(self, **params):
        return self._basic_stats("/statistics/tps", **params)

    def get_supply_stats(self, **params):
        return self._basic_stats("/statistics/supply", **params)

    def get_mining_stats(self, **params):
        return self._basic_stats("/statistics/mining", **params)

    def get_active_account_overall_stats(self, **params):
        return self._basic_stats("/statistics/account/active/overall", **params)

    def get_token_transfer_stats(self, **params):
        return self._basic_stats("/statistics/token/transfer", **params)

    # Top-N

    def get_top_gas_used(self, span_type: str = DEFAULT_SPAN):
        return self._top_stats("/statistics/top/gas/used", span_type)

    def get_top_transaction_senders(self, span_type: str = DEFAULT_SPAN):
        return self._top_stats("/statistics/top/transaction/sender", span_type)

    def get_top_transaction_receivers(self, span_type: str = DEFAULT_SPAN):
        return self._top_stats("/statistics/top/transaction/receiver", span_type)

    def get_top_cfx_senders(self, span_type: str = DEFAULT_SPAN):
        return self._top_stats("/statistics/top/cfx/sender", span_type)

    def get_top_cfx_receivers(self, span_type: str = DEFAULT_SPAN):
        return self._top_stats("/statistics/top/cfx/receiver", span_type)

    def get_top_token_transfers(self, span_type: str = DEFAULT_SPAN):
        return self._top_stats("/statistics/top/token/transfer", span_type)

    def get_top_token_senders(self, span_type: str = DEFAULT_SPAN):
        return self._top_stats("/statistics/top/token/sender", span_type)

    def get_top_token_receivers(self, span_type: str = DEFAULT_SPAN):
        return self._top_stats("/statistics/top/token/receiver", span_type)

    def get_top_token_participants(self, span_type: str = DEFAULT_SPAN):
        return self._top_stats("/statistics/top/token/participant", span_type)

    def get_top_miner(self, span_type: str = DEFAULT_SPAN):
        return self._top_stats("/statistics/top/miner", span_type)

    # Per-token series

    def get_token_holder_stats(self, contract: str, **params):
        """
        Holder count series of one token.

        :raises ValidationError: If the contract address is invalid.
        :raises NotFoundError: If the API returns no data.
        """
        return self._token_stats("/statistics/token/holder", contract, **params)

    def get_token_unique_sender_stats(self, contract: str, **params):
        return self._token_stats("/statistics/token/unique/sender", contract, **params)

    def get_token_unique_receiver_stats(self, contract: str, **params):
        return self._token_stats("/statistics/token/unique/receiver", contract, **params)

    def get_token_unique_participant_stats(self, contract: str, **params):
        return self._token_stats("/statistics/token/unique/participant", contract, **params)

    # Block series

    def get_block_base_fee_stats(self, **params):
        """
        Per-block base fee series.

        :raises NotFoundError: If the API returns no data.
        """
        return self._basic_stats("/statistics/block/base-fee", **params)

    def get_block_gas_used_stats(self, **params):
        return self._basic_stats("/statistics/block/gas-used", **params)

    def get_block_avg_priority_fee_stats(self, **params):
        return self._basic_stats("/statistics/block/avg-priority-fee", **params)

    def get_block_txs_by_type_stats(self, **params):
        return self._basic_stats("/statistics/block/txs-by-type", **params)
