"""
scanner.py

ESpaceScannerWrapper exposes every API domain in dual mode: formatted by
default, or exactly as sent with ``return_raw=True``.
"""

from typing import Optional

from confluxscan.api.base import ESpaceApi
from confluxscan.api.scanner import ESpaceScanner
from confluxscan.utils.config import ApiConfig
from confluxscan.wrapper.modules import (
    AccountWrapper,
    BlockWrapper,
    ContractWrapper,
    DeprecatedWrapper,
    NFTWrapper,
    StatisticsWrapper,
    StatsWrapper,
    TokenWrapper,
    TransactionWrapper,
    UtilsWrapper,
)


class ESpaceScannerWrapper:
    """
    Display-oriented client for the ConfluxScan eSpace API.

    Example:
        scanner = ESpaceScannerWrapper(ApiConfig(api_key="..."))
        scanner.account.get_balance("0x...")                   # '1.5 CFX'
        scanner.account.get_balance("0x...", return_raw=True)  # '1500000000000000000'
    """

    def __init__(self, config: Optional[ApiConfig] = None, api: Optional[ESpaceApi] = None):
        """
        :param config: Connection settings; loaded from the environment when omitted.
        :param api: An existing transport to share; built from ``config`` when omitted.
        """
        self.scanner = ESpaceScanner(config, api)
        self.config = self.scanner.config

        self.account = AccountWrapper(self.scanner.account)
        self.block = BlockWrapper(self.scanner.block)
        self.contract = ContractWrapper(self.scanner.contract)
        self.nft = NFTWrapper(self.scanner.nft)
        self.statistics = StatisticsWrapper(self.scanner.statistics)
        self.stats = StatsWrapper(self.scanner.stats)
        self.token = TokenWrapper(self.scanner.token)
        self.transaction = TransactionWrapper(self.scanner.transaction)
        self.utils = UtilsWrapper(self.scanner.utils)
        self.deprecated = DeprecatedWrapper(self.scanner.deprecated)
