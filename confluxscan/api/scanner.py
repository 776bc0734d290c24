"""
scanner.py

ESpaceScanner groups every API domain behind one object that shares a single
transport and configuration.
"""

from typing import Optional

from confluxscan.api.base import ESpaceApi
from confluxscan.api.modules import (
    AccountModule,
    BlockModule,
    ContractModule,
    DeprecatedModule,
    NFTModule,
    StatisticsModule,
    StatsModule,
    TokenModule,
    TransactionModule,
    UtilsModule,
)
from confluxscan.utils.config import ApiConfig
from confluxscan.utils.logger import get_logger

logger = get_logger(__name__)


class ESpaceScanner:
    """
    Raw client for the ConfluxScan eSpace API. Every method returns the
    envelope's ``result`` exactly as the API sent it.

    Example:
        scanner = ESpaceScanner(ApiConfig(target="testnet"))
        balance = scanner.account.get_balance("0x...")
    """

    def __init__(self, config: Optional[ApiConfig] = None, api: Optional[ESpaceApi] = None):
        """
        :param config: Connection settings; loaded from the environment when omitted.
        :param api: An existing transport to share; built from ``config`` when omitted.
        """
        self.api = api if api is not None else ESpaceApi(config)
        self.config = self.api.config

        self.account = AccountModule(self.api)
        self.block = BlockModule(self.api)
        self.contract = ContractModule(self.api)
        self.nft = NFTModule(self.api)
        self.statistics = StatisticsModule(self.api)
        self.stats = StatsModule(self.api)
        self.token = TokenModule(self.api)
        self.transaction = TransactionModule(self.api)
        self.utils = UtilsModule(self.api)
        self.deprecated = DeprecatedModule(self.api)

        logger.info(f"ESpaceScanner initialized for {self.config.target}")
