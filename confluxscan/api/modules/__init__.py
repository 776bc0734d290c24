"""
API Modules

One request builder per API domain.
"""

from confluxscan.api.modules.account import AccountModule
from confluxscan.api.modules.block import BlockModule
from confluxscan.api.modules.contract import ContractModule
from confluxscan.api.modules.deprecated import DeprecatedModule
from confluxscan.api.modules.nft import NFTModule
from confluxscan.api.modules.statistics import StatisticsModule
from confluxscan.api.modules.stats import StatsModule
from confluxscan.api.modules.token import TokenModule
from confluxscan.api.modules.transaction import TransactionModule
from confluxscan.api.modules.utils import UtilsModule

__all__ = [
    'AccountModule',
    'BlockModule',
    'ContractModule',
    'DeprecatedModule',
    'NFTModule',
    'StatisticsModule',
    'StatsModule',
    'TokenModule',
    'TransactionModule',
    'UtilsModule',
]
