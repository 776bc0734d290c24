"""
Wrapper Modules

Dual-mode counterparts of the raw API modules.
"""

from confluxscan.wrapper.modules.account import AccountWrapper
from confluxscan.wrapper.modules.block import BlockWrapper
from confluxscan.wrapper.modules.contract import ContractWrapper
from confluxscan.wrapper.modules.deprecated import DeprecatedWrapper
from confluxscan.wrapper.modules.nft import NFTWrapper
from confluxscan.wrapper.modules.statistics import StatisticsWrapper
from confluxscan.wrapper.modules.stats import StatsWrapper
from confluxscan.wrapper.modules.token import TokenWrapper
from confluxscan.wrapper.modules.transaction import TransactionWrapper
from confluxscan.wrapper.modules.utils import UtilsWrapper

__all__ = [
    'AccountWrapper',
    'BlockWrapper',
    'ContractWrapper',
    'DeprecatedWrapper',
    'NFTWrapper',
    'StatisticsWrapper',
    'StatsWrapper',
    'TokenWrapper',
    'TransactionWrapper',
    'UtilsWrapper',
]
