"""
token.py

Dual-mode token balances and supply.

Token decimals are not part of these responses, so callers pass them in.
Supply figures assume 18 decimals when none are given.
"""

from typing import Optional

from confluxscan.formatters.numbers import NATIVE_DECIMALS, group_number, scale_amount
from confluxscan.formatters.responses import FieldMap, plain, scalar
from confluxscan.wrapper.base import BaseWrapper

GROUPED = scalar(plain(group_number))


def _grouped_amount(decimals: int) -> FieldMap:
    return scalar(plain(lambda raw: group_number(scale_amount(raw, decimals))))


def _scaled_amount(decimals: int) -> FieldMap:
    return scalar(plain(lambda raw: scale_amount(raw, decimals)))


def _or_default(decimals: Optional[int]) -> int:
    return NATIVE_DECIMALS if decimals is None else decimals


class TokenWrapper(BaseWrapper):
    """
    Formatted counterparts of TokenModule.
    """

    def get_token_balance(self, contract_address: str, address: str, tag: str = "latest_state",
                          decimals: Optional[int] = None, return_raw: bool = False):
        """
        Token balance of an account.

        :param decimals: Token decimals; without them the raw integer is only grouped.
        """
        data = self.raw.get_token_balance(contract_address, address, tag)
        field_map = GROUPED if decimals is None else _grouped_amount(decimals)
        return self._present(data, field_map, return_raw)

    def get_token_supply(self, contract_address: str, decimals: Optional[int] = None,
                         return_raw: bool = False):
        """Total supply, scaled by ``decimals`` (default 18) and grouped."""
        data = self.raw.get_token_supply(contract_address)
        return self._present(data, _grouped_amount(_or_default(decimals)), return_raw)

    def get_token_supply_history(self, contract_address: str, block_no: int,
                                 decimals: Optional[int] = None, return_raw: bool = False):
        """Total supply at a past block, scaled by ``decimals`` (default 18) and grouped."""
        data = self.raw.get_token_supply_history(contract_address, block_no)
        return self._present(data, _grouped_amount(_or_default(decimals)), return_raw)

    def get_token_balance_history(self, contract_address: str, address: str, block_no: int,
                                  decimals: Optional[int] = None, return_raw: bool = False):
        """Token balance at a past block, scaled by ``decimals`` (default 18), not grouped."""
        data = self.raw.get_token_balance_history(contract_address, address, block_no)
        return self._present(data, _scaled_amount(_or_default(decimals)), return_raw)
