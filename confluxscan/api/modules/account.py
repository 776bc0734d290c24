"""
account.py

Request builders for account balances, transaction listings and mined blocks.
All endpoints live under ``/api?module=account``.
"""

from typing import Iterable, Optional, Union

from confluxscan.api.base import ApiModule
from confluxscan.utils.logger import get_logger
from confluxscan.utils.validation import AddressValidator

logger = get_logger(__name__)

ENDPOINT = "/api"


class AccountModule(ApiModule):
    """
    Account queries: balances, normal/internal/token/NFT transfers, mined blocks.
    """

    def _account(self, action: str, **params):
        logger.debug(f"Requesting account action {action}")
        return self._get(ENDPOINT, {"module": "account", "action": action, **params})

    def get_balance(self, address: str, tag: str = "latest_state"):
        """
        Fetches the native balance of an address, in drip.

        :param address: The account address.
        :param tag: Epoch tag to read the balance at.
        :return: The balance as an integer string.
        :raises ValidationError: If the address is invalid.
        """
        AddressValidator.validate_address(address)
        return self._account("balance", address=address, tag=tag)

    def get_balance_multi(self, addresses: Union[str, Iterable[str]], tag: str = "latest_state"):
        """
        Fetches native balances for several addresses in one request.

        :param addresses: Addresses as a list or a comma-separated string.
        :param tag: Epoch tag to read the balances at.
        :return: One entry per address.
        :raises ValidationError: If any address is invalid.
        """
        addresses = AddressValidator.validate_addresses(addresses)
        return self._account("balancemulti", address=",".join(addresses), tag=tag)

    def get_transaction_list(self, address: str, startblock: Optional[int] = None,
                             endblock: Optional[int] = None, page: Optional[int] = None,
                             offset: Optional[int] = None, sort: Optional[str] = None):
        """
        Fetches the normal transactions of an address.

        :param address: The account address.
        :param startblock: First block to include.
        :param endblock: Last block to include.
        :param page: Page number.
        :param offset: Page size.
        :param sort: 'asc' or 'desc'.
        :return: List of transactions.
        :raises ValidationError: If the address is invalid.
        """
        AddressValidator.validate_address(address)
        return self._account("txlist", address=address, startblock=startblock, endblock=endblock,
                             page=page, offset=offset, sort=sort)

    def get_internal_transaction_list(self, address: str, startblock: Optional[int] = None,
                                      endblock: Optional[int] = None, page: Optional[int] = None,
                                      offset: Optional[int] = None, sort: Optional[str] = None):
        """
        Fetches the internal (contract-initiated) transactions of an address.

        :raises ValidationError: If the address is invalid.
        """
        AddressValidator.validate_address(address)
        return self._account("txlistinternal", address=address, startblock=startblock,
                             endblock=endblock, page=page, offset=offset, sort=sort)

    def get_token_transfers(self, address: str, contractaddress: Optional[str] = None,
                            startblock: Optional[int] = None, endblock: Optional[int] = None,
                            page: Optional[int] = None, offset: Optional[int] = None,
                            sort: Optional[str] = None):
        """
        Fetches ERC-20 transfers of an address, optionally for one token.

        :raises ValidationError: If either address is invalid.
        """
        AddressValidator.validate_address(address)
        AddressValidator.validate_optional_address(contractaddress, "contract address")
        return self._account("tokentx", address=address, contractaddress=contractaddress,
                             startblock=startblock, endblock=endblock, page=page,
                             offset=offset, sort=sort)

    def get_nft_transfers(self, address: str, contractaddress: Optional[str] = None,
                          startblock: Optional[int] = None, endblock: Optional[int] = None,
                          page: Optional[int] = None, offset: Optional[int] = None,
                          sort: Optional[str] = None):
        """
        Fetches ERC-721 transfers of an address, optionally for one collection.

        :raises ValidationError: If either address is invalid.
        """
        AddressValidator.validate_address(address)
        AddressValidator.validate_optional_address(contractaddress, "contract address")
        return self._account("tokennfttx", address=address, contractaddress=contractaddress,
                             startblock=startblock, endblock=endblock, page=page,
                             offset=offset, sort=sort)

    def get_mined_blocks(self, address: str, blocktype: str = "blocks",
                         page: Optional[int] = None, offset: Optional[int] = None):
        """
        Fetches blocks mined by an address.

        :raises ValidationError: If the address is invalid.
        """
        AddressValidator.validate_address(address)
        return self._account("getminedblocks", address=address, blocktype=blocktype,
                             page=page, offset=offset)

    def get_balance_history(self, address: str, blockno: int):
        """
        Fetches the native balance of an address at a past block, in drip.

        :raises ValidationError: If the address is invalid.
        """
        AddressValidator.validate_address(address)
        return self._account("balancehistory", address=address, blockno=blockno)
