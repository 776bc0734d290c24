"""
deprecated.py

Legacy ``/account/...`` listing endpoints kept for existing integrations.
New code should use the account and NFT modules instead.
"""

from typing import Optional

from confluxscan.api.base import ApiModule
from confluxscan.utils.validation import AddressValidator


class DeprecatedModule(ApiModule):
    """
    Legacy account listings. Sort order is sent upper-cased.
    """

    def _listing(self, path: str, account: str, skip: Optional[int] = None,
                 limit: Optional[int] = None, sender: Optional[str] = None,
                 receiver: Optional[str] = None, start_block: Optional[int] = None,
                 end_block: Optional[int] = None, min_timestamp: Optional[int] = None,
                 max_timestamp: Optional[int] = None, sort: Optional[str] = None, **extra):
        AddressValidator.validate_address(account, "account")
        return self._get(path, {
            "account": account,
            "skip": skip,
            "limit": limit,
            "from": sender,
            "to": receiver,
            "startBlock": start_block,
            "endBlock": end_block,
            "minTimestamp": min_timestamp,
            "maxTimestamp": max_timestamp,
            "sort": sort.upper() if sort else None,
            **extra,
        })

    def account_transactions(self, account: str, **params):
        """
        Transactions sent or received by an account.

        :param account: The account address.
        :param params: skip, limit, sender, receiver, start_block, end_block,
            min_timestamp, max_timestamp, sort.
        :raises ValidationError: If the account address is invalid.
        """
        return self._listing("/account/transactions", account, **params)

    def cfx_transfers(self, account: str, **params):
        return self._listing("/account/cfx/transfers", account, **params)

    def erc20_transfers(self, account: str, **params):
        return self._listing("/account/erc20/transfers", account, **params)

    def erc721_transfers(self, account: str, **params):
        return self._listing("/account/erc721/transfers", account, **params)

    def erc1155_transfers(self, account: str, **params):
        return self._listing("/account/erc1155/transfers", account, **params)

    def erc3525_transfers(self, account: str, **params):
        return self._listing("/account/erc3525/transfers", account, **params)

    def account_transfers(self, account: str, transfer_type: Optional[str] = None, **params):
        """Transfers of every kind, optionally filtered by transfer type."""
        return self._listing("/account/transfers", account, transferType=transfer_type, **params)

    def account_approvals(self, account: str, token_type: Optional[str] = None,
                          by_token_id: Optional[bool] = None):
        """
        Token approvals granted by an account.

        :raises ValidationError: If the account address is invalid.
        """
        AddressValidator.validate_address(account, "account")
        return self._get("/account/approvals", {
            "account": account,
            "tokenType": token_type,
            "byTokenId": by_token_id,
        })

    def account_tokens(self, account: str, token_type: Optional[str] = None):
        """
        Tokens held by an account.

        :raises ValidationError: If the account address is invalid.
        """
        AddressValidator.validate_address(account, "account")
        return self._get("/account/tokens", {"account": account, "tokenType": token_type})

    def token_infos(self, contracts):
        """
        Metadata for several token contracts.

        :param contracts: Addresses as a list or a comma-separated string.
        :raises ValidationError: If any contract address is invalid.
        """
        contracts = AddressValidator.validate_addresses(contracts)
        return self._get("/token/tokeninfos", {"contracts": ",".join(contracts)})
