"""
nft.py

NFT holdings, collections, ownership and transfers under ``/nft``.
"""

from typing import Optional

from confluxscan.api.base import ApiModule
from confluxscan.utils.validation import AddressValidator


class NFTModule(ApiModule):
    """
    NFT queries. Parameter names are converted to the API's camelCase.
    """

    def balances(self, owner: str, skip: Optional[int] = None, limit: Optional[int] = None):
        """
        Lists NFT collections held by an owner, with per-collection counts.

        :raises ValidationError: If the owner address is invalid.
        """
        AddressValidator.validate_address(owner)
        return self._get("/nft/balances", {"owner": owner, "skip": skip, "limit": limit})

    def tokens(self, contract: str, owner: Optional[str] = None, sort: Optional[str] = None,
               sort_field: Optional[str] = None, cursor: Optional[str] = None,
               skip: Optional[int] = None, limit: Optional[int] = None,
               with_brief: Optional[bool] = None, with_metadata: Optional[bool] = None,
               suppress_metadata_error: Optional[bool] = None):
        """
        Lists tokens of a collection, optionally only those of one owner.

        :raises ValidationError: If the contract or owner address is invalid.
        """
        AddressValidator.validate_address(contract, "contract address")
        AddressValidator.validate_optional_address(owner, "owner address")
        return self._get("/nft/tokens", {
            "contract": contract,
            "owner": owner,
            "sort": sort,
            "sortField": sort_field,
            "cursor": cursor,
            "skip": skip,
            "limit": limit,
            "withBrief": with_brief,
            "withMetadata": with_metadata,
            "suppressMetadataError": suppress_metadata_error,
        })

    def preview(self, contract: str, token_id: str, with_metadata: Optional[bool] = None):
        """
        Fetches the preview record of one token.

        :raises ValidationError: If the contract address is invalid.
        """
        AddressValidator.validate_address(contract, "contract address")
        return self._get("/nft/preview", {
            "contract": contract,
            "tokenId": token_id,
            "withMetadata": with_metadata,
        })

    def fts(self, contract: Optional[str] = None, name: Optional[str] = None):
        """Searches fungible token metadata by contract or name."""
        return self._get("/nft/fts", {"contract": contract, "name": name})

    def owners(self, contract: str, token_id: str, cursor: Optional[str] = None,
               limit: Optional[int] = None):
        """
        Lists the owners of one token.

        :raises ValidationError: If the contract address is invalid.
        """
        AddressValidator.validate_address(contract, "contract address")
        return self._get("/nft/owners", {
            "contract": contract,
            "tokenId": token_id,
            "cursor": cursor,
            "limit": limit,
        })

    def transfers(self, contract: str, token_id: Optional[str] = None,
                  cursor: Optional[str] = None, limit: Optional[int] = None,
                  sender: Optional[str] = None, receiver: Optional[str] = None,
                  start_block: Optional[int] = None, end_block: Optional[int] = None,
                  min_timestamp: Optional[int] = None, max_timestamp: Optional[int] = None,
                  sort: Optional[str] = None):
        """
        Lists transfers of a collection or of one token.

        ``sender`` and ``receiver`` map to the API's ``from`` and ``to`` filters.

        :raises ValidationError: If the contract address is invalid.
        """
        AddressValidator.validate_address(contract, "contract address")
        return self._get("/nft/transfers", {
            "contract": contract,
            "tokenId": token_id,
            "cursor": cursor,
            "limit": limit,
            "from": sender,
            "to": receiver,
            "startBlock": start_block,
            "endBlock": end_block,
            "minTimestamp": min_timestamp,
            "maxTimestamp": max_timestamp,
            "sort": sort,
        })
