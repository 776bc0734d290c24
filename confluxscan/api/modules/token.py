"""
token.py

ERC-20 balances and supply, current and historical.
"""

from confluxscan.api.base import ApiModule
from confluxscan.utils.validation import AddressValidator, require_non_negative


class TokenModule(ApiModule):
    """
    Token balance and supply queries. Amounts are returned in the token's base unit.
    """

    def get_token_balance(self, contract_address: str, address: str, tag: str = "latest_state"):
        """
        Fetches the token balance of an account.

        :param contract_address: The token contract.
        :param address: The account holding the token.
        :param tag: Epoch tag to read the balance at.
        :return: The balance as an integer string.
        :raises ValidationError: If either address is invalid.
        """
        AddressValidator.validate_address(address)
        AddressValidator.validate_address(contract_address, "contract address")
        return self._get("/api", {
            "module": "account",
            "action": "tokenbalance",
            "contractaddress": contract_address,
            "address": address,
            "tag": tag,
        })

    def get_token_supply(self, contract_address: str):
        """
        Fetches the total supply of a token.

        :raises ValidationError: If the contract address is invalid.
        """
        AddressValidator.validate_address(contract_address, "contract address")
        return self._get("/api", {
            "module": "stats",
            "action": "tokensupply",
            "contractaddress": contract_address,
        })

    def get_token_supply_history(self, contract_address: str, block_no: int):
        """
        Fetches the total supply of a token at a past block.

        :raises ValidationError: If the contract address or block number is invalid.
        """
        AddressValidator.validate_address(contract_address, "contract address")
        block_no = require_non_negative(block_no, "block number")
        return self._get("/api", {
            "module": "stats",
            "action": "tokensupplyhistory",
            "contractaddress": contract_address,
            "blockno": block_no,
        })

    def get_token_balance_history(self, contract_address: str, address: str, block_no: int):
        """
        Fetches the token balance of an account at a past block.

        :raises ValidationError: If an address or the block number is invalid.
        """
        AddressValidator.validate_address(contract_address, "contract address")
        AddressValidator.validate_address(address)
        block_no = require_non_negative(block_no, "block number")
        return self._get("/api", {
            "module": "account",
            "action": "balancehistory",
            "contractaddress": contract_address,
            "address": address,
            "blockno": block_no,
        })
