"""
utils.py

Method signature decoding under ``/util/decode``.
"""

from confluxscan.api.base import ApiModule
from confluxscan.utils.validation import require_text


class UtilsModule(ApiModule):

    def decode_method(self, hashes: str):
        """
        Decodes method calls by transaction hash.

        :param hashes: Comma-separated transaction hashes.
        :raises ValidationError: If hashes is not a string.
        """
        require_text(hashes, "hashes")
        return self._get("/util/decode/method", {"hashes": hashes})

    def decode_method_raw(self, contracts: str, inputs: str):
        """
        Decodes raw call data against the given contracts.

        :param contracts: Comma-separated contract addresses.
        :param inputs: Comma-separated call data, one per contract.
        :raises ValidationError: If either argument is not a string.
        """
        require_text(contracts, "contracts")
        require_text(inputs, "inputs")
        return self._get("/util/decode/method/raw", {"contracts": contracts, "inputs": inputs})
