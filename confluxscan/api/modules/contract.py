"""
contract.py

Contract ABI, source code and verification status under ``/api?module=contract``.
"""

import json
from typing import Optional

from confluxscan.api.base import ApiModule
from confluxscan.errors import NotFoundError
from confluxscan.utils.logger import get_logger
from confluxscan.utils.validation import AddressValidator, require_present

logger = get_logger(__name__)


class ContractModule(ApiModule):
    """
    Verified-contract metadata and verification job status.
    """

    def _contract(self, action: str, **params):
        return self._get("/api", {"module": "contract", "action": action, **params})

    def get_abi(self, address: str):
        """
        Fetches the ABI of a verified contract.

        :param address: The contract address.
        :return: The ABI decoded from JSON, or the raw text if it is not JSON.
        :raises ValidationError: If the address is invalid.
        :raises NotFoundError: If the contract is not verified.
        """
        AddressValidator.validate_address(address)
        result = self._contract("getabi", address=address)
        if not result:
            raise NotFoundError(f"Contract {address} not verified or ABI not available")
        if not isinstance(result, str):
            return result
        try:
            return json.loads(result)
        except json.JSONDecodeError:
            logger.warning(f"ABI for {address} is not valid JSON, returning it as text")
            return result

    def get_source_code(self, address: str):
        """
        Fetches the verified source record of a contract.

        :param address: The contract address.
        :return: The first source record.
        :raises ValidationError: If the address is invalid.
        :raises NotFoundError: If the contract is not verified.
        """
        AddressValidator.validate_address(address)
        result = self._contract("getsourcecode", address=address)
        if not result or not result[0]:
            raise NotFoundError(f"Contract {address} not verified or source code not available")
        return result[0]

    def check_verify_status(self, guid: str):
        """Status of a source verification job."""
        require_present(guid, "GUID is required for checking verification status")
        return self._contract("checkverifystatus", guid=guid)

    def verify_proxy_contract(self, address: str, expected_implementation: Optional[str] = None):
        """
        Submits a proxy contract for verification.

        :param address: The proxy address.
        :param expected_implementation: Implementation the proxy should point to.
        :return: The verification job GUID.
        :raises ValidationError: If either address is invalid.
        """
        AddressValidator.validate_address(address)
        AddressValidator.validate_optional_address(expected_implementation, "implementation address")
        return self._contract("verifyproxycontract", address=address,
                              expectedimplementation=expected_implementation)

    def check_proxy_verification(self, guid: str):
        """Status of a proxy verification job."""
        require_present(guid, "GUID is required for checking proxy verification status")
        return self._contract("checkproxyverification", guid=guid)
