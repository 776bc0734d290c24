"""
validation.py

Address and parameter checks run before a request is built.

Addresses are 0x-prefixed, 20-byte hex strings. Mixed-case input must carry a
valid EIP-55 checksum; all-lowercase and all-uppercase input is accepted as is.
"""

import math
from typing import Any, Iterable, Optional

from eth_utils import is_address, is_checksum_address, is_checksum_formatted_address

from confluxscan.errors import ValidationError
from confluxscan.utils.logger import get_logger

logger = get_logger(__name__)


def is_valid_address(value: Any) -> bool:
    """
    Checks whether a value is a well-formed address.

    :param value: Candidate address.
    :return: True if the value is a 0x-prefixed address with a valid checksum.
    """
    if not (isinstance(value, str) and value[:2] in ("0x", "0X") and is_address(value)):
        return False
    # Mixed case is a checksum claim
    if is_checksum_formatted_address(value):
        return is_checksum_address(value)
    return True


def is_valid_address_list(values: Iterable[Any]) -> bool:
    """
    Checks that every element of a collection is a valid address.

    An empty collection is rejected since no request can be built from it.

    :param values: Candidate addresses.
    :return: True if the collection is non-empty and every element validates.
    """
    if isinstance(values, str):
        return False
    values = list(values)
    return bool(values) and all(is_valid_address(value) for value in values)


class AddressValidator:
    """
    Raising counterparts of the predicates above, used by the API modules.
    """

    @staticmethod
    def validate_address(value: Any, label: str = "address") -> str:
        """
        Returns the address unchanged or raises.

        :param value: Candidate address.
        :param label: Field name used in the error message.
        :return: The validated address.
        :raises ValidationError: If the address is malformed.
        """
        if not is_valid_address(value):
            logger.error(f"Invalid {label} provided: {value}")
            raise ValidationError(f"Invalid {label}: {value}")
        return value

    @staticmethod
    def validate_optional_address(value: Optional[str], label: str = "address") -> Optional[str]:
        """Validates an address only when one is given."""
        if value is None:
            return None
        return AddressValidator.validate_address(value, label)

    @staticmethod
    def validate_addresses(values: Iterable[Any]) -> list:
        """
        Validates a collection of addresses.

        :param values: Candidate addresses.
        :return: The addresses as a list.
        :raises ValidationError: If the collection is empty or any address is malformed.
        """
        if isinstance(values, str):
            values = [part.strip() for part in values.split(",")]
        values = list(values)
        if not is_valid_address_list(values):
            logger.error(f"Invalid addresses provided: {values}")
            raise ValidationError("Invalid addresses provided")
        return values


def require_text(value: Any, label: str) -> str:
    """
    Ensures a parameter is a string.

    :raises ValidationError: If the value is not a string.
    """
    if not isinstance(value, str):
        logger.error(f"Invalid {label} provided: {value!r}")
        raise ValidationError(f"Invalid {label}: {value}")
    return value


def require_present(value: Any, message: str) -> Any:
    """
    Ensures a required parameter is non-empty.

    :raises ValidationError: With the given message if the value is empty.
    """
    if not value:
        logger.error(message)
        raise ValidationError(message)
    return value


def require_non_negative(value: Any, label: str) -> int:
    """
    Ensures a parameter is a non-negative number and floors it to an int.

    :raises ValidationError: If the value is not a finite, non-negative number.
    """
    valid = (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
        and value >= 0
    )
    if not valid:
        logger.error(f"Invalid {label} provided: {value!r}")
        raise ValidationError(f"Invalid {label}: {value}")
    return math.floor(value)
