"""
block.py

Block lookups under ``/api?module=block``.
"""

from confluxscan.api.base import ApiModule
from confluxscan.errors import NotFoundError
from confluxscan.utils.logger import get_logger
from confluxscan.utils.validation import require_non_negative

logger = get_logger(__name__)


class BlockModule(ApiModule):

    def get_block_number_by_time(self, timestamp, closest: str = "before"):
        """
        Finds the block closest to a timestamp.

        :param timestamp: Epoch seconds; fractional values are floored.
        :param closest: 'before' or 'after'.
        :return: The block number as returned by the API.
        :raises ValidationError: If the timestamp is not a non-negative number.
        :raises NotFoundError: If no block matches.
        """
        seconds = require_non_negative(timestamp, "timestamp")
        result = self._get("/api", {
            "module": "block",
            "action": "getblocknobytime",
            "timestamp": seconds,
            "closest": closest,
        })
        if not result:
            logger.error(f"No block number found for timestamp {timestamp}")
            raise NotFoundError(f"No block number found for timestamp: {timestamp}")
        return result
