"""
dates.py

Epoch-second timestamps rendered as UTC calendar text.

A timestamp that cannot be read as a whole number of seconds renders as "N/A"
instead of raising, so one bad field never sinks an otherwise valid response.
"""

import math
import numbers
import re
import time
from typing import Any, Optional

import pandas as pd

from confluxscan.utils.logger import get_logger

logger = get_logger(__name__)

NOT_AVAILABLE = "N/A"
FULL_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"

_STYLES = ("full", "date", "unix")
_SECONDS = re.compile(r"^[+-]?[0-9]+$")


def to_epoch_seconds(value: Any) -> Optional[int]:
    """
    Reads a value as whole epoch seconds.

    :param value: An int, an integral float, or a digit string.
    :return: The seconds, or None when the value is not a whole number.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        value = float(value)
        if not math.isfinite(value) or not value.is_integer():
            return None
        return int(value)
    if isinstance(value, str) and _SECONDS.match(value.strip()):
        return int(value.strip())
    return None


def format_date(value: Any, style: str = "full") -> str:
    """
    Formats an epoch timestamp in UTC.

    :param value: Epoch seconds as a number or numeric string.
    :param style: 'full' (YYYY-MM-DD HH:MM:SS), 'date' (YYYY-MM-DD) or 'unix' (seconds).
    :return: The formatted timestamp, or "N/A" if the value is not a valid timestamp.
    :raises ValueError: If the style is unknown.
    """
    if style not in _STYLES:
        raise ValueError(f"Unknown date style: {style}")

    seconds = to_epoch_seconds(value)
    if seconds is None:
        logger.warning(f"Cannot format timestamp: {value!r}")
        return NOT_AVAILABLE

    try:
        moment = pd.to_datetime(seconds, unit="s", utc=True)
    except (OverflowError, ValueError) as e:
        logger.warning(f"Timestamp out of range: {value!r} ({e})")
        return NOT_AVAILABLE

    if style == "unix":
        return str(seconds)
    return moment.strftime(FULL_FORMAT if style == "full" else DATE_FORMAT)


def format_timestamp(value: Any) -> str:
    """Epoch seconds as ``YYYY-MM-DD HH:MM:SS`` in UTC, or "N/A"."""
    return format_date(value, "full")


def format_date_only(value: Any) -> str:
    """Epoch seconds as ``YYYY-MM-DD`` in UTC, or "N/A"."""
    return format_date(value, "date")


def get_current_timestamp() -> int:
    """Current time in epoch seconds."""
    return int(time.time())


def get_time_ago(days: int) -> int:
    """Epoch seconds ``days`` days before now."""
    return get_current_timestamp() - days * 24 * 60 * 60


def get_24_hours_ago() -> int:
    return get_time_ago(1)
