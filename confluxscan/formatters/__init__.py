"""
Formatters Module

Pure functions that render raw amounts and timestamps, and the field maps that
apply them to scanner results.
"""

from confluxscan.formatters.numbers import (
    scale_amount,
    group_number,
    format_native_currency,
    format_gas_amount,
    format_token_amount,
)
from confluxscan.formatters.dates import (
    format_date,
    format_timestamp,
    format_date_only,
    get_current_timestamp,
    get_24_hours_ago,
    get_time_ago,
)
from confluxscan.formatters.responses import FieldMap

__all__ = [
    'scale_amount',
    'group_number',
    'format_native_currency',
    'format_gas_amount',
    'format_token_amount',
    'format_date',
    'format_timestamp',
    'format_date_only',
    'get_current_timestamp',
    'get_24_hours_ago',
    'get_time_ago',
    'FieldMap',
]
