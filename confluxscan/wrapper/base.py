"""
base.py

Shared plumbing for the dual-mode wrapper modules.

Every wrapper method takes the arguments of its raw counterpart plus
``return_raw``. In raw mode the transport's result is returned untouched;
otherwise it is passed through the endpoint's field map.
"""

from typing import Any

from confluxscan.formatters.responses import FieldMap


class BaseWrapper:
    """
    Wraps one raw API module and formats its results on request.
    """

    def __init__(self, module):
        """
        :param module: The raw module whose methods are wrapped.
        """
        self.raw = module

    @staticmethod
    def _present(data: Any, field_map: FieldMap, return_raw: bool = False) -> Any:
        if return_raw:
            return data
        return field_map.apply(data)
