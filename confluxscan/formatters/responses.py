"""
responses.py

Declarative field maps that turn a raw scanner result into its display form.

A FieldMap names, per field, the formatter applied to it. One generic routine
walks records, lists, nested objects and scalar results, so each endpoint only
declares which fields carry amounts or timestamps.

Formatters receive ``(value, record, root)``: the field's value, the record that
holds it, and the whole result. Most only look at the value; token amounts read
their decimals from the record or from a lookup table elsewhere in the result.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from confluxscan.formatters.dates import format_date_only, format_timestamp
from confluxscan.formatters.numbers import (
    NATIVE_DECIMALS,
    format_gas_amount,
    format_native_currency,
    format_token_amount,
    group_number,
)

Formatter = Callable[[Any, Any, Any], Any]


def plain(func: Callable[[Any], Any]) -> Formatter:
    """Adapts a one-argument formatter to the field map signature."""

    def formatter(value, record, root):
        return func(value)

    formatter.__name__ = getattr(func, "__name__", "formatter")
    return formatter


TIMESTAMP = plain(format_timestamp)
DATE = plain(format_date_only)
NATIVE = plain(format_native_currency)
GAS = plain(format_gas_amount)
NUMBER = plain(group_number)


def _decimals(candidate: Any) -> Optional[int]:
    if candidate is None or candidate == "" or isinstance(candidate, bool):
        return None
    try:
        return int(candidate)
    except (TypeError, ValueError):
        return None


def _lookup(data: Any, *path: Any) -> Any:
    for key in path:
        if not isinstance(data, Mapping):
            return None
        data = data.get(key)
    return data


def token_amount(decimals_field: str, default: Optional[int] = None) -> Formatter:
    """
    Scales an amount by the decimals found on the same record.

    :param decimals_field: Record field holding the token's decimals.
    :param default: Decimals used when the record has none; None leaves the value as is.
    """

    def formatter(value, record, root):
        decimals = _decimals(record.get(decimals_field)) if isinstance(record, Mapping) else None
        if decimals is None:
            decimals = default
        if decimals is None:
            return value
        return format_token_amount(value, decimals)

    return formatter


def token_amount_from_address_info(contract_field: str = "contract",
                                   default: int = NATIVE_DECIMALS) -> Formatter:
    """
    Scales an amount by the decimals in the result's ``addressInfo`` table.

    Transfer listings carry token metadata once per contract under
    ``root["addressInfo"][contract]["token"]["decimals"]``.
    """

    def formatter(value, record, root):
        token = _lookup(root, "addressInfo", record.get(contract_field), "token")
        decimals = _decimals(token.get("decimals")) if isinstance(token, Mapping) else None
        return format_token_amount(value, default if decimals is None else decimals)

    return formatter


@dataclass(frozen=True)
class FieldMap:
    """
    Formatting plan for one result shape.

    Attributes:
        fields: Formatter per record field; applied only to truthy values.
        children: Nested plan per field holding an object or a list of objects.
        value: Formatter for a scalar result; applied unless it is None or "".
        pair: Formatter for the second element of ``[key, value]`` list items.
    """

    fields: Mapping[str, Formatter] = field(default_factory=dict)
    children: Mapping[str, "FieldMap"] = field(default_factory=dict)
    value: Optional[Formatter] = None
    pair: Optional[Formatter] = None

    def apply(self, data: Any, root: Any = None) -> Any:
        """
        Returns a formatted copy of ``data``; the input is never modified.

        :param data: A record, a list of records, or a scalar.
        :param root: The complete result; defaults to ``data``.
        """
        root = data if root is None else root
        if isinstance(data, list):
            return [self._apply_item(item, root) for item in data]
        return self._apply_item(data, root)

    def _apply_item(self, item: Any, root: Any) -> Any:
        if isinstance(item, Mapping):
            formatted = dict(item)
            for name, formatter in self.fields.items():
                if formatted.get(name):
                    formatted[name] = formatter(formatted[name], item, root)
            for name, child in self.children.items():
                if formatted.get(name):
                    formatted[name] = child.apply(formatted[name], root)
            return formatted
        if isinstance(item, (list, tuple)):
            if self.pair is not None and len(item) == 2 and item[1]:
                return [item[0], self.pair(item[1], item, root)]
            return list(item)
        if self.value is not None and item is not None and item != "":
            return self.value(item, None, root)
        return item


def scalar(formatter: Formatter) -> FieldMap:
    """Plan for a result that is a single value."""
    return FieldMap(value=formatter)


def paged(item_fields: Optional[Mapping[str, Formatter]] = None,
          **fields: Formatter) -> FieldMap:
    """
    Plan for ``{total, list: [...]}`` statistics payloads.

    ``total`` is grouped and ``list[].statTime`` is rendered as a timestamp;
    ``item_fields`` adds per-item formatters and keyword arguments add top-level ones.
    """
    list_fields = {"statTime": TIMESTAMP}
    list_fields.update(item_fields or {})
    top_fields = {"total": NUMBER}
    top_fields.update(fields)
    return FieldMap(fields=top_fields, children={"list": FieldMap(fields=list_fields)})


PASSTHROUGH = FieldMap()
