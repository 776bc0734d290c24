"""
test_responses.py

Tests for the field map engine that formats raw results.
"""

import copy

from confluxscan.formatters.responses import (
    GAS,
    NATIVE,
    NUMBER,
    PASSTHROUGH,
    TIMESTAMP,
    FieldMap,
    paged,
    scalar,
    token_amount,
    token_amount_from_address_info,
)


class TestFieldMapRecords:
    """Tests for formatting records and lists of records"""

    def test_formats_mapped_fields(self):
        field_map = FieldMap(fields={"value": NATIVE, "gasPrice": GAS, "timeStamp": TIMESTAMP})
        record = {
            "hash": "0xabc",
            "value": "1000000000000000000",
            "gasPrice": "20000000000",
            "timeStamp": "1677649200",
        }

        assert field_map.apply(record) == {
            "hash": "0xabc",
            "value": "1 CFX",
            "gasPrice": "20 Gdrip",
            "timeStamp": "2023-03-01 05:40:00",
        }

    def test_falsy_fields_pass_through(self):
        field_map = FieldMap(fields={"value": NATIVE, "gas": GAS, "timeStamp": TIMESTAMP})
        record = {"value": "", "gas": None, "timeStamp": 0}

        assert field_map.apply(record) == record

    def test_zero_string_is_formatted(self):
        field_map = FieldMap(fields={"value": NATIVE})
        assert field_map.apply({"value": "0"}) == {"value": "0 CFX"}

    def test_missing_fields_are_not_added(self):
        field_map = FieldMap(fields={"value": NATIVE, "gas": GAS})
        assert field_map.apply({"value": "0"}) == {"value": "0 CFX"}

    def test_lists_are_mapped_per_item(self):
        field_map = FieldMap(fields={"count": NUMBER})
        assert field_map.apply([{"count": "1000"}, {"count": "2000000"}]) == [
            {"count": "1,000"},
            {"count": "2,000,000"},
        ]

    def test_input_is_not_mutated(self):
        field_map = paged({"count": NUMBER})
        data = {"total": "1234", "list": [{"statTime": "1677649200", "count": "5000"}]}
        original = copy.deepcopy(data)

        formatted = field_map.apply(data)

        assert data == original
        assert formatted["list"][0] == {"statTime": "2023-03-01 05:40:00", "count": "5,000"}

    def test_malformed_timestamp_only_affects_its_field(self):
        field_map = FieldMap(fields={"maxTime": TIMESTAMP, "valueTotal": NUMBER})
        formatted = field_map.apply({"maxTime": "soon", "valueTotal": "12345"})
        assert formatted == {"maxTime": "N/A", "valueTotal": "12,345"}


class TestFieldMapNesting:
    """Tests for nested objects and list children"""

    def test_children(self):
        field_map = FieldMap(
            fields={"gasTotal": GAS},
            children={"list": FieldMap(fields={"gas": GAS})},
        )
        data = {"gasTotal": "1000000000000000", "list": [{"address": "0x1", "gas": "500000000000000"}]}

        assert field_map.apply(data) == {
            "gasTotal": "1,000,000 Gdrip",
            "list": [{"address": "0x1", "gas": "500,000 Gdrip"}],
        }

    def test_empty_child_list_passes_through(self):
        field_map = paged({"count": NUMBER})
        assert field_map.apply({"total": 0, "list": []}) == {"total": 0, "list": []}

    def test_paged_defaults(self):
        formatted = paged().apply({"total": "1500", "list": [{"statTime": 1677649200, "tps": "50.5"}]})
        assert formatted == {"total": "1,500", "list": [{"statTime": "2023-03-01 05:40:00", "tps": "50.5"}]}


class TestFieldMapScalars:
    """Tests for scalar results and key/value pairs"""

    def test_scalar(self):
        assert scalar(NATIVE).apply("2000000000000000000") == "2 CFX"

    def test_scalar_zero_is_formatted(self):
        assert scalar(NATIVE).apply("0") == "0 CFX"

    def test_scalar_empty_passes_through(self):
        assert scalar(NATIVE).apply(None) is None
        assert scalar(NATIVE).apply("") == ""

    def test_pairs(self):
        field_map = FieldMap(fields={"balance": NATIVE}, pair=NATIVE)
        data = [["0xabc", "1000000000000000000"], {"account": "0xdef", "balance": "0"}]

        assert field_map.apply(data) == [["0xabc", "1 CFX"], {"account": "0xdef", "balance": "0 CFX"}]

    def test_passthrough_returns_equal_copy(self):
        data = {"isError": "0", "errDescription": ""}
        assert PASSTHROUGH.apply(data) == data


class TestTokenAmounts:
    """Tests for token amount formatters that read decimals from the result"""

    def test_decimals_from_record(self):
        field_map = FieldMap(fields={"value": token_amount("tokenDecimal")})
        assert field_map.apply({"value": "1234567", "tokenDecimal": "6"}) == {
            "value": "1.234567",
            "tokenDecimal": "6",
        }

    def test_missing_decimals_leave_value(self):
        field_map = FieldMap(fields={"value": token_amount("tokenDecimal")})
        assert field_map.apply({"value": "1234567"}) == {"value": "1234567"}

    def test_default_decimals(self):
        field_map = FieldMap(fields={"amount": token_amount("decimals", default=18)})
        assert field_map.apply({"amount": "2500000000000000000"}) == {"amount": "2.5"}

    def test_decimals_from_address_info(self):
        field_map = FieldMap(children={
            "list": FieldMap(fields={"amount": token_amount_from_address_info("contract")}),
        })
        data = {
            "list": [
                {"contract": "0xusdt", "amount": "1500000"},
                {"contract": "0xother", "amount": "1000000000000000000"},
            ],
            "addressInfo": {"0xusdt": {"token": {"decimals": 6}}},
        }

        formatted = field_map.apply(data)

        assert formatted["list"] == [
            {"contract": "0xusdt", "amount": "1.5"},
            {"contract": "0xother", "amount": "1"},
        ]
        assert formatted["addressInfo"] == data["addressInfo"]
