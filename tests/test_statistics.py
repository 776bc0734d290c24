"""
test_statistics.py

Tests for network statistics requests and their formatted results.
"""

import pytest

from confluxscan.errors import ValidationError

CONTRACT = "0x1234567890123456789012345678901234567890"
STAT_TIME = "1677649200"
STAT_TIME_TEXT = "2023-03-01 05:40:00"


class TestStatisticsRequests:
    """Tests for the parameters StatisticsModule sends"""

    def test_series_params(self, wrapper, respond, mock_get, sent_params):
        respond({"total": 0, "list": []})
        wrapper.statistics.get_tps(interval_type="hour", min_timestamp=1, limit=5)
        assert mock_get.call_args[0][0].endswith("/statistics/tps")
        assert sent_params() == {"intervalType": "hour", "minTimestamp": "1", "limit": "5", "apiKey": "test-key"}

    def test_top_params(self, wrapper, respond, mock_get, sent_params):
        respond({"list": []})
        wrapper.statistics.get_top_cfx_sender("7d")
        assert mock_get.call_args[0][0].endswith("/statistics/top/cfx/sender")
        assert sent_params()["spanType"] == "7d"

    def test_token_series_validates_contract(self, wrapper, mock_get):
        with pytest.raises(ValidationError, match="Invalid contract address: 0xabc"):
            wrapper.statistics.get_token_holder("0xabc")
        mock_get.assert_not_called()

    def test_token_series_sends_contract(self, wrapper, respond, sent_params):
        respond({"total": 0, "list": []})
        wrapper.statistics.get_token_unique_sender(CONTRACT)
        assert sent_params()["contract"] == CONTRACT


class TestStatisticsFormatting:
    """Tests for StatisticsWrapper results"""

    def test_supply(self, wrapper, respond):
        respond({
            "totalIssued": "5000000000000000000000000000",
            "totalCirculating": "1000000000000000000",
            "nullAddressBalance": "0",
            "lastUpdate": "1677649200",
        })
        assert wrapper.statistics.get_supply() == {
            "totalIssued": "5,000,000,000 CFX",
            "totalCirculating": "1 CFX",
            "nullAddressBalance": "0 CFX",
            "lastUpdate": "1677649200",
        }

    def test_tps_values_pass_through(self, wrapper, respond):
        respond({"total": "2", "list": [{"statTime": STAT_TIME, "tps": "50.5"}]})
        assert wrapper.statistics.get_tps() == {"total": "2", "list": [{"statTime": STAT_TIME_TEXT, "tps": "50.5"}]}

    def test_contract(self, wrapper, respond):
        respond({"total": "1", "list": [{"statTime": STAT_TIME, "count": "1000", "total": "1000000"}]})
        assert wrapper.statistics.get_contract()["list"][0] == {
            "statTime": STAT_TIME_TEXT,
            "count": "1,000",
            "total": "1,000,000",
        }

    @pytest.mark.parametrize("method", [
        "get_cfx_holder",
        "get_account_growth",
        "get_account_active",
        "get_account_active_overall",
        "get_transaction",
    ])
    def test_count_series(self, wrapper, respond, method):
        respond({"total": "1200", "list": [{"statTime": STAT_TIME, "count": "12345"}]})
        assert getattr(wrapper.statistics, method)() == {
            "total": "1,200",
            "list": [{"statTime": STAT_TIME_TEXT, "count": "12,345"}],
        }

    def test_cfx_transfer(self, wrapper, respond):
        respond({"total": "1", "list": [{
            "statTime": STAT_TIME,
            "transferCount": "1000",
            "userCount": "500",
            "amount": "1000000000000000000000",
        }]})
        assert wrapper.statistics.get_cfx_transfer()["list"][0] == {
            "statTime": STAT_TIME_TEXT,
            "transferCount": "1,000",
            "userCount": "500",
            "amount": "1,000 CFX",
        }

    def test_top_gas_used(self, wrapper, respond):
        respond({"gasTotal": "1000000000000000", "list": [{"address": CONTRACT, "gas": "500000000000000"}]})
        assert wrapper.statistics.get_top_gas_used("24h") == {
            "gasTotal": "1,000,000 Gdrip",
            "list": [{"address": CONTRACT, "gas": "500,000 Gdrip"}],
        }

    def test_top_miner(self, wrapper, respond):
        respond({"maxTime": STAT_TIME, "list": [{
            "address": CONTRACT,
            "blockCntr": "1234",
            "rewardSum": "2000000000000000000",
            "txFeeSum": "1000000000000000",
            "hashRate": "1000000",
        }]})
        result = wrapper.statistics.get_top_miner()
        assert result["maxTime"] == STAT_TIME_TEXT
        assert result["list"][0] == {
            "address": CONTRACT,
            "blockCntr": "1,234",
            "rewardSum": "2 CFX",
            "txFeeSum": "0.001 CFX",
            "hashRate": "1,000,000",
        }

    def test_top_cfx_sender(self, wrapper, respond):
        respond({
            "maxTime": STAT_TIME,
            "valueTotal": "3000000000000000000",
            "list": [{"address": CONTRACT, "value": "3000000000000000000"}],
        })
        assert wrapper.statistics.get_top_cfx_sender() == {
            "maxTime": STAT_TIME_TEXT,
            "valueTotal": "3 CFX",
            "list": [{"address": CONTRACT, "value": "3 CFX"}],
        }

    def test_top_transaction_receiver(self, wrapper, respond):
        respond({"maxTime": STAT_TIME, "valueTotal": "4321", "list": [{"value": "4321"}]})
        assert wrapper.statistics.get_top_transaction_receiver() == {
            "maxTime": STAT_TIME_TEXT,
            "valueTotal": "4,321",
            "list": [{"value": "4,321"}],
        }

    def test_top_token_participant_keeps_full_time(self, wrapper, respond):
        respond({"maxTime": STAT_TIME, "list": [{"value": "1000", "transferCntr": "2000"}]})
        result = wrapper.statistics.get_top_token_participant()
        assert result["maxTime"] == STAT_TIME_TEXT
        assert result["list"] == [{"value": "1,000", "transferCntr": "2,000"}]

    def test_unique_participant(self, wrapper, respond):
        respond({"total": "1", "list": [{"statTime": STAT_TIME, "uniqueParticipantCount": "7000"}]})
        result = wrapper.statistics.get_token_unique_participant(CONTRACT)
        assert result["list"][0]["uniqueParticipantCount"] == "7,000"

    def test_block_base_fee(self, wrapper, respond):
        respond({"total": "1", "list": [{"blockNumber": "1", "timestamp": STAT_TIME, "baseFee": "1000000000"}]})
        assert wrapper.statistics.get_block_base_fee()["list"][0] == {
            "blockNumber": "1",
            "timestamp": STAT_TIME_TEXT,
            "baseFee": "1 Gdrip",
        }

    def test_block_gas_used_and_txs_by_type(self, wrapper, respond):
        respond({"list": [{"timestamp": STAT_TIME, "gasUsed": "15000000"}]})
        assert wrapper.statistics.get_block_gas_used()["list"][0]["gasUsed"] == "15,000,000"

        txs_in_type = {"legacy": 3, "eip1559": 4}
        respond({"list": [{"timestamp": STAT_TIME, "txsInType": txs_in_type}]})
        assert wrapper.statistics.get_block_txs_by_type()["list"][0] == {
            "timestamp": STAT_TIME_TEXT,
            "txsInType": txs_in_type,
        }

    def test_mining_keeps_unmapped_fields(self, wrapper, respond):
        respond({"list": [{"statTime": STAT_TIME, "blockTime": "0.5", "difficulty": "123456"}]})
        assert wrapper.statistics.get_mining()["list"][0] == {
            "statTime": STAT_TIME_TEXT,
            "blockTime": "0.5",
            "difficulty": "123,456",
        }
