"""
test_contract.py

Tests for block, contract, transaction and decoding requests.
"""

import pytest

from confluxscan.errors import NotFoundError, ValidationError

CONTRACT = "0x1234567890123456789012345678901234567890"


class TestBlock:
    """Tests for get_block_number_by_time()"""

    def test_params_and_result(self, wrapper, respond, sent_params):
        respond("123456")

        assert wrapper.block.get_block_number_by_time(1677649200.7) == "123456"
        assert sent_params()["timestamp"] == "1677649200"
        assert sent_params()["closest"] == "before"
        assert sent_params()["module"] == "block"

    @pytest.mark.parametrize("timestamp", [-1, "1677649200", None])
    def test_invalid_timestamp(self, wrapper, mock_get, timestamp):
        with pytest.raises(ValidationError, match="Invalid timestamp"):
            wrapper.block.get_block_number_by_time(timestamp)
        mock_get.assert_not_called()

    def test_empty_result(self, wrapper, respond):
        respond("")
        with pytest.raises(NotFoundError, match="No block number found for timestamp: 1677649200"):
            wrapper.block.get_block_number_by_time(1677649200)


class TestContract:
    """Tests for ContractModule and ContractWrapper"""

    def test_abi_is_decoded(self, wrapper, respond):
        respond('[{"type": "function", "name": "transfer"}]')
        assert wrapper.contract.get_abi(CONTRACT) == [{"type": "function", "name": "transfer"}]

    def test_abi_not_verified(self, wrapper, respond):
        respond("")
        with pytest.raises(NotFoundError, match=f"Contract {CONTRACT} not verified or ABI not available"):
            wrapper.contract.get_abi(CONTRACT)

    def test_source_code_first_record(self, wrapper, respond):
        respond([{"ContractName": "Token", "Runs": "200000", "OptimizationUsed": "1"}])
        assert wrapper.contract.get_source_code(CONTRACT) == {
            "ContractName": "Token",
            "Runs": "200,000",
            "OptimizationUsed": "1",
        }

    def test_source_code_raw(self, wrapper, respond):
        respond([{"ContractName": "Token", "Runs": "200000"}])
        assert wrapper.contract.get_source_code(CONTRACT, return_raw=True)["Runs"] == "200000"

    def test_source_code_missing(self, wrapper, respond):
        respond([])
        with pytest.raises(NotFoundError):
            wrapper.contract.get_source_code(CONTRACT)

    def test_check_verify_status_requires_guid(self, wrapper, mock_get):
        with pytest.raises(ValidationError, match="GUID is required for checking verification status"):
            wrapper.contract.check_verify_status("")
        mock_get.assert_not_called()

    def test_verify_proxy_contract(self, wrapper, respond, sent_params):
        respond("guid-123")
        assert wrapper.contract.verify_proxy_contract(CONTRACT) == "guid-123"
        assert "expectedimplementation" not in sent_params()

    def test_verify_proxy_contract_bad_implementation(self, wrapper, mock_get):
        with pytest.raises(ValidationError, match="Invalid implementation address: 0x1"):
            wrapper.contract.verify_proxy_contract(CONTRACT, expected_implementation="0x1")

    def test_check_proxy_verification(self, wrapper, respond, sent_params):
        respond("Pass - Verified")
        assert wrapper.contract.check_proxy_verification("guid-123") == "Pass - Verified"
        assert sent_params()["action"] == "checkproxyverification"


class TestTransactionAndUtils:
    """Tests for status checks and method decoding"""

    def test_status(self, wrapper, respond, sent_params):
        respond({"isError": "0", "errDescription": ""})
        assert wrapper.transaction.get_status("0xhash") == {"isError": "0", "errDescription": ""}
        assert sent_params()["action"] == "getstatus"

    def test_receipt_status(self, wrapper, respond, sent_params):
        respond({"status": "1"})
        assert wrapper.transaction.get_receipt_status("0xhash") == {"status": "1"}
        assert sent_params()["action"] == "gettxreceiptstatus"

    def test_status_requires_hash(self, wrapper, mock_get):
        with pytest.raises(ValidationError, match="Transaction hash is required"):
            wrapper.transaction.get_status(None)

    def test_decode_method(self, wrapper, respond, mock_get):
        respond([{"hash": "0xhash", "decodedData": "transfer(address,uint256)"}])
        wrapper.utils.decode_method("0xhash")
        assert mock_get.call_args[0][0].endswith("/util/decode/method")

    def test_decode_method_raw(self, wrapper, respond, sent_params):
        respond([])
        wrapper.utils.decode_method_raw(CONTRACT, "0xa9059cbb")
        assert sent_params()["contracts"] == CONTRACT
        assert sent_params()["inputs"] == "0xa9059cbb"

    def test_decode_requires_strings(self, wrapper, mock_get):
        with pytest.raises(ValidationError, match="Invalid inputs"):
            wrapper.utils.decode_method_raw(CONTRACT, ["0xa9059cbb"])
        mock_get.assert_not_called()
