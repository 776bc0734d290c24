"""
contract.py

Dual-mode contract metadata.
"""

from confluxscan.formatters.responses import NUMBER, PASSTHROUGH, FieldMap
from confluxscan.wrapper.base import BaseWrapper

SOURCE_CODE = FieldMap(fields={"Runs": NUMBER})


class ContractWrapper(BaseWrapper):

    def get_abi(self, *args, return_raw=False, **kwargs):
        """Formatted ``ContractModule.get_abi``."""
        return self._present(self.raw.get_abi(*args, **kwargs), PASSTHROUGH, return_raw)

    def get_source_code(self, *args, return_raw=False, **kwargs):
        """Formatted ``ContractModule.get_source_code``; the optimizer ``Runs`` count is grouped."""
        return self._present(self.raw.get_source_code(*args, **kwargs), SOURCE_CODE, return_raw)

    def check_verify_status(self, *args, return_raw=False, **kwargs):
        """Formatted ``ContractModule.check_verify_status``."""
        return self._present(self.raw.check_verify_status(*args, **kwargs), PASSTHROUGH, return_raw)

    def verify_proxy_contract(self, *args, return_raw=False, **kwargs):
        """Formatted ``ContractModule.verify_proxy_contract``."""
        return self._present(self.raw.verify_proxy_contract(*args, **kwargs), PASSTHROUGH, return_raw)

    def check_proxy_verification(self, *args, return_raw=False, **kwargs):
        """Formatted ``ContractModule.check_proxy_verification``."""
        return self._present(self.raw.check_proxy_verification(*args, **kwargs), PASSTHROUGH, return_raw)
