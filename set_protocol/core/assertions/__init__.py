from __future__ import annotations

from typing import TYPE_CHECKING

from set_protocol.core.assertions import common
from set_protocol.core.assertions.common import SetProtocolAssertionError
from set_protocol.core.assertions.erc20 import ERC20Assertions
from set_protocol.core.assertions.set_token import SetTokenAssertions

if TYPE_CHECKING:
    from set_protocol.api.contracts import ContractsAPI


class Assertions:
    def __init__(self, contracts: ContractsAPI):
        self.common = common
        self.erc20 = ERC20Assertions(contracts)
        self.set_token = SetTokenAssertions(self.erc20)


__all__ = [
    "Assertions",
    "ERC20Assertions",
    "SetProtocolAssertionError",
    "SetTokenAssertions",
]
