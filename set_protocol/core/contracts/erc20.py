from set_protocol.core.constants.erc20_abi import ERC20_ABI, STANDARD_TOKEN_MOCK_ABI
from set_protocol.core.contracts.base import BaseContract, ContractMethod, ContractView


class ERC20Contract(BaseContract):
    contract_name = "ERC20"
    abi = ERC20_ABI

    name = ContractView("name")
    symbol = ContractView("symbol")
    decimals = ContractView("decimals")
    total_supply = ContractView("totalSupply")
    balance_of = ContractView("balanceOf")
    allowance = ContractView("allowance")

    transfer = ContractMethod("transfer")
    transfer_from = ContractMethod("transferFrom")
    approve = ContractMethod("approve")


class StandardTokenMockContract(ERC20Contract):
    """ERC20 with a constructor minting the supply to one account (tests only)."""

    contract_name = "StandardTokenMock"
    abi = STANDARD_TOKEN_MOCK_ABI
