from set_protocol.core.constants.set_protocol_abi import SET_TOKEN_ABI
from set_protocol.core.contracts.base import ContractMethod, ContractView
from set_protocol.core.contracts.erc20 import ERC20Contract


class SetTokenContract(ERC20Contract):
    contract_name = "SetToken"
    abi = SET_TOKEN_ABI

    natural_unit = ContractView("naturalUnit")
    get_components = ContractView("getComponents")
    get_units = ContractView("getUnits")

    issue = ContractMethod("issue")
    redeem = ContractMethod("redeem")
