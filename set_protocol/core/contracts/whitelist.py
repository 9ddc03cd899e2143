from set_protocol.core.constants.set_protocol_abi import WHITELIST_ABI
from set_protocol.core.contracts.base import BaseContract, ContractMethod, ContractView


class WhitelistContract(BaseContract):
    contract_name = "WhiteList"
    abi = WHITELIST_ABI

    owner = ContractView("owner")
    whitelist = ContractView("whiteList")
    valid_addresses = ContractView("validAddresses")

    add_address = ContractMethod("addAddress")
    remove_address = ContractMethod("removeAddress")
