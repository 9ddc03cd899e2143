from set_protocol.core.constants.set_protocol_abi import SET_TOKEN_FACTORY_ABI
from set_protocol.core.contracts.authorizable import AuthorizableContract
from set_protocol.core.contracts.base import ContractMethod, ContractView


class SetTokenFactoryContract(AuthorizableContract):
    contract_name = "SetTokenFactory"
    abi = SET_TOKEN_FACTORY_ABI

    core = ContractView("core")

    set_core_address = ContractMethod("setCoreAddress")
    create = ContractMethod("create")
