from set_protocol.core.constants.set_protocol_abi import AUTHORIZABLE_ABI
from set_protocol.core.contracts.base import BaseContract, ContractMethod, ContractView


class AuthorizableContract(BaseContract):
    contract_name = "Authorizable"
    abi = AUTHORIZABLE_ABI

    owner = ContractView("owner")
    authorized = ContractView("authorized")
    authorities = ContractView("authorities")
    get_authorized_addresses = ContractView("getAuthorizedAddresses")

    add_authorized_address = ContractMethod("addAuthorizedAddress")
    remove_authorized_address = ContractMethod("removeAuthorizedAddress")
    remove_authorized_address_at_index = ContractMethod("removeAuthorizedAddressAtIndex")
    transfer_ownership = ContractMethod("transferOwnership")
    renounce_ownership = ContractMethod("renounceOwnership")
