from set_protocol.core.constants.set_protocol_abi import VAULT_ABI
from set_protocol.core.contracts.authorizable import AuthorizableContract
from set_protocol.core.contracts.base import ContractMethod, ContractView


class VaultContract(AuthorizableContract):
    contract_name = "Vault"
    abi = VAULT_ABI

    get_owner_balance = ContractView("getOwnerBalance")

    withdraw_to = ContractMethod("withdrawTo")
    increment_token_owner = ContractMethod("incrementTokenOwner")
    decrement_token_owner = ContractMethod("decrementTokenOwner")
