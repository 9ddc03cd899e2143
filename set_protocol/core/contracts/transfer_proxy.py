from set_protocol.core.constants.set_protocol_abi import TRANSFER_PROXY_ABI
from set_protocol.core.contracts.authorizable import AuthorizableContract
from set_protocol.core.contracts.base import ContractMethod


class TransferProxyContract(AuthorizableContract):
    contract_name = "TransferProxy"
    abi = TRANSFER_PROXY_ABI

    transfer = ContractMethod("transfer")
