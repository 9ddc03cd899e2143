from set_protocol.core.constants.set_protocol_abi import CORE_ABI
from set_protocol.core.contracts.base import BaseContract, ContractMethod, ContractView


class CoreContract(BaseContract):
    contract_name = "Core"
    abi = CORE_ABI

    owner = ContractView("owner")
    vault_address = ContractView("vaultAddress")
    transfer_proxy_address = ContractView("transferProxyAddress")
    valid_factories = ContractView("validFactories")
    valid_sets = ContractView("validSets")

    set_vault_address = ContractMethod("setVaultAddress")
    set_transfer_proxy_address = ContractMethod("setTransferProxyAddress")
    enable_factory = ContractMethod("enableFactory")
    disable_factory = ContractMethod("disableFactory")
    create = ContractMethod("create")
    issue = ContractMethod("issue")
    redeem = ContractMethod("redeem")
    deposit = ContractMethod("deposit")
    withdraw = ContractMethod("withdraw")
    batch_deposit = ContractMethod("batchDeposit")
    batch_withdraw = ContractMethod("batchWithdraw")
