from set_protocol.core.contracts.authorizable import AuthorizableContract
from set_protocol.core.contracts.base import (
    BaseContract,
    ContractDeploymentError,
    ContractMethod,
    ContractNotFoundError,
    ContractView,
)
from set_protocol.core.contracts.core import CoreContract
from set_protocol.core.contracts.erc20 import ERC20Contract, StandardTokenMockContract
from set_protocol.core.contracts.set_token import SetTokenContract
from set_protocol.core.contracts.set_token_factory import SetTokenFactoryContract
from set_protocol.core.contracts.transfer_proxy import TransferProxyContract
from set_protocol.core.contracts.vault import VaultContract
from set_protocol.core.contracts.whitelist import WhitelistContract

__all__ = [
    "AuthorizableContract",
    "BaseContract",
    "ContractDeploymentError",
    "ContractMethod",
    "ContractNotFoundError",
    "ContractView",
    "CoreContract",
    "ERC20Contract",
    "SetTokenContract",
    "SetTokenFactoryContract",
    "StandardTokenMockContract",
    "TransferProxyContract",
    "VaultContract",
    "WhitelistContract",
]
