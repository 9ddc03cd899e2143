from set_protocol.core.contracts import ContractDeploymentError, ContractNotFoundError
from set_protocol.core.types import SetProtocolConfig, TxData

__all__ = [
    "ContractDeploymentError",
    "ContractNotFoundError",
    "SetProtocolConfig",
    "TxData",
]
