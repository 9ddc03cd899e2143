__version__ = "0.1.0"

from set_protocol.client import SetProtocol
from set_protocol.core import (
    ContractDeploymentError,
    ContractNotFoundError,
    SetProtocolConfig,
    TxData,
)
from set_protocol.core.assertions import SetProtocolAssertionError

__all__ = [
    "__version__",
    "ContractDeploymentError",
    "ContractNotFoundError",
    "SetProtocol",
    "SetProtocolAssertionError",
    "SetProtocolConfig",
    "TxData",
]
