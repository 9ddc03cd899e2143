from set_protocol.api.contracts import ContractsAPI
from set_protocol.api.core import CoreAPI
from set_protocol.api.set_token import SetTokenAPI

__all__ = ["ContractsAPI", "CoreAPI", "SetTokenAPI"]
