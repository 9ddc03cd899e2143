from set_protocol.core.constants.base import (
    DEFAULT_GAS_LIMIT,
    DEFAULT_GAS_PRICE,
    MAX_UINT256,
    UNLIMITED_ALLOWANCE_IN_BASE_UNITS,
    ZERO_ADDRESS,
)

__all__ = [
    "DEFAULT_GAS_LIMIT",
    "DEFAULT_GAS_PRICE",
    "MAX_UINT256",
    "UNLIMITED_ALLOWANCE_IN_BASE_UNITS",
    "ZERO_ADDRESS",
]
