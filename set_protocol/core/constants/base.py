ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
NULL_BYTECODE = "0x"

DEFAULT_RPC_URL = "http://localhost:8545"

DEFAULT_GAS_LIMIT = 6_712_390
DEFAULT_GAS_PRICE = 6_000_000_000  # 6 gwei

MAX_UINT256 = 2**256 - 1
UNLIMITED_ALLOWANCE_IN_BASE_UNITS = MAX_UINT256

# Timeout constants (seconds)
# Only deployment waits for a receipt; issue/redeem return the hash immediately.
DEFAULT_DEPLOY_TIMEOUT = 120
DEFAULT_RECEIPT_POLL_INTERVAL = 0.1
