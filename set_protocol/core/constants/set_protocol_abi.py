from __future__ import annotations

from typing import Any

from set_protocol.core.constants.erc20_abi import ERC20_ABI

# Minimal ABIs for the Set Protocol contracts (Core, Vault, TransferProxy,
# SetTokenFactory, SetToken, WhiteList). Authorizable is shared by the
# vault, the transfer proxy and the factory.

AUTHORIZABLE_ABI: list[dict[str, Any]] = [
    {
        "type": "function",
        "name": "owner",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"type": "address"}],
    },
    {
        "type": "function",
        "name": "authorized",
        "stateMutability": "view",
        "inputs": [{"name": "", "type": "address"}],
        "outputs": [{"type": "bool"}],
    },
    {
        "type": "function",
        "name": "authorities",
        "stateMutability": "view",
        "inputs": [{"name": "", "type": "uint256"}],
        "outputs": [{"type": "address"}],
    },
    {
        "type": "function",
        "name": "getAuthorizedAddresses",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"type": "address[]"}],
    },
    {
        "type": "function",
        "name": "addAuthorizedAddress",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "_authTarget", "type": "address"}],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "removeAuthorizedAddress",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "_authTarget", "type": "address"}],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "removeAuthorizedAddressAtIndex",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "_authTarget", "type": "address"},
            {"name": "_index", "type": "uint256"},
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "transferOwnership",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "_newOwner", "type": "address"}],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "renounceOwnership",
        "stateMutability": "nonpayable",
        "inputs": [],
        "outputs": [],
    },
]

SET_TOKEN_FACTORY_ABI: list[dict[str, Any]] = [
    {"type": "constructor", "stateMutability": "nonpayable", "inputs": []},
    *AUTHORIZABLE_ABI,
    {
        "type": "function",
        "name": "core",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"type": "address"}],
    },
    {
        "type": "function",
        "name": "setCoreAddress",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "_coreAddress", "type": "address"}],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "create",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "_components", "type": "address[]"},
            {"name": "_units", "type": "uint256[]"},
            {"name": "_naturalUnit", "type": "uint256"},
            {"name": "_name", "type": "string"},
            {"name": "_symbol", "type": "string"},
        ],
        "outputs": [{"type": "address"}],
    },
]

VAULT_ABI: list[dict[str, Any]] = [
    {"type": "constructor", "stateMutability": "nonpayable", "inputs": []},
    *AUTHORIZABLE_ABI,
    {
        "type": "function",
        "name": "getOwnerBalance",
        "stateMutability": "view",
        "inputs": [
            {"name": "_tokenAddress", "type": "address"},
            {"name": "_owner", "type": "address"},
        ],
        "outputs": [{"type": "uint256"}],
    },
    {
        "type": "function",
        "name": "withdrawTo",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "_tokenAddress", "type": "address"},
            {"name": "_to", "type": "address"},
            {"name": "_quantity", "type": "uint256"},
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "incrementTokenOwner",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "_tokenAddress", "type": "address"},
            {"name": "_owner", "type": "address"},
            {"name": "_quantity", "type": "uint256"},
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "decrementTokenOwner",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "_tokenAddress", "type": "address"},
            {"name": "_owner", "type": "address"},
            {"name": "_quantity", "type": "uint256"},
        ],
        "outputs": [],
    },
]

TRANSFER_PROXY_ABI: list[dict[str, Any]] = [
    {"type": "constructor", "stateMutability": "nonpayable", "inputs": []},
    *AUTHORIZABLE_ABI,
    {
        "type": "function",
        "name": "transfer",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "_tokenAddress", "type": "address"},
            {"name": "_quantity", "type": "uint256"},
            {"name": "_from", "type": "address"},
            {"name": "_to", "type": "address"},
        ],
        "outputs": [],
    },
]

CORE_ABI: list[dict[str, Any]] = [
    {"type": "constructor", "stateMutability": "nonpayable", "inputs": []},
    {
        "type": "function",
        "name": "owner",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"type": "address"}],
    },
    {
        "type": "function",
        "name": "vaultAddress",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"type": "address"}],
    },
    {
        "type": "function",
        "name": "transferProxyAddress",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"type": "address"}],
    },
    {
        "type": "function",
        "name": "validFactories",
        "stateMutability": "view",
        "inputs": [{"name": "", "type": "address"}],
        "outputs": [{"type": "bool"}],
    },
    {
        "type": "function",
        "name": "validSets",
        "stateMutability": "view",
        "inputs": [{"name": "", "type": "address"}],
        "outputs": [{"type": "bool"}],
    },
    {
        "type": "function",
        "name": "setVaultAddress",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "_vaultAddress", "type": "address"}],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "setTransferProxyAddress",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "_transferProxyAddress", "type": "address"}],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "enableFactory",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "_factoryAddress", "type": "address"}],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "disableFactory",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "_factoryAddress", "type": "address"}],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "create",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "_factoryAddress", "type": "address"},
            {"name": "_components", "type": "address[]"},
            {"name": "_units", "type": "uint256[]"},
            {"name": "_naturalUnit", "type": "uint256"},
            {"name": "_name", "type": "string"},
            {"name": "_symbol", "type": "string"},
        ],
        "outputs": [{"type": "address"}],
    },
    {
        "type": "function",
        "name": "issue",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "_setAddress", "type": "address"},
            {"name": "_quantity", "type": "uint256"},
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "redeem",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "_setAddress", "type": "address"},
            {"name": "_quantity", "type": "uint256"},
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "deposit",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "_tokenAddress", "type": "address"},
            {"name": "_quantity", "type": "uint256"},
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "withdraw",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "_tokenAddress", "type": "address"},
            {"name": "_quantity", "type": "uint256"},
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "batchDeposit",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "_tokenAddresses", "type": "address[]"},
            {"name": "_quantities", "type": "uint256[]"},
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "batchWithdraw",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "_tokenAddresses", "type": "address[]"},
            {"name": "_quantities", "type": "uint256[]"},
        ],
        "outputs": [],
    },
]

SET_TOKEN_ABI: list[dict[str, Any]] = [
    *ERC20_ABI,
    {
        "type": "function",
        "name": "naturalUnit",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"type": "uint256"}],
    },
    {
        "type": "function",
        "name": "getComponents",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"type": "address[]"}],
    },
    {
        "type": "function",
        "name": "getUnits",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"type": "uint256[]"}],
    },
    {
        "type": "function",
        "name": "issue",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "_quantity", "type": "uint256"}],
        "outputs": [{"type": "bool"}],
    },
    {
        "type": "function",
        "name": "redeem",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "_quantity", "type": "uint256"}],
        "outputs": [{"type": "bool"}],
    },
]

WHITELIST_ABI: list[dict[str, Any]] = [
    {
        "type": "constructor",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "_initialAddresses", "type": "address[]"}],
    },
    {
        "type": "function",
        "name": "owner",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"type": "address"}],
    },
    {
        "type": "function",
        "name": "whiteList",
        "stateMutability": "view",
        "inputs": [{"name": "", "type": "address"}],
        "outputs": [{"type": "bool"}],
    },
    {
        "type": "function",
        "name": "validAddresses",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"type": "address[]"}],
    },
    {
        "type": "function",
        "name": "addAddress",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "_address", "type": "address"}],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "removeAddress",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "_address", "type": "address"}],
        "outputs": [],
    },
]
