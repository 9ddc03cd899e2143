"""Deploy and wire a fresh Set Protocol instance on a development chain.

Bytecode comes from Truffle build artifacts (see ``set_protocol.core.artifacts``).
Every wiring transaction is waited on so that later steps see its effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

from loguru import logger
from web3 import AsyncWeb3

from set_protocol.api import ContractsAPI, CoreAPI
from set_protocol.core.artifacts import load_bytecode
from set_protocol.core.constants.base import UNLIMITED_ALLOWANCE_IN_BASE_UNITS
from set_protocol.core.contracts import (
    BaseContract,
    CoreContract,
    SetTokenFactoryContract,
    StandardTokenMockContract,
    TransferProxyContract,
    VaultContract,
    WhitelistContract,
)
from set_protocol.core.contracts.base import BoundContractMethod
from set_protocol.core.types import TxData
from set_protocol.core.utils.transaction import wait_for_transaction_receipt

C = TypeVar("C", bound=BaseContract)


@dataclass(frozen=True)
class ComponentSpec:
    supply: int
    name: str
    symbol: str
    decimals: int = 18


async def _send_and_wait(method: BoundContractMethod, *args: Any) -> str:
    txn_hash = await method.send_transaction(*args)
    receipt = await wait_for_transaction_receipt(method.contract.web3, txn_hash)
    if receipt.get("status") == 0:
        raise RuntimeError(f"{method.fn_name} reverted: {txn_hash}")
    return txn_hash


async def _deploy(
    wrapper_cls: type[C],
    web3: AsyncWeb3,
    tx_defaults: TxData,
    *constructor_args: Any,
    artifacts_dir: str | Path | None = None,
) -> C:
    bytecode = load_bytecode(wrapper_cls.contract_name, artifacts_dir)
    return await wrapper_cls.deploy(
        web3, bytecode, *constructor_args, defaults=tx_defaults
    )


async def deploy_core(
    web3: AsyncWeb3, tx_defaults: TxData, *, artifacts_dir: str | Path | None = None
) -> CoreContract:
    return await _deploy(CoreContract, web3, tx_defaults, artifacts_dir=artifacts_dir)


async def deploy_transfer_proxy(
    core_address: str,
    web3: AsyncWeb3,
    tx_defaults: TxData,
    *,
    artifacts_dir: str | Path | None = None,
) -> TransferProxyContract:
    transfer_proxy = await _deploy(
        TransferProxyContract, web3, tx_defaults, artifacts_dir=artifacts_dir
    )
    await _send_and_wait(transfer_proxy.add_authorized_address, core_address)
    return transfer_proxy


async def deploy_vault(
    core_address: str,
    web3: AsyncWeb3,
    tx_defaults: TxData,
    *,
    artifacts_dir: str | Path | None = None,
) -> VaultContract:
    vault = await _deploy(VaultContract, web3, tx_defaults, artifacts_dir=artifacts_dir)
    await _send_and_wait(vault.add_authorized_address, core_address)
    return vault


async def deploy_set_token_factory(
    core_address: str,
    web3: AsyncWeb3,
    tx_defaults: TxData,
    *,
    artifacts_dir: str | Path | None = None,
) -> SetTokenFactoryContract:
    factory = await _deploy(
        SetTokenFactoryContract, web3, tx_defaults, artifacts_dir=artifacts_dir
    )
    await _send_and_wait(factory.set_core_address, core_address)
    await _send_and_wait(factory.add_authorized_address, core_address)

    core = await CoreContract.at(core_address, web3, tx_defaults)
    await _send_and_wait(core.enable_factory, factory.address)
    return factory


async def deploy_tokens_for_set_with_approval(
    components: list[ComponentSpec],
    transfer_proxy_address: str,
    web3: AsyncWeb3,
    tx_defaults: TxData,
    *,
    artifacts_dir: str | Path | None = None,
) -> list[str]:
    """Deploy one StandardTokenMock per component, minted to the default sender,
    each with an unlimited allowance for the transfer proxy."""
    owner = tx_defaults.from_address
    if owner is None:
        raise ValueError("tx_defaults.from_address is required to mint components")

    addresses: list[str] = []
    for component in components:
        token = await _deploy(
            StandardTokenMockContract,
            web3,
            tx_defaults,
            owner,
            component.supply,
            component.name,
            component.symbol,
            component.decimals,
            artifacts_dir=artifacts_dir,
        )
        await _send_and_wait(
            token.approve, transfer_proxy_address, UNLIMITED_ALLOWANCE_IN_BASE_UNITS
        )
        addresses.append(token.address)
    return addresses


async def deploy_whitelist(
    initial_addresses: list[str],
    web3: AsyncWeb3,
    tx_defaults: TxData,
    *,
    artifacts_dir: str | Path | None = None,
) -> WhitelistContract:
    return await _deploy(
        WhitelistContract,
        web3,
        tx_defaults,
        initial_addresses,
        artifacts_dir=artifacts_dir,
    )


async def create_set_token(
    core: CoreContract,
    factory_address: str,
    components: list[str],
    units: list[int],
    natural_unit: int,
    name: str,
    symbol: str,
) -> str:
    """Create a Set through Core and return its address.

    The address is read from a simulated ``create`` first; on a development
    chain nothing else runs in between, so the mined transaction lands at it.
    """
    args = (factory_address, components, units, natural_unit, name, symbol)
    set_address = await core.create.call(*args)
    await _send_and_wait(core.create, *args)
    logger.info(f"Created Set {symbol} at {set_address}")
    return set_address


async def initialize_core_api(
    web3: AsyncWeb3,
    tx_defaults: TxData,
    *,
    artifacts_dir: str | Path | None = None,
) -> CoreAPI:
    core = await deploy_core(web3, tx_defaults, artifacts_dir=artifacts_dir)
    transfer_proxy = await deploy_transfer_proxy(
        core.address, web3, tx_defaults, artifacts_dir=artifacts_dir
    )
    vault = await deploy_vault(core.address, web3, tx_defaults, artifacts_dir=artifacts_dir)

    await _send_and_wait(core.set_vault_address, vault.address)
    await _send_and_wait(core.set_transfer_proxy_address, transfer_proxy.address)

    return CoreAPI(
        ContractsAPI(web3, tx_defaults),
        core.address,
        transfer_proxy.address,
        vault.address,
    )
