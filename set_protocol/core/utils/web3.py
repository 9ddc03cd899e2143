from contextlib import asynccontextmanager
from typing import Any

from eth_utils import to_checksum_address
from hexbytes import HexBytes
from loguru import logger
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.middleware import ExtraDataToPOAMiddleware

from set_protocol.core.config import get_rpc_url, is_poa_network


def get_web3(rpc_url: str, *, poa: bool = False) -> AsyncWeb3:
    provider = AsyncHTTPProvider(
        rpc_url,
        request_kwargs={"headers": AsyncHTTPProvider.get_request_headers()},
    )
    web3 = AsyncWeb3(provider)
    if poa:
        web3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
    return web3


@asynccontextmanager
async def web3_from_rpc_url(rpc_url: str, *, poa: bool = False):
    web3 = get_web3(rpc_url, poa=poa)
    try:
        yield web3
    finally:
        await web3.provider.disconnect()


@asynccontextmanager
async def web3_from_config(rpc_url: str | None = None):
    """Provider for the configured network; *rpc_url* overrides network.rpc_url."""
    async with web3_from_rpc_url(
        rpc_url or get_rpc_url(), poa=is_poa_network()
    ) as web3:
        yield web3


async def get_network_id(web3: AsyncWeb3) -> str:
    return str(await web3.net.version)


async def does_contract_exist_at_address(web3: AsyncWeb3, address: str) -> bool:
    code = await web3.eth.get_code(to_checksum_address(address))
    return len(HexBytes(code)) > 0


def _rpc_int(value: Any) -> int:
    if isinstance(value, str):
        return int(value, 16) if value.startswith("0x") else int(value)
    return int(value)


async def save_test_snapshot(web3: AsyncWeb3) -> int:
    """Take an EVM snapshot on a development node (ganache / anvil / hardhat)."""
    snapshot_id = _rpc_int(await web3.manager.coro_request("evm_snapshot", []))
    logger.debug(f"Saved EVM snapshot {snapshot_id}")
    return snapshot_id


async def revert_to_snapshot(web3: AsyncWeb3, snapshot_id: int) -> bool:
    reverted = await web3.manager.coro_request("evm_revert", [hex(snapshot_id)])
    logger.debug(f"Reverted to EVM snapshot {snapshot_id}: {reverted}")
    return bool(reverted)
