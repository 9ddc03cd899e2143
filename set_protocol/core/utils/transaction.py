from collections.abc import Awaitable, Callable
from typing import Any

from eth_account import Account
from loguru import logger
from web3 import AsyncWeb3

from set_protocol.core.constants.base import (
    DEFAULT_DEPLOY_TIMEOUT,
    DEFAULT_RECEIPT_POLL_INTERVAL,
)

SignCallback = Callable[[dict[str, Any]], Awaitable[bytes]]


def to_hex_hash(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).hex()
    value = str(value)
    if not value.startswith("0x"):
        value = f"0x{value}"
    return value


def sign_callback_for_key(private_key: str) -> SignCallback:
    account = Account.from_key(private_key)

    async def sign_callback(tx: dict[str, Any]) -> bytes:
        signed = account.sign_transaction(tx)
        return signed.raw_transaction

    return sign_callback


async def submit_transaction(
    web3: AsyncWeb3,
    call: Any,
    params: dict[str, Any],
    sign_callback: SignCallback | None = None,
) -> str:
    """Submit a prepared contract call or constructor and return its hash.

    Without a ``sign_callback`` the node signs (``eth_sendTransaction``); with
    one the transaction is built, signed locally and sent raw. Does not wait
    for the transaction to be mined.
    """
    if sign_callback is None:
        tx_hash = await call.transact(params)
    else:
        transaction = await call.build_transaction(params)
        signed_transaction = await sign_callback(transaction)
        tx_hash = await web3.eth.send_raw_transaction(signed_transaction)
    return to_hex_hash(tx_hash)


async def wait_for_transaction_receipt(
    web3: AsyncWeb3,
    txn_hash: str,
    poll_interval: float = DEFAULT_RECEIPT_POLL_INTERVAL,
    timeout: float = DEFAULT_DEPLOY_TIMEOUT,
) -> dict[str, Any]:
    txn_hash = to_hex_hash(txn_hash)
    logger.debug(f"Waiting for receipt of {txn_hash}...")
    receipt = await web3.eth.wait_for_transaction_receipt(
        txn_hash, timeout=timeout, poll_latency=poll_interval
    )
    return dict(receipt)
