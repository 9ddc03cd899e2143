from unittest.mock import AsyncMock, MagicMock

import pytest
from hexbytes import HexBytes

from set_protocol.core.utils.transaction import (
    sign_callback_for_key,
    submit_transaction,
    to_hex_hash,
    wait_for_transaction_receipt,
)

RANDOM_USER_0 = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
PRIVATE_KEY = "0x" + "11" * 32


class TestToHexHash:
    def test_bytes(self):
        assert to_hex_hash(b"\x01\x02") == "0x0102"

    def test_prefixed_string_unchanged(self):
        assert to_hex_hash("0xabc") == "0xabc"

    def test_unprefixed_string(self):
        assert to_hex_hash("abc") == "0xabc"


@pytest.mark.asyncio
class TestSubmitTransaction:
    async def test_node_signs_without_callback(self):
        web3 = MagicMock()
        call = MagicMock()
        call.transact = AsyncMock(return_value=HexBytes("0x12"))

        txn_hash = await submit_transaction(web3, call, {"from": RANDOM_USER_0})

        assert txn_hash == "0x12"
        call.transact.assert_awaited_once_with({"from": RANDOM_USER_0})

    async def test_signs_locally_with_callback(self):
        web3 = MagicMock()
        web3.eth.send_raw_transaction = AsyncMock(return_value=HexBytes("0x34"))
        call = MagicMock()
        call.build_transaction = AsyncMock(return_value={"to": RANDOM_USER_0})
        sign_callback = AsyncMock(return_value=b"raw")

        txn_hash = await submit_transaction(
            web3, call, {"from": RANDOM_USER_0}, sign_callback
        )

        assert txn_hash == "0x34"
        call.build_transaction.assert_awaited_once_with({"from": RANDOM_USER_0})
        sign_callback.assert_awaited_once_with({"to": RANDOM_USER_0})
        web3.eth.send_raw_transaction.assert_awaited_once_with(b"raw")


@pytest.mark.asyncio
async def test_sign_callback_for_key_signs_legacy_transaction():
    sign_callback = sign_callback_for_key(PRIVATE_KEY)
    raw = await sign_callback(
        {
            "to": RANDOM_USER_0,
            "value": 0,
            "gas": 21000,
            "gasPrice": 1,
            "nonce": 0,
            "chainId": 1,
        }
    )
    assert isinstance(raw, bytes)
    assert len(raw) > 0


@pytest.mark.asyncio
async def test_wait_for_transaction_receipt_returns_dict():
    web3 = MagicMock()
    web3.eth.wait_for_transaction_receipt = AsyncMock(return_value={"status": 1})

    receipt = await wait_for_transaction_receipt(web3, b"\xab", poll_interval=0.5)

    assert receipt == {"status": 1}
    web3.eth.wait_for_transaction_receipt.assert_awaited_once_with(
        "0xab", timeout=120, poll_latency=0.5
    )
