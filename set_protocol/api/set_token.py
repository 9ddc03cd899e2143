from __future__ import annotations

from typing import Any

from eth_utils import to_checksum_address
from loguru import logger

from set_protocol.api.contracts import ContractsAPI
from set_protocol.core.assertions import Assertions
from set_protocol.core.types import TxData


class SetTokenAPI:
    """Issue and redeem Sets after client-side pre-flight checks.

    The checks mirror the Set's on-chain requirements so that a transaction
    that would revert is rejected before any gas is spent. They read current
    chain state and can race with other transactions; the chain remains the
    final authority.
    """

    def __init__(self, contracts: ContractsAPI, transfer_proxy_address: str):
        self.contracts = contracts
        self.transfer_proxy_address = to_checksum_address(transfer_proxy_address)
        self.assertions = Assertions(contracts)
        self.logger = logger.bind(api=self.__class__.__name__)

    async def get_natural_unit(self, set_address: str) -> int:
        set_token = await self.contracts.load_set_token(set_address)
        return int(await set_token.natural_unit.call())

    async def get_components(self, set_address: str) -> list[str]:
        set_token = await self.contracts.load_set_token(set_address)
        return list(await set_token.get_components.call())

    async def get_units(self, set_address: str) -> list[int]:
        set_token = await self.contracts.load_set_token(set_address)
        return [int(unit) for unit in await set_token.get_units.call()]

    async def get_balance_of(self, set_address: str, owner: str) -> int:
        set_token = await self.contracts.load_set_token(set_address)
        return int(await set_token.balance_of.call(owner))

    async def issue_set(
        self, set_address: str, quantity: Any, user_address: str
    ) -> str:
        user = to_checksum_address(user_address)
        tx_data = TxData(from_address=user)
        set_token = await self.contracts.load_set_token(set_address, tx_data)

        quantity = self.assertions.common.greater_than_zero(quantity)
        await self.assertions.set_token.is_multiple_of_natural_unit(set_token, quantity)
        await self.assertions.set_token.has_sufficient_balances(set_token, quantity, user)
        await self.assertions.set_token.has_sufficient_allowances(
            set_token, quantity, user, self.transfer_proxy_address
        )

        self.logger.info(f"Issuing {quantity} of Set {set_token.address} for {user}")
        return await set_token.issue.send_transaction(quantity, tx_data=tx_data)

    async def redeem_set(
        self, set_address: str, quantity: Any, user_address: str
    ) -> str:
        user = to_checksum_address(user_address)
        tx_data = TxData(from_address=user)
        set_token = await self.contracts.load_set_token(set_address, tx_data)

        quantity = self.assertions.common.greater_than_zero(quantity)
        await self.assertions.set_token.is_multiple_of_natural_unit(set_token, quantity)
        await self.assertions.set_token.has_sufficient_set_balance(set_token, quantity, user)

        self.logger.info(f"Redeeming {quantity} of Set {set_token.address} for {user}")
        return await set_token.redeem.send_transaction(quantity, tx_data=tx_data)
