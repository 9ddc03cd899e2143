from __future__ import annotations

from typing import Any

from eth_utils import to_checksum_address
from loguru import logger

from set_protocol.api.contracts import ContractsAPI
from set_protocol.core.assertions import Assertions
from set_protocol.core.assertions.common import SetProtocolAssertionError
from set_protocol.core.contracts import CoreContract
from set_protocol.core.types import TxData


def insufficient_vault_balance(token: str, owner: str, balance: int, required: int) -> str:
    return (
        f"User {owner} has vault balance of {balance} of token {token} "
        f"when at least {required} is required"
    )


class CoreAPI:
    def __init__(
        self,
        contracts: ContractsAPI,
        core_address: str,
        transfer_proxy_address: str,
        vault_address: str,
    ):
        self.contracts = contracts
        self.core_address = to_checksum_address(core_address)
        self.transfer_proxy_address = to_checksum_address(transfer_proxy_address)
        self.vault_address = to_checksum_address(vault_address)
        self.assertions = Assertions(contracts)
        self.logger = logger.bind(api=self.__class__.__name__)

    async def _core(self, tx_data: TxData | dict[str, Any] | None = None) -> CoreContract:
        return await self.contracts.load_core(self.core_address, tx_data)

    async def get_vault_address(self) -> str:
        return await (await self._core()).vault_address.call()

    async def get_transfer_proxy_address(self) -> str:
        return await (await self._core()).transfer_proxy_address.call()

    async def is_valid_factory(self, factory_address: str) -> bool:
        return bool(await (await self._core()).valid_factories.call(factory_address))

    async def is_valid_set(self, set_address: str) -> bool:
        return bool(await (await self._core()).valid_sets.call(set_address))

    async def create_set(
        self,
        factory_address: str,
        components: list[str],
        units: list[Any],
        natural_unit: Any,
        name: str,
        symbol: str,
        tx_data: TxData | dict[str, Any] | None = None,
    ) -> str:
        """Create a Set through a registered factory; returns the tx hash."""
        common = self.assertions.common
        common.is_not_empty(components, "The Set must have at least one component")
        common.is_equal_length(
            components,
            units,
            f"The components ({len(components)}) and units ({len(units)}) "
            "inputted need to be the same length",
        )
        for component in components:
            common.is_valid_address(component)
        units = [
            common.greater_than_zero(unit, f"The unit {unit} inputted needs to be greater than zero")
            for unit in units
        ]
        natural_unit = common.greater_than_zero(
            natural_unit,
            f"The natural unit {natural_unit} inputted needs to be greater than zero",
        )

        core = await self._core()
        return await core.create.send_transaction(
            factory_address, components, units, natural_unit, name, symbol, tx_data=tx_data
        )

    async def deposit(self, token_address: str, quantity: Any, user_address: str) -> str:
        user = to_checksum_address(user_address)
        tx_data = TxData(from_address=user)
        core = await self._core(tx_data)

        quantity = self.assertions.common.greater_than_zero(quantity)
        await self.assertions.erc20.has_sufficient_balance(token_address, user, quantity)
        await self.assertions.erc20.has_sufficient_allowance(
            token_address, user, self.transfer_proxy_address, quantity
        )

        self.logger.info(f"Depositing {quantity} of {token_address} for {user}")
        return await core.deposit.send_transaction(token_address, quantity, tx_data=tx_data)

    async def withdraw(self, token_address: str, quantity: Any, user_address: str) -> str:
        user = to_checksum_address(user_address)
        tx_data = TxData(from_address=user)
        core = await self._core(tx_data)

        quantity = self.assertions.common.greater_than_zero(quantity)
        vault = await self.contracts.load_vault(self.vault_address)
        balance = int(await vault.get_owner_balance.call(token_address, user))
        if balance < quantity:
            raise SetProtocolAssertionError(
                insufficient_vault_balance(token_address, user, balance, quantity)
            )

        self.logger.info(f"Withdrawing {quantity} of {token_address} for {user}")
        return await core.withdraw.send_transaction(token_address, quantity, tx_data=tx_data)
