from __future__ import annotations

from typing import Any, TypeVar

from web3 import AsyncWeb3

from set_protocol.core.contracts import (
    AuthorizableContract,
    BaseContract,
    CoreContract,
    ERC20Contract,
    SetTokenContract,
    SetTokenFactoryContract,
    TransferProxyContract,
    VaultContract,
    WhitelistContract,
)
from set_protocol.core.types import TxData
from set_protocol.core.utils.transaction import SignCallback

C = TypeVar("C", bound=BaseContract)


class ContractsAPI:
    """Attaches contract wrappers to addresses.

    Each ``load_*`` call verifies that code exists at the address and returns a
    fresh wrapper; per-call ``tx_data`` is layered over the shared defaults.
    """

    def __init__(
        self,
        web3: AsyncWeb3,
        defaults: TxData | dict[str, Any] | None = None,
        *,
        sign_callback: SignCallback | None = None,
    ):
        self.web3 = web3
        self.defaults = TxData.coerce(defaults)
        self.sign_callback = sign_callback

    async def _load(
        self,
        wrapper_cls: type[C],
        address: str,
        tx_data: TxData | dict[str, Any] | None = None,
    ) -> C:
        return await wrapper_cls.at(
            address,
            self.web3,
            self.defaults.merge(tx_data),
            sign_callback=self.sign_callback,
        )

    async def load_set_token(
        self, address: str, tx_data: TxData | dict[str, Any] | None = None
    ) -> SetTokenContract:
        return await self._load(SetTokenContract, address, tx_data)

    async def load_erc20(
        self, address: str, tx_data: TxData | dict[str, Any] | None = None
    ) -> ERC20Contract:
        return await self._load(ERC20Contract, address, tx_data)

    async def load_core(
        self, address: str, tx_data: TxData | dict[str, Any] | None = None
    ) -> CoreContract:
        return await self._load(CoreContract, address, tx_data)

    async def load_vault(
        self, address: str, tx_data: TxData | dict[str, Any] | None = None
    ) -> VaultContract:
        return await self._load(VaultContract, address, tx_data)

    async def load_transfer_proxy(
        self, address: str, tx_data: TxData | dict[str, Any] | None = None
    ) -> TransferProxyContract:
        return await self._load(TransferProxyContract, address, tx_data)

    async def load_authorizable(
        self, address: str, tx_data: TxData | dict[str, Any] | None = None
    ) -> AuthorizableContract:
        return await self._load(AuthorizableContract, address, tx_data)

    async def load_whitelist(
        self, address: str, tx_data: TxData | dict[str, Any] | None = None
    ) -> WhitelistContract:
        return await self._load(WhitelistContract, address, tx_data)

    async def load_set_token_factory(
        self, address: str, tx_data: TxData | dict[str, Any] | None = None
    ) -> SetTokenFactoryContract:
        return await self._load(SetTokenFactoryContract, address, tx_data)
