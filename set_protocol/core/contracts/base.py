"""Generic calling convention for deployed contracts.

A wrapper class declares its contract functions as class attributes:

    class VaultContract(AuthorizableContract):
        contract_name = "Vault"
        abi = VAULT_ABI

        get_owner_balance = ContractView("getOwnerBalance")

Accessing a descriptor on an instance yields a bound call object exposing the
standard operations (``call``, ``get_abi_encoded_transaction_data`` and, for
state-changing functions, ``estimate_gas`` and ``send_transaction``).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, ClassVar, Self

from eth_utils import to_checksum_address
from loguru import logger
from web3 import AsyncWeb3

from set_protocol.core.artifacts import load_network_address
from set_protocol.core.constants.base import DEFAULT_DEPLOY_TIMEOUT
from set_protocol.core.types import TxData
from set_protocol.core.utils.abi_caster import (
    cast_args,
    get_constructor_inputs,
    get_function_inputs,
)
from set_protocol.core.utils.transaction import (
    SignCallback,
    submit_transaction,
    wait_for_transaction_receipt,
)
from set_protocol.core.utils.web3 import does_contract_exist_at_address, get_network_id


class ContractNotFoundError(RuntimeError):
    def __init__(self, contract_name: str, network_id: str, address: str | None = None):
        self.contract_name = contract_name
        self.network_id = network_id
        self.address = address
        where = f" at {address}" if address else ""
        super().__init__(
            f"Unable to find address for contract {contract_name}{where} "
            f"on network with id {network_id}"
        )


class ContractDeploymentError(RuntimeError):
    def __init__(self, contract_name: str, txn_hash: str, reason: str):
        self.contract_name = contract_name
        self.txn_hash = txn_hash
        super().__init__(f"Deployment of {contract_name} failed ({reason}): {txn_hash}")


class BoundContractView:
    def __init__(self, contract: BaseContract, fn_name: str):
        self.contract = contract
        self.fn_name = fn_name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.contract.contract_name}.{self.fn_name}>"

    def _cast(self, args: tuple[Any, ...]) -> list[Any]:
        inputs = get_function_inputs(self.contract.abi, self.fn_name)
        return cast_args(list(args), inputs)

    def _function(self, args: tuple[Any, ...]) -> Any:
        fn = getattr(self.contract.web3_contract.functions, self.fn_name)
        return fn(*self._cast(args))

    def get_abi_encoded_transaction_data(self, *args: Any) -> str:
        return self.contract.web3_contract.encode_abi(
            self.fn_name, args=self._cast(args)
        )

    async def call(
        self,
        *args: Any,
        tx_data: TxData | dict[str, Any] | None = None,
        block_identifier: str | int = "latest",
    ) -> Any:
        params = self.contract.defaults.merge(tx_data).to_call_params()
        result = await self._function(args).call(
            params, block_identifier=block_identifier
        )
        self.contract.logger.debug(f"{self.fn_name}{args} -> {result!r}")
        return result


class BoundContractMethod(BoundContractView):
    async def estimate_gas(
        self, *args: Any, tx_data: TxData | dict[str, Any] | None = None
    ) -> int:
        tx = await self.contract.apply_defaults_to_tx_data(tx_data)
        gas = await self._function(args).estimate_gas(tx.to_params())
        self.contract.logger.debug(f"Estimated gas for {self.fn_name}: {gas}")
        return int(gas)

    async def send_transaction(
        self, *args: Any, tx_data: TxData | dict[str, Any] | None = None
    ) -> str:
        tx = await self.contract.apply_defaults_to_tx_data(
            tx_data, lambda: self.estimate_gas(*args, tx_data=tx_data)
        )
        txn_hash = await submit_transaction(
            self.contract.web3,
            self._function(args),
            tx.to_params(),
            self.contract.sign_callback,
        )
        self.contract.logger.info(
            f"Transaction broadcasted: {self.contract.contract_name}.{self.fn_name} {txn_hash}"
        )
        return txn_hash


class ContractView:
    """Descriptor for a read-only contract function."""

    bound_class: ClassVar[type[BoundContractView]] = BoundContractView

    def __init__(self, fn_name: str):
        self.fn_name = fn_name

    def __get__(self, instance: BaseContract | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return self.bound_class(instance, self.fn_name)


class ContractMethod(ContractView):
    """Descriptor for a state-changing contract function."""

    bound_class: ClassVar[type[BoundContractView]] = BoundContractMethod


class BaseContract:
    contract_name: ClassVar[str] = "Contract"
    abi: ClassVar[list[dict[str, Any]]] = []

    def __init__(
        self,
        web3: AsyncWeb3,
        address: str,
        defaults: TxData | dict[str, Any] | None = None,
        *,
        sign_callback: SignCallback | None = None,
    ):
        self.web3 = web3
        self.address = to_checksum_address(address)
        self.defaults = TxData.coerce(defaults)
        self.sign_callback = sign_callback
        self.web3_contract = web3.eth.contract(address=self.address, abi=self.abi)
        self.logger = logger.bind(contract=self.__class__.__name__)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.address}>"

    async def apply_defaults_to_tx_data(
        self,
        tx_data: TxData | dict[str, Any] | None = None,
        estimate_gas: Callable[[], Awaitable[int]] | None = None,
    ) -> TxData:
        tx = self.defaults.merge(tx_data)
        if tx.gas is None and estimate_gas is not None:
            tx = tx.model_copy(update={"gas": int(await estimate_gas())})
        return tx

    @classmethod
    async def at(
        cls,
        address: str,
        web3: AsyncWeb3,
        defaults: TxData | dict[str, Any] | None = None,
        *,
        sign_callback: SignCallback | None = None,
    ) -> Self:
        if not await does_contract_exist_at_address(web3, address):
            network_id = await get_network_id(web3)
            raise ContractNotFoundError(cls.contract_name, network_id, address)
        return cls(web3, address, defaults, sign_callback=sign_callback)

    @classmethod
    async def deployed(
        cls,
        web3: AsyncWeb3,
        defaults: TxData | dict[str, Any] | None = None,
        *,
        artifacts_dir: str | Path | None = None,
        sign_callback: SignCallback | None = None,
    ) -> Self:
        network_id = await get_network_id(web3)
        address = load_network_address(cls.contract_name, network_id, artifacts_dir)
        if address is None:
            raise ContractNotFoundError(cls.contract_name, network_id)
        return await cls.at(address, web3, defaults, sign_callback=sign_callback)

    @classmethod
    async def deploy(
        cls,
        web3: AsyncWeb3,
        bytecode: str,
        *constructor_args: Any,
        defaults: TxData | dict[str, Any] | None = None,
        tx_data: TxData | dict[str, Any] | None = None,
        sign_callback: SignCallback | None = None,
        timeout: float = DEFAULT_DEPLOY_TIMEOUT,
    ) -> Self:
        """Deploy a new instance and wait until it has an address."""
        defaults = TxData.coerce(defaults)
        factory = web3.eth.contract(abi=cls.abi, bytecode=bytecode)
        args = cast_args(list(constructor_args), get_constructor_inputs(cls.abi))
        constructor = factory.constructor(*args)

        tx = defaults.merge(tx_data)
        if tx.gas is None:
            gas = await constructor.estimate_gas(tx.to_params())
            tx = tx.model_copy(update={"gas": int(gas)})

        txn_hash = await submit_transaction(
            web3, constructor, tx.to_params(), sign_callback
        )
        logger.info(f"Deploying {cls.contract_name}: {txn_hash}")
        receipt = await wait_for_transaction_receipt(web3, txn_hash, timeout=timeout)

        if receipt.get("status") == 0:
            raise ContractDeploymentError(cls.contract_name, txn_hash, "reverted")
        address = receipt.get("contractAddress")
        if not address:
            raise ContractDeploymentError(
                cls.contract_name, txn_hash, "no contractAddress in receipt"
            )
        logger.info(f"Deployed {cls.contract_name} at {address}")
        return cls(web3, address, defaults, sign_callback=sign_callback)
