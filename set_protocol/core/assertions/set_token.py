from __future__ import annotations

from set_protocol.core.assertions.common import SetProtocolAssertionError
from set_protocol.core.assertions.erc20 import ERC20Assertions
from set_protocol.core.contracts.set_token import SetTokenContract


def not_multiple_of_natural_unit(quantity: int, natural_unit: int) -> str:
    return (
        f"Quantity of {quantity} is not a multiple of the Set's natural unit "
        f"of {natural_unit}"
    )


class SetTokenAssertions:
    """Pre-flight checks mirroring the Set's on-chain issue/redeem invariants.

    Every check is a sequence of read-only calls; the first failure raises
    ``SetProtocolAssertionError`` and nothing further is read.
    """

    def __init__(self, erc20: ERC20Assertions):
        self.erc20 = erc20

    async def natural_unit(self, set_token: SetTokenContract) -> int:
        natural_unit = int(await set_token.natural_unit.call())
        if natural_unit <= 0:
            raise SetProtocolAssertionError(
                f"Set {set_token.address} has invalid natural unit {natural_unit}"
            )
        return natural_unit

    async def is_multiple_of_natural_unit(
        self, set_token: SetTokenContract, quantity: int
    ) -> None:
        natural_unit = await self.natural_unit(set_token)
        if quantity % natural_unit != 0:
            raise SetProtocolAssertionError(
                not_multiple_of_natural_unit(quantity, natural_unit)
            )

    async def required_component_quantities(
        self, set_token: SetTokenContract, quantity: int
    ) -> list[tuple[str, int]]:
        components = await set_token.get_components.call()
        units = await set_token.get_units.call()
        natural_unit = await self.natural_unit(set_token)
        return [
            (component, int(unit) * quantity // natural_unit)
            for component, unit in zip(components, units, strict=True)
        ]

    async def has_sufficient_balances(
        self, set_token: SetTokenContract, quantity: int, owner: str
    ) -> None:
        for component, required in await self.required_component_quantities(
            set_token, quantity
        ):
            await self.erc20.has_sufficient_balance(component, owner, required)

    async def has_sufficient_allowances(
        self, set_token: SetTokenContract, quantity: int, owner: str, spender: str
    ) -> None:
        for component, required in await self.required_component_quantities(
            set_token, quantity
        ):
            await self.erc20.has_sufficient_allowance(component, owner, spender, required)

    async def has_sufficient_set_balance(
        self, set_token: SetTokenContract, quantity: int, owner: str
    ) -> None:
        await self.erc20.has_sufficient_balance(set_token.address, owner, quantity)
