from __future__ import annotations

from typing import TYPE_CHECKING

from set_protocol.core.assertions.common import SetProtocolAssertionError

if TYPE_CHECKING:
    from set_protocol.api.contracts import ContractsAPI


def insufficient_balance(token: str, owner: str, balance: int, required: int) -> str:
    return (
        f"User {owner} has balance of {balance} of token {token} "
        f"when at least {required} is required"
    )


def insufficient_allowance(
    token: str, owner: str, spender: str, allowance: int, required: int
) -> str:
    return (
        f"User {owner} has allowance of {allowance} of token {token} for spender "
        f"{spender} when at least {required} is required"
    )


class ERC20Assertions:
    def __init__(self, contracts: ContractsAPI):
        self.contracts = contracts

    async def has_sufficient_balance(
        self, token_address: str, owner: str, required: int
    ) -> None:
        token = await self.contracts.load_erc20(token_address)
        balance = int(await token.balance_of.call(owner))
        if balance < required:
            raise SetProtocolAssertionError(
                insufficient_balance(token_address, owner, balance, required)
            )

    async def has_sufficient_allowance(
        self, token_address: str, owner: str, spender: str, required: int
    ) -> None:
        token = await self.contracts.load_erc20(token_address)
        allowance = int(await token.allowance.call(owner, spender))
        if allowance < required:
            raise SetProtocolAssertionError(
                insufficient_allowance(token_address, owner, spender, allowance, required)
            )
