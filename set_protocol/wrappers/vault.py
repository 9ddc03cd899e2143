from eth_utils import to_checksum_address

from set_protocol.api.contracts import ContractsAPI


class VaultWrapper:
    def __init__(self, contracts: ContractsAPI, vault_address: str):
        self.contracts = contracts
        self.vault_address = to_checksum_address(vault_address)

    async def get_balance_in_vault(self, token_address: str, owner_address: str) -> int:
        """Balance of *token_address* held in the vault on behalf of *owner_address*."""
        vault = await self.contracts.load_vault(self.vault_address)
        return int(await vault.get_owner_balance.call(token_address, owner_address))
