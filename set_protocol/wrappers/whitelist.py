from set_protocol.api.contracts import ContractsAPI


class WhitelistWrapper:
    def __init__(self, contracts: ContractsAPI):
        self.contracts = contracts

    async def valid_addresses(self, whitelist_contract: str) -> list[str]:
        whitelist = await self.contracts.load_whitelist(whitelist_contract)
        return list(await whitelist.valid_addresses.call())
