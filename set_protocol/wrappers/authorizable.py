from set_protocol.api.contracts import ContractsAPI


class AuthorizableWrapper:
    """Reads the authorization state of Authorizable contracts."""

    def __init__(self, contracts: ContractsAPI):
        self.contracts = contracts

    async def get_authorized_addresses(self, authorizable_contract: str) -> list[str]:
        authorizable = await self.contracts.load_authorizable(authorizable_contract)
        return list(await authorizable.get_authorized_addresses.call())
