from __future__ import annotations

from web3 import AsyncWeb3

from set_protocol.api import ContractsAPI, CoreAPI, SetTokenAPI
from set_protocol.core.config import get_protocol_config
from set_protocol.core.types import SetProtocolConfig
from set_protocol.core.utils.transaction import SignCallback
from set_protocol.wrappers import AuthorizableWrapper, VaultWrapper, WhitelistWrapper


class SetProtocol:
    """Entry point bundling the APIs for one deployment of the protocol."""

    def __init__(
        self,
        web3: AsyncWeb3,
        config: SetProtocolConfig,
        *,
        sign_callback: SignCallback | None = None,
    ):
        self.web3 = web3
        self.config = config
        self.contracts = ContractsAPI(
            web3, config.tx_defaults, sign_callback=sign_callback
        )
        self.set_token = SetTokenAPI(self.contracts, config.transfer_proxy_address)
        self.core = CoreAPI(
            self.contracts,
            config.core_address,
            config.transfer_proxy_address,
            config.vault_address,
        )
        self.vault = VaultWrapper(self.contracts, config.vault_address)
        self.authorizable = AuthorizableWrapper(self.contracts)
        self.whitelist = WhitelistWrapper(self.contracts)

    @classmethod
    def from_config(
        cls, web3: AsyncWeb3, *, sign_callback: SignCallback | None = None
    ) -> SetProtocol:
        return cls(web3, get_protocol_config(), sign_callback=sign_callback)
