from set_protocol.wrappers.authorizable import AuthorizableWrapper
from set_protocol.wrappers.vault import VaultWrapper
from set_protocol.wrappers.whitelist import WhitelistWrapper

__all__ = ["AuthorizableWrapper", "VaultWrapper", "WhitelistWrapper"]
