from __future__ import annotations

from typing import Any

from eth_utils import to_checksum_address
from pydantic import BaseModel, ConfigDict, Field, field_validator


class TxData(BaseModel):
    """Transaction parameters applied to a contract call.

    Instances are immutable: ``merge`` returns a new object with the fields set
    on *other* layered over this one. Accepts both the web3 keys (``from``,
    ``gasPrice``) and the field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_address: str | None = Field(default=None, alias="from")
    gas: int | None = None
    gas_price: int | None = Field(default=None, alias="gasPrice")
    value: int | None = None

    @field_validator("from_address")
    @classmethod
    def _checksum_from(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return to_checksum_address(value)

    @classmethod
    def coerce(cls, tx_data: TxData | dict[str, Any] | None) -> TxData:
        if tx_data is None:
            return cls()
        if isinstance(tx_data, TxData):
            return tx_data
        return cls.model_validate(tx_data)

    def merge(self, other: TxData | dict[str, Any] | None) -> TxData:
        overrides = TxData.coerce(other).model_dump(exclude_none=True)
        if not overrides:
            return self
        return self.model_copy(update=overrides)

    def to_params(self) -> dict[str, Any]:
        """Render as a web3 transaction dict, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_call_params(self) -> dict[str, Any]:
        if self.from_address is None:
            return {}
        return {"from": self.from_address}


class SetProtocolConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    core_address: str
    transfer_proxy_address: str
    vault_address: str
    set_token_factory_address: str | None = None
    tx_defaults: TxData = TxData()

    @field_validator(
        "core_address",
        "transfer_proxy_address",
        "vault_address",
        "set_token_factory_address",
    )
    @classmethod
    def _checksum(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return to_checksum_address(value)
