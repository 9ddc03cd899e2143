from __future__ import annotations

from collections.abc import Sized
from typing import Any

from eth_utils import is_address

from set_protocol.core.utils.abi_caster import to_quantity


class SetProtocolAssertionError(ValueError):
    """A client-side precondition failed; nothing was broadcast."""


def quantity_needs_to_be_positive(quantity: Any) -> str:
    return f"The quantity {quantity} inputted needs to be greater than zero"


def greater_than_zero(quantity: Any, message: str | None = None) -> int:
    value = to_quantity(quantity)
    if value <= 0:
        raise SetProtocolAssertionError(message or quantity_needs_to_be_positive(value))
    return value


def is_valid_address(value: Any, message: str | None = None) -> None:
    if not isinstance(value, str) or not is_address(value):
        raise SetProtocolAssertionError(message or f"{value!r} is not a valid address")


def is_not_empty(values: Sized, message: str) -> None:
    if len(values) == 0:
        raise SetProtocolAssertionError(message)


def is_equal_length(left: Sized, right: Sized, message: str) -> None:
    if len(left) != len(right):
        raise SetProtocolAssertionError(message)
