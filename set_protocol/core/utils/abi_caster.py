"""Casting of Python values to Solidity ABI argument types.

Quantities are arbitrary-precision integers. ``int``, integral ``Decimal``,
decimal strings and ``0x`` hex strings are accepted; ``float`` and ``bool``
are rejected so token amounts never pass through binary floating point.
Addresses are converted to their EIP-55 checksum form.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from eth_utils import to_checksum_address


def to_quantity(value: Any) -> int:
    """Convert *value* to an ``int`` without any floating-point step."""
    if isinstance(value, bool):
        raise TypeError(f"Expected an integer quantity, got bool {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        raise TypeError(
            f"Quantities must not be floats (got {value!r}); use int or Decimal"
        )
    if isinstance(value, Decimal):
        if not value.is_finite() or value != value.to_integral_value():
            raise ValueError(f"Quantity {value} is not an integer")
        return int(value)
    if isinstance(value, str):
        s = value.strip()
        if s.lower().startswith("0x"):
            return int(s, 16)
        try:
            return to_quantity(Decimal(s))
        except InvalidOperation as exc:
            raise ValueError(f"Invalid quantity: {value!r}") from exc
    raise TypeError(f"Expected an integer quantity, got {type(value).__name__}")


def cast_single(arg: Any, abi_type: str) -> Any:
    t = abi_type.strip()

    if t == "bool":
        if not isinstance(arg, bool):
            raise TypeError(f"Expected bool, got {type(arg).__name__}")
        return arg

    if t.startswith("uint") or t.startswith("int"):
        quantity = to_quantity(arg)
        if t.startswith("uint") and quantity < 0:
            raise ValueError(f"{t} cannot be negative: {quantity}")
        return quantity

    if t == "address":
        return to_checksum_address(str(arg))

    if t == "string":
        return str(arg)

    if t.startswith("bytes"):
        if isinstance(arg, (bytes, bytearray)):
            return bytes(arg)
        s = str(arg)
        if s.startswith("0x"):
            return bytes.fromhex(s[2:])
        return s.encode("utf-8")

    return arg


def cast_args(args: list[Any], abi_inputs: list[dict[str, Any]]) -> list[Any]:
    """Cast a list of arguments to match ABI input definitions.

    Raises ``ValueError`` when the argument count does not match.
    """
    if len(args) != len(abi_inputs):
        raise ValueError(
            f"Argument count mismatch: got {len(args)}, expected {len(abi_inputs)}"
        )
    return [_cast_value(arg, inp) for arg, inp in zip(args, abi_inputs, strict=True)]


def _cast_value(arg: Any, inp: dict[str, Any]) -> Any:
    t = inp.get("type", "").strip()
    components = inp.get("components")

    # Array types: e.g. "uint256[]", "address[3]"
    if t.endswith("]"):
        element_inp = {"type": t[: t.rindex("[")]}
        if components:
            element_inp["components"] = components
        if not isinstance(arg, (list, tuple)):
            raise TypeError(f"Expected list for {t}, got {type(arg).__name__}")
        return [_cast_value(item, element_inp) for item in arg]

    if t == "tuple" and components:
        if isinstance(arg, dict):
            arg = [arg.get(c["name"]) for c in components]
        if not isinstance(arg, (list, tuple)):
            raise TypeError(f"Expected list/tuple for tuple, got {type(arg).__name__}")
        return tuple(cast_args(list(arg), components))

    return cast_single(arg, t)


def get_function_inputs(
    abi: list[dict[str, Any]], fn_name: str
) -> list[dict[str, Any]]:
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == fn_name:
            return entry.get("inputs", [])
    raise ValueError(f"Function {fn_name} not found in ABI")


def get_constructor_inputs(abi: list[dict[str, Any]]) -> list[dict[str, Any]]:
    for entry in abi:
        if entry.get("type") == "constructor":
            return entry.get("inputs", [])
    return []
