"""
Numeric Decoder - Parse quantities returned by JSON-RPC nodes.

Nodes return numbers as JSON strings, either 0x-prefixed hex or plain
decimal text depending on the method (and sometimes the node).  Values
routinely exceed 64 bits, so everything decodes to Python ints and
fixed-point results are built as exact Decimals.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_DEC_DIGITS = re.compile(r"[0-9]+")

UINT64_MAX = 2**64 - 1

# Zero-length return data from eth_call comes back as "0x".
ZERO_EQUIVALENTS = frozenset({"", "0x"})


class DecodeError(ValueError):
    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


def decode_quantity(raw: Any) -> int:
    """
    Decode an RPC numeric result into an arbitrary-precision integer.

    Args:
        raw: "" or "0x" (zero), "0x"-prefixed hex, unsigned decimal text, or a non-negative int

    Returns:
        Decoded integer (never truncated)

    Raises:
        DecodeError: If the input is not one of the accepted forms
    """
    if isinstance(raw, bool):
        raise DecodeError(f"Cannot decode boolean as quantity: {raw!r}", raw)
    if isinstance(raw, int):
        if raw < 0:
            raise DecodeError(f"Quantity must be non-negative: {raw!r}", raw)
        return raw
    if not isinstance(raw, str):
        raise DecodeError(f"Cannot decode {type(raw).__name__} as quantity: {raw!r}", raw)

    if raw in ZERO_EQUIVALENTS:
        return 0
    if raw.startswith("0x"):
        digits = raw[2:]
        if not _HEX_DIGITS.fullmatch(digits):
            raise DecodeError(f"Invalid hex quantity: {raw!r}", raw)
        return int(digits, 16)
    if not _DEC_DIGITS.fullmatch(raw):
        raise DecodeError(f"Invalid decimal quantity: {raw!r}", raw)
    return int(raw, 10)


def decode_uint64(raw: Any) -> int:
    value = decode_quantity(raw)
    if value < 0 or value > UINT64_MAX:
        raise DecodeError(f"Quantity out of uint64 range: {raw!r}", raw)
    return value


def to_fixed_point(value: int, precision: int) -> Decimal:
    """
    Scale an integer down by 10**precision without rounding.

    The result keeps the integer's digits and shifts the exponent, so it
    is exact regardless of the active decimal context.

    Example:
        to_fixed_point(256, 2) == Decimal("2.56")
    """
    sign, digits, _ = Decimal(value).as_tuple()
    return Decimal((sign, digits, -precision))


def decode_fixed_point(raw: Any, precision: int) -> Decimal:
    return to_fixed_point(decode_quantity(raw), precision)


def decode_data(raw: Any) -> bytes:
    """Decode a 0x-prefixed hex data payload ("0x" is empty data)."""
    if not isinstance(raw, str) or not raw.startswith("0x"):
        raise DecodeError(f"Expected 0x-prefixed hex data: {raw!r}", raw)
    digits = raw[2:]
    if len(digits) % 2 or (digits and not _HEX_DIGITS.fullmatch(digits)):
        raise DecodeError(f"Invalid hex data: {raw!r}", raw)
    return bytes.fromhex(digits)


def decode_fixed_bytes(raw: Any, length: int) -> bytes:
    data = decode_data(raw)
    if len(data) != length:
        raise DecodeError(f"Expected {length} bytes, got {len(data)}: {raw!r}", raw)
    return data
