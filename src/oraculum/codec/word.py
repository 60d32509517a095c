"""
EVM Word Codec - 32-byte ABI words for signed and unsigned integers.

Uses eth-abi for the actual packing; this module pins the word width,
maps eth-abi failures onto RangeError, and slices stacked return data
into words.
"""

from __future__ import annotations

from eth_abi import decode, encode
from eth_abi.exceptions import EncodingError

from ..utils import as_address
from .numeric import DecodeError

WORD_LENGTH = 32

UINT256_MAX = 2**256 - 1
INT256_MIN = -(2**255)
INT256_MAX = 2**255 - 1


class RangeError(ValueError):
    pass


def _check_int(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")


def encode_unsigned(value: int) -> bytes:
    """Encode a non-negative integer as a left-zero-padded 32-byte word."""
    _check_int(value)
    if value < 0 or value > UINT256_MAX:
        raise RangeError(f"Value out of uint256 range: {value}")
    try:
        return encode(["uint256"], [value])
    except EncodingError as exc:
        raise RangeError(f"Cannot encode {value} as uint256: {exc}") from exc


def encode_signed(value: int) -> bytes:
    """Encode an integer as a 32-byte two's-complement word."""
    _check_int(value)
    if value < INT256_MIN or value > INT256_MAX:
        raise RangeError(f"Value out of int256 range: {value}")
    try:
        return encode(["int256"], [value])
    except EncodingError as exc:
        raise RangeError(f"Cannot encode {value} as int256: {exc}") from exc


def encode_address(address: str | bytes) -> bytes:
    """Left-pad a 20-byte address into a single word."""
    return encode(["address"], [as_address(address)])


def _check_word(word: bytes) -> bytes:
    if len(word) != WORD_LENGTH:
        raise DecodeError(f"EVM word must be {WORD_LENGTH} bytes, got {len(word)}", word)
    return bytes(word)


def decode_unsigned(word: bytes) -> int:
    (value,) = decode(["uint256"], _check_word(word))
    return value


def decode_signed(word: bytes) -> int:
    (value,) = decode(["int256"], _check_word(word))
    return value


def split_words(data: bytes) -> list[bytes]:
    """Slice ABI return data into consecutive 32-byte words."""
    if len(data) % WORD_LENGTH:
        raise DecodeError(
            f"Return data length {len(data)} is not a multiple of {WORD_LENGTH}", data
        )
    return [data[i : i + WORD_LENGTH] for i in range(0, len(data), WORD_LENGTH)]
