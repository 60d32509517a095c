from __future__ import annotations

import re

_HEX_RE = re.compile(r"[0-9a-fA-F]*")

ADDRESS_LENGTH = 20
HASH_LENGTH = 32


class FormatError(ValueError):
    pass


def strip_hex_prefix(value: str) -> str:
    return value[2:] if value.startswith(("0x", "0X")) else value


def hex_to_bytes(value: str, length: int | None = None) -> bytes:
    digits = strip_hex_prefix(value)
    if len(digits) % 2 or not _HEX_RE.fullmatch(digits):
        raise FormatError(f"Invalid hex literal: {value!r}")
    raw = bytes.fromhex(digits)
    if length is not None and len(raw) != length:
        raise FormatError(f"Expected {length} bytes, got {len(raw)}: {value!r}")
    return raw


def hex_to_address(value: str) -> bytes:
    return hex_to_bytes(value, ADDRESS_LENGTH)


def hex_to_hash(value: str) -> bytes:
    return hex_to_bytes(value, HASH_LENGTH)


def bytes_to_hex(data: bytes) -> str:
    return "0x" + data.hex()


def concat_bytes(*parts: bytes) -> bytes:
    return b"".join(parts)


def as_address(value: str | bytes) -> bytes:
    """Normalize a 0x-prefixed hex address or raw 20 bytes to raw bytes."""
    if isinstance(value, (bytes, bytearray)):
        if len(value) != ADDRESS_LENGTH:
            raise FormatError(f"Expected {ADDRESS_LENGTH} address bytes, got {len(value)}")
        return bytes(value)
    return hex_to_address(value)


def as_hash(value: str | bytes) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        if len(value) != HASH_LENGTH:
            raise FormatError(f"Expected {HASH_LENGTH} hash bytes, got {len(value)}")
        return bytes(value)
    return hex_to_hash(value)
