"""
ABI Call Encoder - Function selectors and eth_call arguments.

Selectors for the contracts this client polls are fixed 4-byte literals
(first 4 bytes of keccak256 of the function signature), kept in a
read-only registry.  Call data is the selector followed by 32-byte
argument words, with no separators.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from eth_hash.auto import keccak

from ..codec.word import WORD_LENGTH
from ..utils import FormatError, as_address, bytes_to_hex, concat_bytes, hex_to_bytes

SELECTOR_LENGTH = 4

# Default block tag for eth_call
LATEST_BLOCK = "latest"


@dataclass(frozen=True)
class FunctionSelector:
    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != SELECTOR_LENGTH:
            raise FormatError(
                f"Function selector must be {SELECTOR_LENGTH} bytes, got {len(self.value)}"
            )

    @classmethod
    def from_signature(cls, signature: str) -> "FunctionSelector":
        """Derive the selector for e.g. "balanceOf(address)"."""
        # NOTE: Keccak-256 != SHA3-256 (NIST). Never use hashlib.sha3_256 here.
        return cls(keccak(signature.encode("utf-8"))[:SELECTOR_LENGTH])

    @property
    def bytes(self) -> bytes:
        return self.value

    def hex(self) -> str:
        return self.value.hex()

    def __str__(self) -> str:
        return bytes_to_hex(self.value)


def hex_to_function_selector(literal: str) -> FunctionSelector:
    """
    Parse a selector literal such as "50d25bcd" or "0x50d25bcd".

    Raises:
        FormatError: If the literal is not valid hex or not exactly 4 bytes
    """
    return FunctionSelector(hex_to_bytes(literal, SELECTOR_LENGTH))


# Chainlink aggregator latestAnswer()
AGGREGATOR_LATEST_ANSWER = hex_to_function_selector("50d25bcd")
# Chainlink aggregator latestRound()
AGGREGATOR_LATEST_ROUND = hex_to_function_selector("668a0f02")
# Chainlink aggregator latestSubmission(address)
AGGREGATOR_LATEST_SUBMISSION = hex_to_function_selector("bb07bacd")
# ERC-20 balanceOf(address)
ERC20_BALANCE_OF = hex_to_function_selector("70a08231")

SELECTORS: Mapping[str, FunctionSelector] = MappingProxyType(
    {
        "latestAnswer": AGGREGATOR_LATEST_ANSWER,
        "latestRound": AGGREGATOR_LATEST_ROUND,
        "latestSubmission": AGGREGATOR_LATEST_SUBMISSION,
        "balanceOf": ERC20_BALANCE_OF,
    }
)


def build_call_data(selector: FunctionSelector, *words: bytes) -> bytes:
    """
    Concatenate a selector and its argument words.

    Args:
        selector: Function selector
        words: Pre-encoded 32-byte argument words, in argument order

    Returns:
        Raw call data (4 + 32 * len(words) bytes)
    """
    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise FormatError(
                f"Argument {index} must be a {WORD_LENGTH}-byte word, got {len(word)} bytes"
            )
    return concat_bytes(selector.bytes, *words)


@dataclass(frozen=True)
class CallArgs:
    to: bytes
    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "to", as_address(self.to))
        object.__setattr__(self, "data", bytes(self.data))

    def to_params(self) -> dict[str, Any]:
        """Render as the JSON-RPC call object."""
        return {"to": bytes_to_hex(self.to), "data": bytes_to_hex(self.data)}
