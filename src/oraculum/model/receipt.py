"""
Receipt & Log Model - Transaction receipts and their event logs.

Receipts are built once from the raw eth_getTransactionReceipt result
and never mutated.  A missing block number means the transaction has
not been mined yet.

Run-log detection works on log topics: an oracle response transaction
emits ChainlinkFulfilled(bytes32) from the consumer contract, while a
request transaction emits OracleRequest / ChainlinkRequested alongside
LINK transfer events.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from eth_hash.auto import keccak

from ..codec.numeric import decode_data, decode_quantity
from .schemas import TX_RECEIPT_SCHEMA, SchemaRegistry


def event_topic(signature: str) -> bytes:
    """Topic 0 of an event, keccak256 of its canonical signature."""
    return keccak(signature.encode("utf-8"))


CHAINLINK_FULFILLED_TOPIC = event_topic("ChainlinkFulfilled(bytes32)")
CHAINLINK_REQUESTED_TOPIC = event_topic("ChainlinkRequested(bytes32)")
ORACLE_REQUEST_TOPIC = event_topic(
    "OracleRequest(bytes32,address,bytes32,uint256,address,bytes4,uint256,uint256,bytes)"
)

_REQUEST_TOPICS = frozenset({CHAINLINK_REQUESTED_TOPIC, ORACLE_REQUEST_TOPIC})

EMPTY_HASH = b"\x00" * 32


class RunLogKind(str, Enum):
    NONE = "none"
    REQUEST = "request"
    RESPONSE = "response"


def _optional_quantity(value: Any) -> Optional[int]:
    return None if value is None else decode_quantity(value)


def _optional_bytes(value: Any) -> Optional[bytes]:
    return None if value is None else decode_data(value)


@dataclass(frozen=True)
class Log:
    address: bytes
    topics: tuple[bytes, ...] = ()
    data: bytes = b""
    block_number: Optional[int] = None
    block_hash: Optional[bytes] = None
    tx_hash: Optional[bytes] = None
    tx_index: Optional[int] = None
    log_index: Optional[int] = None
    removed: bool = False

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Log":
        # Shape is validated by the receipt schema before this runs.
        return cls(
            address=decode_data(payload["address"]),
            topics=tuple(decode_data(t) for t in payload.get("topics") or ()),
            data=decode_data(payload.get("data", "0x")),
            block_number=_optional_quantity(payload.get("blockNumber")),
            block_hash=_optional_bytes(payload.get("blockHash")),
            tx_hash=_optional_bytes(payload.get("transactionHash")),
            tx_index=_optional_quantity(payload.get("transactionIndex")),
            log_index=_optional_quantity(payload.get("logIndex")),
            removed=bool(payload.get("removed", False)),
        )

    @property
    def topic0(self) -> Optional[bytes]:
        return self.topics[0] if self.topics else None


@dataclass(frozen=True)
class TxReceipt:
    hash: bytes
    block_number: Optional[int] = None
    block_hash: Optional[bytes] = None
    logs: tuple[Log, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(
        cls,
        payload: dict[str, Any],
        registry: SchemaRegistry | None = None,
        default_hash: bytes | None = None,
    ) -> "TxReceipt":
        """
        Build a receipt from a raw eth_getTransactionReceipt result.

        Args:
            payload: Decoded JSON result
            registry: Schema registry (default: the bundled schemas)
            default_hash: Hash to use when the node omits transactionHash;
                without one, a missing hash leaves the receipt unconfirmed

        Raises:
            SchemaValidationError: If the payload does not match the schema
        """
        registry = registry or SchemaRegistry.default()
        registry.validate_instance(payload, TX_RECEIPT_SCHEMA)
        raw_hash = payload.get("transactionHash")
        if raw_hash is not None:
            tx_hash = decode_data(raw_hash)
        else:
            tx_hash = default_hash if default_hash is not None else EMPTY_HASH
        return cls(
            hash=tx_hash,
            block_number=_optional_quantity(payload.get("blockNumber")),
            block_hash=_optional_bytes(payload.get("blockHash")),
            logs=tuple(Log.from_dict(entry) for entry in payload.get("logs") or ()),
        )

    @classmethod
    def pending(cls, tx_hash: bytes) -> "TxReceipt":
        """Receipt for a transaction the node does not know as mined."""
        return cls(hash=tx_hash)

    def unconfirmed(self) -> bool:
        return not any(self.hash) or self.block_number is None

    def classify_run_log(self) -> RunLogKind:
        topics = {log.topic0 for log in self.logs if log.topic0 is not None}
        if CHAINLINK_FULFILLED_TOPIC in topics:
            return RunLogKind.RESPONSE
        if topics & _REQUEST_TOPICS:
            return RunLogKind.REQUEST
        return RunLogKind.NONE

    def fulfilled_run_log(self) -> bool:
        """True if this receipt is the result of a fulfilled run log."""
        return self.classify_run_log() is RunLogKind.RESPONSE
