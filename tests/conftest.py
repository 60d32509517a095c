from __future__ import annotations

from typing import Any

import pytest

from oraculum.model.receipt import (
    CHAINLINK_FULFILLED_TOPIC,
    CHAINLINK_REQUESTED_TOPIC,
    ORACLE_REQUEST_TOPIC,
    event_topic,
)
from oraculum.pneuma.client import EthClient
from oraculum.utils import bytes_to_hex

TRANSFER_TOPIC = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
ERC677_TRANSFER_TOPIC = bytes_to_hex(event_topic("Transfer(address,address,uint256,bytes)"))

BASIC_TX_HASH = "0xb903239f8543d04b5dc1ba6579132b143087c68db1b2168786408fcbce568238"
BLOCK_HASH = "0x2b5ee6e1a6ff1f9a4b7e6e1d53b1a5b1bd14aea1b9d1b61e0ffdb3c29e2c1c8e"

LINK_TOKEN = "0x20fe562d797a42dcb3399062ae9546cd06f63280"
ORACLE = "0xc99b3d447826532722e41bc36e644ba3479e4365"
CONSUMER = "0x0ca4bb9c78be09c1e1e0c1d5e8ba76fb1e6c0b47"


def make_address(n: int) -> str:
    return "0x" + n.to_bytes(20, "big").hex()


def _word(n: int) -> str:
    return "0x" + n.to_bytes(32, "big").hex()


def _log(address: str, topics: list[str], data: str, index: int, tx_hash: str) -> dict[str, Any]:
    return {
        "address": address,
        "topics": topics,
        "data": data,
        "blockNumber": "0xb",
        "blockHash": BLOCK_HASH,
        "transactionHash": tx_hash,
        "transactionIndex": "0x0",
        "logIndex": hex(index),
        "removed": False,
    }


def basic_receipt() -> dict[str, Any]:
    return {
        "transactionHash": BASIC_TX_HASH,
        "transactionIndex": "0x0",
        "blockHash": BLOCK_HASH,
        "blockNumber": "0xb",
        "cumulativeGasUsed": "0x5208",
        "gasUsed": "0x5208",
        "contractAddress": None,
        "logs": [],
        "logsBloom": "0x" + "00" * 256,
        "status": "0x1",
    }


def runlog_request_receipt() -> dict[str, Any]:
    tx_hash = _word(0xA11CE)
    request_id = _word(0x1D)
    logs = [
        _log(LINK_TOKEN, [TRANSFER_TOPIC, _word(0xC0), _word(0x0C)], _word(10**18), 0, tx_hash),
        _log(LINK_TOKEN, [ERC677_TRANSFER_TOPIC, _word(0xC0), _word(0x0C)], "0x" + "00" * 96, 1, tx_hash),
        _log(ORACLE, [bytes_to_hex(ORACLE_REQUEST_TOPIC), _word(0x5EC)], "0x" + "00" * 288, 2, tx_hash),
        _log(CONSUMER, [bytes_to_hex(CHAINLINK_REQUESTED_TOPIC), request_id], "0x", 3, tx_hash),
    ]
    return {
        "transactionHash": tx_hash,
        "blockHash": BLOCK_HASH,
        "blockNumber": "0xb",
        "status": "0x1",
        "logs": logs,
    }


def runlog_response_receipt() -> dict[str, Any]:
    tx_hash = _word(0xB0B)
    request_id = _word(0x1D)
    logs = [
        _log(CONSUMER, [bytes_to_hex(CHAINLINK_FULFILLED_TOPIC), request_id], "0x", 0, tx_hash),
        _log(CONSUMER, [bytes_to_hex(event_topic("RequestFulfilled(bytes32,bytes32)")), request_id], _word(3600), 1, tx_hash),
    ]
    return {
        "transactionHash": tx_hash,
        "blockHash": BLOCK_HASH,
        "blockNumber": "0xc",
        "status": "0x1",
        "logs": logs,
    }


class FakeCaller:
    """Records calls and answers them from a method -> result table."""

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self.responses: dict[str, Any] = dict(responses or {})
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def register(self, method: str, result: Any) -> None:
        self.responses[method] = result

    def call(self, method: str, *args: Any) -> Any:
        self.calls.append((method, args))
        if method not in self.responses:
            raise AssertionError(f"Unexpected RPC call: {method}")
        result = self.responses[method]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def caller() -> FakeCaller:
    return FakeCaller()


@pytest.fixture
def client(caller: FakeCaller) -> EthClient:
    return EthClient(caller)
