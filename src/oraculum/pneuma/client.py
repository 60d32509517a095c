"""
Eth Client - Typed read operations over a JSON-RPC `Caller`.

Each operation issues exactly one RPC call and decodes its result.
Errors raised by the caller propagate unchanged.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from ..codec.numeric import (
    DecodeError,
    decode_data,
    decode_fixed_bytes,
    decode_fixed_point,
    decode_quantity,
    decode_uint64,
)
from ..codec.word import WORD_LENGTH, decode_signed, decode_unsigned, encode_address, split_words
from ..model.receipt import TxReceipt
from ..utils import HASH_LENGTH, as_address, as_hash, bytes_to_hex
from .abi import (
    AGGREGATOR_LATEST_ANSWER,
    AGGREGATOR_LATEST_ROUND,
    AGGREGATOR_LATEST_SUBMISSION,
    ERC20_BALANCE_OF,
    LATEST_BLOCK,
    CallArgs,
    build_call_data,
)
from .rpc import Caller

package_logger = logging.getLogger("oraculum")
logger = package_logger.getChild("client")

# wei -> ether
ETH_PRECISION = 18


class EthClient:
    """
    Read-side Ethereum client.

    Args:
        caller: JSON-RPC invocation capability (e.g. HttpCaller)
    """

    def __init__(self, caller: Caller) -> None:
        self.caller = caller

    def _eth_call(self, call_args: CallArgs) -> str:
        logger.debug("eth_call to=%s data=%s", bytes_to_hex(call_args.to), bytes_to_hex(call_args.data))
        return self.caller.call("eth_call", call_args, LATEST_BLOCK)

    def get_tx_receipt(self, tx_hash: str | bytes) -> TxReceipt:
        """
        Fetch a transaction receipt.

        Returns:
            The receipt, or a pending receipt echoing `tx_hash` if the node
            has none yet
        """
        tx_hash = as_hash(tx_hash)
        logger.debug("eth_getTransactionReceipt %s", bytes_to_hex(tx_hash))
        result = self.caller.call("eth_getTransactionReceipt", bytes_to_hex(tx_hash))
        if result is None:
            logger.debug("No receipt yet for %s", bytes_to_hex(tx_hash))
            return TxReceipt.pending(tx_hash)
        return TxReceipt.from_dict(result, default_hash=tx_hash)

    def get_nonce(self, address: str | bytes) -> int:
        """Get the transaction count (nonce) for an address."""
        address_hex = bytes_to_hex(as_address(address))
        logger.debug("eth_getTransactionCount %s", address_hex)
        result = self.caller.call("eth_getTransactionCount", address_hex, LATEST_BLOCK)
        return decode_uint64(result)

    def send_raw_tx(self, signed_tx: str) -> bytes:
        """
        Broadcast a signed raw transaction.

        Args:
            signed_tx: 0x-prefixed hex encoded signed transaction

        Returns:
            32-byte transaction hash
        """
        logger.debug("eth_sendRawTransaction (%d hex chars)", len(signed_tx))
        result = self.caller.call("eth_sendRawTransaction", signed_tx)
        return decode_fixed_bytes(result, HASH_LENGTH)

    def get_eth_balance(self, address: str | bytes) -> Decimal:
        """Get the ether balance of an address (wei scaled by 10**18)."""
        address_hex = bytes_to_hex(as_address(address))
        logger.debug("eth_getBalance %s", address_hex)
        result = self.caller.call("eth_getBalance", address_hex, LATEST_BLOCK)
        return decode_fixed_point(result, ETH_PRECISION)

    def get_erc20_balance(self, address: str | bytes, token: str | bytes) -> int:
        """Get the raw ERC-20 balance of `address` held on contract `token`."""
        data = build_call_data(ERC20_BALANCE_OF, encode_address(address))
        return decode_quantity(self._eth_call(CallArgs(to=token, data=data)))

    def get_aggregator_price(self, address: str | bytes, precision: int) -> Decimal:
        """Read an aggregator's latestAnswer scaled down by 10**precision."""
        result = self._eth_call(CallArgs(to=address, data=AGGREGATOR_LATEST_ANSWER.bytes))
        return decode_fixed_point(result, precision)

    def get_aggregator_round(self, address: str | bytes) -> int:
        result = self._eth_call(CallArgs(to=address, data=AGGREGATOR_LATEST_ROUND.bytes))
        return decode_quantity(result)

    def get_latest_submission(
        self, aggregator: str | bytes, oracle: str | bytes
    ) -> tuple[int, int]:
        """
        Read the latest (answer, round) an oracle submitted to an aggregator.

        The return data is two stacked words: a signed answer followed by
        an unsigned round.
        """
        data = build_call_data(AGGREGATOR_LATEST_SUBMISSION, encode_address(oracle))
        payload = decode_data(self._eth_call(CallArgs(to=aggregator, data=data)))
        if len(payload) < 2 * WORD_LENGTH:
            raise DecodeError(
                f"latestSubmission returned {len(payload)} bytes, expected {2 * WORD_LENGTH}",
                payload,
            )
        answer_word, round_word = split_words(payload[: 2 * WORD_LENGTH])
        return decode_signed(answer_word), decode_unsigned(round_word)

    def get_chain_id(self) -> int:
        logger.debug("eth_chainId")
        return decode_quantity(self.caller.call("eth_chainId"))
