__all__ = [
    # Errors
    "DecodeError",
    "FormatError",
    "InvocationError",
    "RangeError",
    "SchemaValidationError",
    # Numeric decoding
    "decode_quantity",
    "decode_uint64",
    "to_fixed_point",
    # EVM words
    "decode_signed",
    "decode_unsigned",
    "encode_address",
    "encode_signed",
    "encode_unsigned",
    # ABI calls
    "CallArgs",
    "FunctionSelector",
    "SELECTORS",
    "build_call_data",
    "hex_to_function_selector",
    # Receipts
    "Log",
    "RunLogKind",
    "TxReceipt",
    # RPC
    "Caller",
    "EthClient",
    "HttpCaller",
    # Config
    "load_env",
]

from .config import load_env
from .codec.numeric import DecodeError, decode_quantity, decode_uint64, to_fixed_point
from .codec.word import (
    RangeError,
    decode_signed,
    decode_unsigned,
    encode_address,
    encode_signed,
    encode_unsigned,
)
from .model.receipt import Log, RunLogKind, TxReceipt
from .model.schemas import SchemaValidationError
from .pneuma.abi import (
    SELECTORS,
    CallArgs,
    FunctionSelector,
    build_call_data,
    hex_to_function_selector,
)
from .pneuma.client import EthClient
from .pneuma.rpc import Caller, HttpCaller, InvocationError
from .utils import FormatError
