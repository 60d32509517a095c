"""
Codec - Pure decoders and encoders for JSON-RPC values.

- numeric: hex/decimal quantity strings to exact ints and Decimals
- word:    32-byte EVM words (unsigned and two's-complement signed)

Nothing here performs I/O.
"""
