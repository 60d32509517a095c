"""
Pneuma - On-chain read layer for Oraculum.

Provides function selectors and call encoding, the JSON-RPC invocation
capability, and the typed client facade built on top of it.

Uses httpx + eth-abi + eth-hash instead of the heavyweight web3.py.
"""
