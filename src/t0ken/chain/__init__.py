"""
Chain - On-chain interaction layer for the t0ken CLI.

Provides the JSON-RPC connection, artifact loading, read-only call
sessions, nonce allocation and transaction submission.

Uses httpx + eth-account + eth-abi instead of the heavyweight web3.py.
"""
