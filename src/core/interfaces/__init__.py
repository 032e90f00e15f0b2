"""Core interfaces/abstractions.

Why:
- Defines the contracts (Protocol) that concrete adapters implement.
- Inverts dependencies: commands depend on abstractions, so faucet and
  REST clients can be swapped for fakes in tests.
"""
