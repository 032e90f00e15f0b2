"""Domain models and errors.

Pure data structures (Pydantic v2) and the error taxonomy. The domain knows
nothing about HTTP or the CLI: only accounts, transactions and options.
"""
