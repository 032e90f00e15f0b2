"""Faucet funding contract.

Why Protocol:
- Structural contract (duck typing) with no rigid inheritance.
- The HTTP adapter and test fakes are interchangeable.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import PendingTransactionId


@runtime_checkable
class FaucetClient(Protocol):
    """Minimal contract for a faucet.

    Design rules:
    - `request_funds` is async because it does HTTP I/O.
    - Returns the submitted transactions in submission order; later ids may
      depend on earlier ones being committed first.
    - Failures are raised as `TransportError`.
    """

    async def request_funds(
        self, faucet_url: str, amount: int, address: str
    ) -> list[PendingTransactionId]:
        ...
