"""Transaction confirmation contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Deadline, PendingTransactionId


@runtime_checkable
class ConfirmationClient(Protocol):
    """Blocks until a transaction is committed or the deadline passes.

    Raises `ConfirmationTimeoutError` once `deadline` has elapsed and
    `TransportError` (or its `ApiError` subclass) on any endpoint failure.
    """

    async def wait_for_confirmation(self, txn_id: PendingTransactionId, deadline: Deadline) -> None:
        ...
