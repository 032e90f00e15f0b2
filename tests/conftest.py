"""Shared fixtures and fake collaborators."""

from __future__ import annotations

import time
from typing import Callable, Iterable

import pytest

from core.config import AppSettings
from core.domain.errors import CliError, ConfirmationTimeoutError
from core.domain.models import Deadline, PendingTransactionId


class FakeFaucet:
    """Faucet double returning fixed ids and recording every request."""

    def __init__(self, ids: Iterable[str] = (), error: CliError | None = None) -> None:
        self.ids = [PendingTransactionId(i) for i in ids]
        self.error = error
        self.calls: list[tuple[str, int, str]] = []

    async def request_funds(
        self, faucet_url: str, amount: int, address: str
    ) -> list[PendingTransactionId]:
        self.calls.append((faucet_url, amount, address))
        if self.error is not None:
            raise self.error
        return list(self.ids)


class RecordingConfirmer:
    """Confirmation double recording the order of polled ids.

    Times out when the deadline has passed (per `clock`) or when the id is in
    `timeout_on`; raises `errors[id]` when given.
    """

    def __init__(
        self,
        *,
        timeout_on: Iterable[str] = (),
        errors: dict[str, CliError] | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.timeout_on = set(timeout_on)
        self.errors = errors or {}
        self.clock = clock
        self.polled: list[str] = []
        self.deadlines: list[Deadline] = []

    async def wait_for_confirmation(self, txn_id: PendingTransactionId, deadline: Deadline) -> None:
        self.polled.append(txn_id)
        self.deadlines.append(deadline)
        if deadline.expired(self.clock()) or txn_id in self.timeout_on:
            raise ConfirmationTimeoutError(txn_id, deadline.epoch_seconds)
        if txn_id in self.errors:
            raise self.errors[txn_id]


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        default_rest_url="http://rest.test/v1",
        default_faucet_url="http://faucet.test",
        poll_interval_seconds=0.01,
    )


@pytest.fixture
def fake_faucet() -> FakeFaucet:
    return FakeFaucet(ids=["T1", "T2"])


@pytest.fixture
def confirmer() -> RecordingConfirmer:
    return RecordingConfirmer()
