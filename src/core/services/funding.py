"""Fund-and-confirm orchestration.

The faucet submits one or more transactions; the operation is complete only
once each of them is committed on chain. The workflow lives here, not in the
command, so it can be driven with fake clients in tests and reused by other
entry points.

Stages: requested -> submitted(ids) -> confirming(id, deadline) ->
confirmed | timed out | failed. Any failure aborts the whole operation and
the ids not yet polled are abandoned; there is no partial-success result.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from core.domain.models import Deadline
from core.interfaces.confirmation import ConfirmationClient
from core.interfaces.faucet import FaucetClient

logger = logging.getLogger(__name__)

# Bounds the wait for the whole batch, not for each transaction.
CONFIRMATION_GRACE_SECONDS = 10


@dataclass(frozen=True)
class FundingRequest:
    """Parameters of one funding operation."""

    faucet_url: str
    amount: int
    address: str


async def fund_and_confirm(
    request: FundingRequest,
    *,
    faucet: FaucetClient,
    confirmer: ConfirmationClient,
    clock: Callable[[], float] = time.time,
) -> None:
    """Request funds, then wait for every submitted transaction in order.

    An empty list from the faucet is trivially confirmed.
    """

    ids = await faucet.request_funds(request.faucet_url, request.amount, request.address)
    logger.debug("Faucet returned %d pending transaction(s) for %s", len(ids), request.address)

    deadline = Deadline.after(CONFIRMATION_GRACE_SECONDS, clock)

    for txn_id in ids:
        logger.debug("Waiting for %s (deadline %d)", txn_id, deadline.epoch_seconds)
        await confirmer.wait_for_confirmation(txn_id, deadline)

    logger.debug("Confirmed %d transaction(s) for %s: %s", len(ids), request.address, ids)
