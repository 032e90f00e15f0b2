"""Fullnode REST adapter: transaction confirmation polling.

Polls `GET {rest_url}/transactions/by_hash/{hash}` until the transaction is
committed or the shared deadline passes. A 404 or a `pending_transaction`
body means "not committed yet".
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable

import httpx
from pydantic import BaseModel, ValidationError
from pydantic.config import ConfigDict

from adapters.http_client import build_async_client, transport_error
from core.config import AppSettings
from core.domain.errors import ApiError, ConfirmationTimeoutError
from core.domain.models import Deadline, PendingTransactionId
from core.interfaces.confirmation import ConfirmationClient

logger = logging.getLogger(__name__)

PENDING_TRANSACTION_TYPE = "pending_transaction"


class TransactionStatus(BaseModel):
    """The subset of a REST transaction body needed to decide confirmation."""

    model_config = ConfigDict(extra="ignore")

    type: str
    hash: str | None = None
    success: bool | None = None
    vm_status: str | None = None

    @property
    def pending(self) -> bool:
        return self.type == PENDING_TRANSACTION_TYPE


class RestClient(ConfirmationClient):
    def __init__(
        self,
        rest_url: str,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._base_url = rest_url.rstrip("/")
        self._settings = settings or AppSettings()
        self._transport = transport
        self._clock = clock

    async def wait_for_confirmation(self, txn_id: PendingTransactionId, deadline: Deadline) -> None:
        url = f"{self._base_url}/transactions/by_hash/{txn_id}"
        interval = self._settings.poll_interval_seconds
        polls = 0

        async with build_async_client(self._settings, transport=self._transport) as client:
            while True:
                if deadline.expired(self._clock()):
                    logger.info("Gave up on %s after %d poll(s)", txn_id, polls)
                    raise ConfirmationTimeoutError(txn_id, deadline.epoch_seconds)

                polls += 1
                try:
                    # The in-flight request is cut off at the deadline too.
                    async with asyncio.timeout(deadline.remaining(self._clock())):
                        status = await self._fetch_status(client, url, txn_id)
                except TimeoutError as exc:
                    logger.info("Poll %d for %s still in flight at the deadline", polls, txn_id)
                    raise ConfirmationTimeoutError(txn_id, deadline.epoch_seconds) from exc
                if status is not None and not status.pending:
                    if status.success is False:
                        raise ApiError(
                            f"transaction {txn_id} failed: {status.vm_status or 'unknown vm status'}"
                        )
                    logger.debug("Transaction %s committed after %d poll(s)", txn_id, polls)
                    return

                await asyncio.sleep(min(interval, deadline.remaining(self._clock())))

    async def _fetch_status(
        self, client: httpx.AsyncClient, url: str, txn_id: PendingTransactionId
    ) -> TransactionStatus | None:
        """One poll; `None` when the node does not know the hash yet."""

        try:
            response = await client.get(url)
            if response.status_code == 404:
                logger.debug("Transaction %s not found yet", txn_id)
                return None
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise transport_error(exc, f"confirmation poll for {txn_id}") from exc

        try:
            return TransactionStatus.model_validate_json(response.content)
        except ValidationError as exc:
            raise ApiError(
                f"unexpected transaction body for {txn_id}: {response.text.strip()[:200]!r}",
                status_code=response.status_code,
            ) from exc
