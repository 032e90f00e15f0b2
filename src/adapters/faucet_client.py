"""Faucet adapter over HTTP.

The faucet mints coins into an account by submitting one or more
transactions and answers with their hashes, in submission order.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from adapters.http_client import build_async_client, transport_error
from core.config import AppSettings
from core.domain.errors import ApiError
from core.domain.models import PendingTransactionId, canonical_address
from core.interfaces.faucet import FaucetClient

logger = logging.getLogger(__name__)

_HASHES = TypeAdapter(list[str])


class HttpFaucetClient(FaucetClient):
    """`POST {faucet_url}/mint?amount=N&address=0x...` -> JSON list of hashes."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def request_funds(
        self, faucet_url: str, amount: int, address: str
    ) -> list[PendingTransactionId]:
        url = f"{faucet_url.rstrip('/')}/mint"
        params = {"amount": str(amount), "address": canonical_address(address)}
        logger.info("Requesting %d coins for %s from %s", amount, address, faucet_url)

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.post(url, params=params)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            raise transport_error(exc, "faucet request") from exc

        try:
            hashes = _HASHES.validate_json(response.content)
        except ValidationError as exc:
            raise ApiError(
                f"faucet returned an unexpected body: {response.text.strip()[:200]!r}",
                status_code=response.status_code,
            ) from exc

        logger.debug("Faucet submitted %d transaction(s): %s", len(hashes), hashes)
        return [PendingTransactionId(h) for h in hashes]
