"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts and headers for the faucet and REST endpoints.
- Makes testing easy: a `httpx.MockTransport` can be plugged in.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.domain.errors import ApiError, TransportError


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with sane defaults.

    Why a builder:
    - Every adapter behaves the same way (timeouts, User-Agent, JSON).
    - Tests inject a transport instead of patching httpx.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def transport_error(exc: httpx.HTTPError, what: str) -> TransportError:
    """Translate an httpx failure into the CLI error taxonomy."""

    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        return ApiError(
            f"{what} failed with HTTP {response.status_code}: {response.text.strip()[:500]}",
            status_code=response.status_code,
        )
    return TransportError(f"{what} failed: {exc.__class__.__name__}: {exc}")
