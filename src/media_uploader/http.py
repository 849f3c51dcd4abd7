"""HTTP client helper for the prediction service."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

import httpx

from .config import settings


def _build_headers(user_agent: Optional[str]) -> Dict[str, str]:
    headers: Dict[str, str] = {"Accept": "application/json"}
    headers["User-Agent"] = user_agent or settings.user_agent
    return headers


@asynccontextmanager
async def http_client(
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    user_agent: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Provide a configured async HTTP client.

    ``transport`` lets callers swap the network layer, e.g. for
    ``httpx.MockTransport`` in tests.
    """

    async with httpx.AsyncClient(
        base_url=base_url or settings.api_base,
        timeout=timeout if timeout is not None else settings.request_timeout,
        headers=_build_headers(user_agent),
        transport=transport,
    ) as client:
        yield client


__all__ = ["http_client"]
