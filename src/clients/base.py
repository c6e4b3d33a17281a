"""Async HTTP client shared by the remote service clients."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from src.errors import MalformedResponseError, NotFoundError, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class BaseClient:
    """Issues authenticated JSON requests against one service's base URL.

    Every call opens its own ``httpx.AsyncClient`` and makes exactly one
    request. Non-2xx responses raise ``UpstreamError``; nothing is retried.
    """

    def __init__(
        self,
        base_url: str,
        service: str,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.service = service
        self.headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            **(headers or {}),
        }
        self.transport = transport
        self.timeout = timeout

    async def get(self, path: str, description: str, params: dict | None = None) -> Any:
        return await self._request("GET", path, description, params=params)

    async def post(self, path: str, description: str, body: dict | None = None) -> Any:
        return await self._request("POST", path, description, json=body)

    async def _request(self, method: str, path: str, description: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("Calling %s to %s: %s %s", self.service, description, method, url)

        async with httpx.AsyncClient(
            headers=self.headers, transport=self.transport, timeout=self.timeout
        ) as client:
            try:
                resp = await client.request(method, url, **kwargs)
            except httpx.HTTPError as e:
                logger.error("Calling %s to %s failed: %s %s: %s", self.service, description, method, url, e)
                raise UpstreamError(None, description, self.service) from e

        if resp.status_code == 404:
            logger.info("%s %s returned 404 while trying to %s", method, url, description)
            raise NotFoundError(resp.status_code, description, self.service)
        if not resp.is_success:
            logger.warning(
                "%s %s returned %s while trying to %s", method, url, resp.status_code, description
            )
            raise UpstreamError(resp.status_code, description, self.service)

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise MalformedResponseError(description, f"response body is not JSON: {e}") from e
