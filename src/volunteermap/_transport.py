"""JSON-over-HTTP transport for the events backend."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Protocol

import aiohttp

from volunteermap._redact import redact_for_log
from volunteermap.config import VolunteerMapConfig
from volunteermap.exceptions import TransportError

_logger = logging.getLogger(__name__)

_JSON_HEADERS: dict[str, str] = {
    "accept": "application/json",
    "content-type": "application/json; charset=UTF-8",
}


class Transport(Protocol):
    """Structural transport interface used by the client.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, endpoint: str) -> Any:
        ...

    async def post_json(self, endpoint: str, payload: Any) -> Any:
        ...


class HttpTransport:
    """aiohttp transport that maps every failure to :class:`TransportError`."""

    def __init__(self, config: VolunteerMapConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    def _url(self, endpoint: str) -> str:
        return f"{self._config.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    async def get_json(self, endpoint: str) -> Any:
        return await self._request("GET", endpoint)

    async def post_json(self, endpoint: str, payload: Any) -> Any:
        return await self._request("POST", endpoint, payload)

    async def _request(self, method: str, endpoint: str, payload: Any = None) -> Any:
        url = self._url(endpoint)
        body = None if payload is None else json.dumps(payload, separators=(",", ":"))

        _logger.debug("%s %s %s", method, url, redact_for_log(payload) if payload is not None else "")

        try:
            async with self._http.request(
                method,
                url,
                data=body,
                headers=_JSON_HEADERS,
                timeout=self._timeout,
            ) as resp:
                text = await resp.text()
                if not 200 <= resp.status < 300:
                    raise TransportError(
                        f"HTTP {resp.status} from {endpoint}: {text[:200]}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except TransportError:
            raise
        except asyncio.TimeoutError as exc:
            raise TransportError(f"Request to {endpoint} timed out", endpoint=endpoint) from exc
        except aiohttp.ClientError as exc:
            raise TransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc

        if not text.strip():
            return None

        try:
            result = json.loads(text)
        except json.JSONDecodeError as exc:
            raise TransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                status_code=resp.status,
                endpoint=endpoint,
            ) from exc

        _logger.debug("%s %s -> %s %s", method, url, resp.status, redact_for_log(result))
        return result
