# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed Transport implementations."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from ..config import HttpSettings, load_http_settings
from .transport import BaseTransport

logger = logging.getLogger(__name__)


class _HttpxTransportBase(BaseTransport):
    def __init__(self, settings: HttpSettings | None = None) -> None:
        super().__init__()
        self.settings = settings or load_http_settings()

    def _client_options(self) -> dict[str, Any]:
        return {
            "follow_redirects": self.settings.allow_redirects,
            "timeout": self.settings.timeout,
            "verify": self.settings.verify_ssl,
        }

    def _request_kwargs(self, body: Any) -> dict[str, Any]:
        headers = dict(self.request_headers)
        if not any(name.lower() == "user-agent" for name in headers):
            headers["User-Agent"] = self.settings.user_agent
        kwargs: dict[str, Any] = {"headers": headers, "auth": self.auth}
        if isinstance(body, Mapping):
            kwargs["data"] = dict(body)
        elif body is not None:
            kwargs["content"] = body
        return kwargs

    def _load_response(self, resp: httpx.Response) -> None:
        self._load(resp.status_code, resp.reason_phrase, resp.text, dict(resp.headers))


class HttpxTransport(_HttpxTransportBase):
    """
    Blocking transport; the exchange completes inside ``send``.

    Handlers registered before dispatch fire during ``send`` and any registered
    afterwards fire at registration time.
    """

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        super().__init__(settings)
        self._client = client

    def send(self, body: Any = None) -> None:
        self._check_sendable()
        client = self._client or httpx.Client(**self._client_options())
        try:
            resp = client.request(self.method, self.url, **self._request_kwargs(body))
        except Exception as exc:  # noqa: BLE001
            logger.debug("%s %s failed: %s", self.method, self.url, exc)
            self._fail(exc)
            return
        finally:
            if self._client is None:
                client.close()
        self._load_response(resp)


class AsyncHttpxTransport(_HttpxTransportBase):
    """
    asyncio transport; ``send`` schedules the exchange on the running loop and returns.

    Completion hooks fire from the scheduled task. ``wait`` lets a coroutine
    block until the exchange (and its hooks) have finished and re-raises any
    handler error; without it such errors are only traced at DEBUG level.
    """

    def __init__(self, settings: HttpSettings | None = None, client: httpx.AsyncClient | None = None):
        super().__init__(settings)
        self._client = client
        self._task: asyncio.Task[None] | None = None

    def send(self, body: Any = None) -> None:
        self._check_sendable()
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._exchange(body))
        self._task.add_done_callback(self._collect)

    async def wait(self) -> None:
        if self._task is not None:
            await self._task

    def _collect(self, task: asyncio.Task[None]) -> None:
        # Handler errors surface through wait(); unawaited tasks only trace them.
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.debug("Completion handler for %s %s raised: %r", self.method, self.url, exc)

    async def _exchange(self, body: Any) -> None:
        client = self._client or httpx.AsyncClient(**self._client_options())
        try:
            resp = await client.request(self.method, self.url, **self._request_kwargs(body))
        except Exception as exc:  # noqa: BLE001
            logger.debug("%s %s failed: %s", self.method, self.url, exc)
            self._fail(exc)
            return
        finally:
            if self._client is None:
                await client.aclose()
        self._load_response(resp)


def create_default_transport(settings: HttpSettings | None = None) -> BaseTransport:
    """Pick the asyncio transport inside a running event loop, else the blocking one."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return HttpxTransport(settings)
    return AsyncHttpxTransport(settings)


__all__ = ["AsyncHttpxTransport", "HttpxTransport", "create_default_transport"]
