# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport abstraction driven by the request controller."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from .models import Headers

CompletionHook = Callable[[], None]


class Transport(Protocol):
    """
    Minimal XHR-shaped protocol for a single HTTP exchange.

    ``on_load`` fires once for any completed response (whatever the status),
    ``on_error`` fires once when no response could be obtained; ``error`` then
    holds the exception that caused it.
    """

    supports_cors: bool
    status: int | None
    status_text: str
    response: Any
    response_headers: Headers
    error: BaseException | None
    on_load: CompletionHook | None
    on_error: CompletionHook | None

    def open(self, method: str, url: str, user: str | None = None, password: str | None = None) -> None: ...

    def set_request_header(self, name: str, value: str) -> None: ...

    def send(self, body: Any = None) -> None: ...


class BaseTransport:
    """Bookkeeping shared by concrete transports; subclasses implement ``send``."""

    supports_cors = True

    def __init__(self) -> None:
        self.method: str | None = None
        self.url: str | None = None
        self.user: str | None = None
        self.password: str | None = None
        self.request_headers: Headers = {}
        self.status: int | None = None
        self.status_text = ""
        self.response: Any = None
        self.response_headers: Headers = {}
        self.error: BaseException | None = None
        self.on_load: CompletionHook | None = None
        self.on_error: CompletionHook | None = None
        self._opened = False
        self._done = False

    def open(self, method: str, url: str, user: str | None = None, password: str | None = None) -> None:
        self.method = method
        self.url = url
        self.user = user
        self.password = password
        self.request_headers = {}
        self._opened = True

    def set_request_header(self, name: str, value: str) -> None:
        if not self._opened:
            raise RuntimeError("set_request_header() called before open()")
        self.request_headers[name] = value

    def send(self, body: Any = None) -> None:  # pragma: no cover - abstract
        raise NotImplementedError

    @property
    def auth(self) -> tuple[str, str] | None:
        if self.user is None:
            return None
        return (self.user, self.password or "")

    def _check_sendable(self) -> None:
        if not self._opened:
            raise RuntimeError("send() called before open()")
        if self._done:
            raise RuntimeError("transport already completed; open a new one per call")

    def _load(self, status: int, status_text: str, body: Any, headers: Headers) -> None:
        self.status = status
        self.status_text = status_text
        self.response = body
        self.response_headers = headers
        self._done = True
        if self.on_load is not None:
            self.on_load()

    def _fail(self, exc: BaseException) -> None:
        self.status = 0
        self.status_text = ""
        self.error = exc
        self._done = True
        if self.on_error is not None:
            self.on_error()


__all__ = ["BaseTransport", "CompletionHook", "Transport"]
