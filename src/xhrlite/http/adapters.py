# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Programmable transports for tests and offline use."""

from __future__ import annotations

from typing import Any

from .models import Headers
from .transport import BaseTransport


class StubTransport(BaseTransport):
    """
    Deterministic Transport.

    By default ``send`` completes immediately with the configured response or
    error. With ``deferred=True`` it only records the request; call
    ``respond()`` or ``error_out()`` later to drive completion.
    """

    def __init__(
        self,
        status: int = 200,
        body: Any = "",
        *,
        status_text: str = "OK",
        headers: Headers | None = None,
        error: BaseException | None = None,
        deferred: bool = False,
        supports_cors: bool = True,
    ):
        super().__init__()
        self.supports_cors = supports_cors
        self._stub_status = status
        self._stub_body = body
        self._stub_status_text = status_text
        self._stub_headers = dict(headers or {})
        self._stub_error = error
        self._deferred = deferred
        self.sent = False
        self.sent_body: Any = None

    def send(self, body: Any = None) -> None:
        self._check_sendable()
        self.sent = True
        self.sent_body = body
        if self._deferred:
            return
        if self._stub_error is not None:
            self._fail(self._stub_error)
        else:
            self.respond()

    def respond(
        self,
        status: int | None = None,
        body: Any = None,
        *,
        status_text: str | None = None,
        headers: Headers | None = None,
    ) -> None:
        self._load(
            self._stub_status if status is None else status,
            self._stub_status_text if status_text is None else status_text,
            self._stub_body if body is None else body,
            self._stub_headers if headers is None else dict(headers),
        )

    def error_out(self, error: BaseException | None = None) -> None:
        self._fail(error or self._stub_error or ConnectionError("stubbed connection failure"))


__all__ = ["StubTransport"]
