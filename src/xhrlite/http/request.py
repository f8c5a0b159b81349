# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Request controller and the ``request`` entry point.

A ``Call`` owns one exchange from descriptor to outcome. Handlers may be
registered before or after the transport completes: a handler registered
once the call has resolved fires synchronously at registration, one
registered earlier fires exactly once at resolution.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial

from ..config import FORM_CONTENT_TYPE, HttpSettings
from ..errors import ErrorCategory, categorize_exception, error_category_to_reason
from .body import BodyParseError, parse_body
from .httpx_transport import create_default_transport
from .merge import Settings, build_descriptor
from .models import (
    AlwaysHandler,
    CallbackSet,
    CallState,
    DoneHandler,
    FailHandler,
    Outcome,
    RequestDescriptor,
    is_success_status,
)
from .transport import Transport

logger = logging.getLogger(__name__)

TransportFactory = Callable[[], Transport]

_ALWAYS = "always"
_DONE = "done"
_FAIL = "fail"


class Call:
    """Handle for one in-flight request exposing ``always``/``done``/``fail``/``then``."""

    def __init__(self, descriptor: RequestDescriptor):
        self._descriptor = descriptor
        self._callbacks = CallbackSet.from_descriptor(descriptor)
        self._state = CallState.UNRESOLVED
        self._outcome: Outcome | None = None
        self._transport: Transport | None = None
        # Handler kinds already run (or skipped) by resolution; registrations
        # for these kinds fire immediately instead of waiting.
        self._dispatched: set[str] = set()

    @property
    def descriptor(self) -> RequestDescriptor:
        return self._descriptor

    @property
    def state(self) -> CallState:
        return self._state

    @property
    def resolved(self) -> bool:
        return self._state is not CallState.UNRESOLVED

    @property
    def outcome(self) -> Outcome | None:
        return self._outcome

    @property
    def transport(self) -> Transport | None:
        return self._transport

    def always(self, fn: AlwaysHandler | None) -> Call:
        if fn is None:
            return self
        self._callbacks.always = fn
        if _ALWAYS in self._dispatched:
            fn(self._outcome)
        return self

    def done(self, fn: DoneHandler | None) -> Call:
        if fn is None:
            return self
        self._callbacks.done = fn
        if self._state is CallState.SUCCEEDED and _DONE in self._dispatched:
            fn(self._outcome.body, self._outcome)
        return self

    def fail(self, fn: FailHandler | None) -> Call:
        if fn is None:
            return self
        self._callbacks.fail = fn
        if self._state is CallState.ERRORED and _FAIL in self._dispatched:
            fn(self._outcome)
        return self

    def then(self, fn_done: DoneHandler | None, fn_fail: FailHandler | None = None) -> Call:
        self.done(fn_done)
        self.fail(fn_fail)
        return self

    def _start(self, transport_factory: TransportFactory, cors_transport_factory: TransportFactory | None) -> None:
        descriptor = self._descriptor
        if not descriptor.valid:
            logger.debug("Rejecting request without url")
            self._resolve(CallState.ERRORED, Outcome.invalid_request(descriptor))
            return

        transport = transport_factory()
        if descriptor.cors and not transport.supports_cors and cors_transport_factory is not None:
            transport = cors_transport_factory()
        self._transport = transport

        transport.open(descriptor.method, descriptor.url, descriptor.user, descriptor.password)
        if descriptor.headers is not None:
            for name, value in descriptor.headers.items():
                transport.set_request_header(name, value)
        elif descriptor.needs_form_content_type:
            transport.set_request_header("Content-Type", FORM_CONTENT_TYPE)

        transport.on_load = self._on_load
        transport.on_error = self._on_error
        logger.debug("Dispatching %s %s via %s", descriptor.method, descriptor.url, type(transport).__name__)
        transport.send(descriptor.data)

    def _on_load(self) -> None:
        transport = self._transport
        if not is_success_status(transport.status):
            self._resolve(
                CallState.ERRORED,
                Outcome.from_transport(
                    transport,
                    error_category=ErrorCategory.HTTP_ERROR,
                    error_message=transport.status_text or error_category_to_reason(ErrorCategory.HTTP_ERROR),
                ),
            )
            return

        try:
            body = parse_body(transport.response, self._descriptor.data_type)
        except BodyParseError as exc:
            self._resolve(
                CallState.ERRORED,
                Outcome.from_transport(transport, error_category=ErrorCategory.PARSE_ERROR, error_message=str(exc)),
            )
            return
        self._resolve(CallState.SUCCEEDED, Outcome.from_transport(transport, body=body))

    def _on_error(self) -> None:
        transport = self._transport
        exc = transport.error
        category = categorize_exception(exc) if exc is not None else ErrorCategory.UNKNOWN_ERROR
        self._resolve(
            CallState.ERRORED,
            Outcome.from_transport(
                transport,
                error_category=category,
                error_message=str(exc) if exc is not None and str(exc) else error_category_to_reason(category),
            ),
        )

    def _resolve(self, state: CallState, outcome: Outcome) -> None:
        if self._state is not CallState.UNRESOLVED:
            logger.debug("Ignoring repeated completion for %s", self._descriptor.url)
            return
        self._outcome = outcome
        self._state = state
        logger.debug(
            "Resolved %s %s as %s (status %s)",
            self._descriptor.method,
            self._descriptor.url,
            state.value,
            outcome.status,
        )

        self._dispatched.add(_ALWAYS)
        try:
            if self._callbacks.always is not None:
                self._callbacks.always(outcome)
        finally:
            self._dispatched.update((_DONE, _FAIL))

        if state is CallState.SUCCEEDED:
            if self._callbacks.done is not None:
                self._callbacks.done(outcome.body, outcome)
        elif self._callbacks.fail is not None:
            self._callbacks.fail(outcome)


def request(
    url_or_settings: Settings,
    *,
    transport: TransportFactory | None = None,
    cors_transport: TransportFactory | None = None,
    settings: HttpSettings | None = None,
) -> Call:
    """
    Issue one HTTP request and return its ``Call`` handle.

    ``url_or_settings`` is a URL string or a settings mapping (``method``,
    ``url``, ``headers``, ``cors``, ``data``, ``dataType``, ``user``,
    ``password``, and optional ``always``/``done``/``fail`` handlers).
    ``transport`` and ``cors_transport`` are zero-argument factories; the
    latter is used when ``cors`` is requested and the default transport
    lacks CORS support. Failures never raise: they resolve the call as
    errored and reach ``always``/``fail`` handlers, if any.
    """
    descriptor = build_descriptor(url_or_settings)
    call = Call(descriptor)
    call._start(transport or partial(create_default_transport, settings), cors_transport)
    return call


__all__ = ["Call", "TransportFactory", "request"]
