# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
xhrlite package entrypoint.

A small deferred HTTP request facade: ``request(url_or_settings)`` dispatches
one call through an injectable transport and returns a handle whose
``always``/``done``/``fail``/``then`` handlers fire correctly whether they
are registered before or after the response arrives.
"""

from .config import HttpSettings, load_http_settings
from .errors import ErrorCategory
from .http import (
    AsyncHttpxTransport,
    Call,
    CallState,
    DataType,
    HttpxTransport,
    Outcome,
    RequestDescriptor,
    StubTransport,
    Transport,
    create_default_transport,
    extend,
    request,
)
from .log import setup_logging
from .version import __version__

__all__ = [
    "AsyncHttpxTransport",
    "Call",
    "CallState",
    "DataType",
    "ErrorCategory",
    "HttpSettings",
    "HttpxTransport",
    "Outcome",
    "RequestDescriptor",
    "StubTransport",
    "Transport",
    "__version__",
    "create_default_transport",
    "extend",
    "load_http_settings",
    "request",
    "setup_logging",
]
