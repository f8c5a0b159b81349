# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request facade exports."""

from .adapters import StubTransport
from .body import BodyParseError, parse_body
from .httpx_transport import AsyncHttpxTransport, HttpxTransport, create_default_transport
from .merge import DEFAULT_SETTINGS, build_descriptor, extend
from .models import CallbackSet, CallState, DataType, Headers, Outcome, RequestDescriptor
from .request import Call, TransportFactory, request
from .transport import BaseTransport, Transport

__all__ = [
    "DEFAULT_SETTINGS",
    "AsyncHttpxTransport",
    "BaseTransport",
    "BodyParseError",
    "Call",
    "CallState",
    "CallbackSet",
    "DataType",
    "Headers",
    "HttpxTransport",
    "Outcome",
    "RequestDescriptor",
    "StubTransport",
    "Transport",
    "TransportFactory",
    "build_descriptor",
    "create_default_transport",
    "extend",
    "parse_body",
    "request",
]
