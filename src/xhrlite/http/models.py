# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request descriptor, outcome and call-state models."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..errors import INVALID_REQUEST_STATUS, INVALID_REQUEST_TEXT, ErrorCategory

if TYPE_CHECKING:
    from .transport import Transport

Headers = dict[str, str]

AlwaysHandler = Callable[["Outcome"], Any]
DoneHandler = Callable[[Any, "Outcome"], Any]
FailHandler = Callable[["Outcome"], Any]


class DataType(str, Enum):
    JSON = "json"
    XML = "xml"

    @classmethod
    def coerce(cls, value: Any) -> DataType | None:
        """Map caller input to a DataType; anything unrecognized means a raw body."""
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class CallState(str, Enum):
    UNRESOLVED = "unresolved"
    SUCCEEDED = "succeeded"
    ERRORED = "errored"


_RAW_BODY: Any = object()


def is_success_status(status: int | None) -> bool:
    return status is not None and 200 <= status < 400


@dataclass
class RequestDescriptor:
    """Effective configuration for one call, produced by the config merger."""

    url: str | None = None
    method: str = "GET"
    headers: Headers | None = None
    cors: bool = False
    data: Any = None
    data_type: DataType | None = None
    user: str | None = None
    password: str | None = None
    always: AlwaysHandler | None = None
    done: DoneHandler | None = None
    fail: FailHandler | None = None

    @property
    def valid(self) -> bool:
        return bool(self.url)

    @property
    def needs_form_content_type(self) -> bool:
        return self.headers is None and self.method in {"POST", "PUT"}


@dataclass(frozen=True)
class Outcome:
    """
    Result of a call once it completes.

    ``status`` is ``0`` when no response reached the client and
    ``INVALID_REQUEST_STATUS`` when the descriptor failed pre-flight checks.
    ``transport`` points back at the transport that produced the outcome for
    diagnostics; ``descriptor`` is only set for local validation failures.
    """

    status: int = 0
    status_text: str = ""
    body: Any = None
    headers: Headers = field(default_factory=dict)
    transport: Transport | None = None
    descriptor: RequestDescriptor | None = None
    error_category: ErrorCategory | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_category is None and is_success_status(self.status)

    @classmethod
    def invalid_request(cls, descriptor: RequestDescriptor) -> Outcome:
        return cls(
            status=INVALID_REQUEST_STATUS,
            status_text=INVALID_REQUEST_TEXT,
            descriptor=descriptor,
            error_category=ErrorCategory.INVALID_REQUEST,
            error_message=INVALID_REQUEST_TEXT,
        )

    @classmethod
    def from_transport(cls, transport: Transport, *, body: Any = _RAW_BODY, **overrides: Any) -> Outcome:
        """Snapshot a completed transport; ``body`` defaults to its raw response."""
        values: dict[str, Any] = {
            "status": transport.status or 0,
            "status_text": transport.status_text or "",
            "body": transport.response if body is _RAW_BODY else body,
            "headers": dict(transport.response_headers or {}),
            "transport": transport,
        }
        values.update(overrides)
        return cls(**values)


@dataclass
class CallbackSet:
    """One handler slot per kind; assigning a slot replaces the previous handler."""

    always: AlwaysHandler | None = None
    done: DoneHandler | None = None
    fail: FailHandler | None = None

    @classmethod
    def from_descriptor(cls, descriptor: RequestDescriptor) -> CallbackSet:
        return cls(always=descriptor.always, done=descriptor.done, fail=descriptor.fail)


__all__ = [
    "AlwaysHandler",
    "CallbackSet",
    "CallState",
    "DataType",
    "DoneHandler",
    "FailHandler",
    "Headers",
    "Outcome",
    "RequestDescriptor",
    "is_success_status",
]
