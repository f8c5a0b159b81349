# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shallow config merging and descriptor construction."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields
from typing import Any

from .models import DataType, RequestDescriptor

DEFAULT_SETTINGS: Mapping[str, Any] = {"method": "GET"}

_DESCRIPTOR_FIELDS = frozenset(f.name for f in fields(RequestDescriptor))
_ALIASES = {"dataType": "data_type"}

Settings = str | Mapping[str, Any] | None


def _as_mapping(source: Settings) -> Mapping[str, Any] | None:
    if source is None:
        return None
    if isinstance(source, str):
        return {"url": source}
    return source


def extend(base: dict[str, Any] | None, *sources: Settings) -> dict[str, Any]:
    """
    Merge ``sources`` into ``base`` left to right; later keys win.

    ``None`` sources are skipped and a bare string stands for ``{"url": ...}``.
    Sources are never mutated, ``base`` is updated in place and returned.
    """
    out = base if base is not None else {}
    for source in sources:
        mapping = _as_mapping(source)
        if mapping:
            out.update(mapping)
    return out


def build_descriptor(url_or_settings: Settings) -> RequestDescriptor:
    """Merge caller input over the method defaults into a RequestDescriptor."""
    merged = extend(dict(DEFAULT_SETTINGS), url_or_settings)
    values: dict[str, Any] = {}
    for key, value in merged.items():
        name = _ALIASES.get(key, key)
        if name in _DESCRIPTOR_FIELDS:
            values[name] = value

    values["method"] = str(values.get("method") or "GET").upper()
    values["data_type"] = DataType.coerce(values.get("data_type"))
    values["cors"] = bool(values.get("cors"))
    for handler in ("always", "done", "fail"):
        if not callable(values.get(handler)):
            values.pop(handler, None)
    if values.get("headers") is not None:
        values["headers"] = {str(k): str(v) for k, v in dict(values["headers"]).items()}
    return RequestDescriptor(**values)


__all__ = ["DEFAULT_SETTINGS", "Settings", "build_descriptor", "extend"]
