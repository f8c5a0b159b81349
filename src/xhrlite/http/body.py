# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response body post-processing for the ``json`` and ``xml`` data types."""

from __future__ import annotations

import json
from typing import Any

from lxml import etree

from .models import DataType

_XML_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)


class BodyParseError(ValueError):
    """Raised when a successful response body does not match its declared data type."""


def _as_bytes(raw: Any) -> bytes:
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return bytes(raw)
    return str(raw or "").encode("utf-8")


def parse_body(raw: Any, data_type: DataType | None) -> Any:
    """Return ``raw`` reinterpreted per ``data_type``; raw bodies pass through untouched."""
    if data_type is DataType.JSON:
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as exc:
            raise BodyParseError(f"invalid JSON body: {exc}") from exc
    if data_type is DataType.XML:
        try:
            return etree.fromstring(_as_bytes(raw), parser=_XML_PARSER)
        except (etree.XMLSyntaxError, ValueError) as exc:
            raise BodyParseError(f"invalid XML body: {exc}") from exc
    return raw


__all__ = ["BodyParseError", "parse_body"]
