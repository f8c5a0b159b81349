# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from xhrlite.http.body import BodyParseError, parse_body
from xhrlite.http.models import DataType


def test_parse_body_passes_raw_through():
    raw = object()
    assert parse_body(raw, None) is raw


def test_parse_body_json_accepts_bytes_and_null():
    assert parse_body(b'[1, 2]', DataType.JSON) == [1, 2]
    assert parse_body("null", DataType.JSON) is None


def test_parse_body_xml_with_encoding_declaration():
    root = parse_body('<?xml version="1.0" encoding="UTF-8"?><feed><title>t</title></feed>', DataType.XML)
    assert root.findtext("title") == "t"


@pytest.mark.parametrize(
    ("raw", "data_type"),
    [("", DataType.JSON), (None, DataType.JSON), ("", DataType.XML), ("<open>", DataType.XML)],
)
def test_parse_body_rejects_malformed_input(raw, data_type):
    with pytest.raises(BodyParseError):
        parse_body(raw, data_type)
