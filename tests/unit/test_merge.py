# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from xhrlite.http.merge import DEFAULT_SETTINGS, build_descriptor, extend
from xhrlite.http.models import DataType


def test_extend_later_sources_win_and_sources_untouched():
    base = {"method": "GET", "url": "http://a"}
    override = {"url": "http://b", "cors": True}
    result = extend(base, override, {"cors": False})
    assert result is base
    assert result == {"method": "GET", "url": "http://b", "cors": False}
    assert override == {"url": "http://b", "cors": True}


def test_extend_without_sources_returns_base_unchanged():
    base = {"method": "GET"}
    assert extend(base) is base
    assert base == {"method": "GET"}


def test_extend_reads_bare_string_as_url_and_skips_none():
    assert extend({"method": "GET"}, None, "http://x") == {"method": "GET", "url": "http://x"}
    assert extend(None, {"a": 1}) == {"a": 1}


def test_build_descriptor_from_url_defaults_to_get():
    descriptor = build_descriptor("http://x")
    assert descriptor.url == "http://x"
    assert descriptor.method == "GET"
    assert descriptor.headers is None
    assert descriptor.data_type is None
    assert DEFAULT_SETTINGS == {"method": "GET"}


def test_build_descriptor_uppercases_method_and_accepts_data_type_alias():
    descriptor = build_descriptor({"url": "http://x", "method": "post", "dataType": "JSON"})
    assert descriptor.method == "POST"
    assert descriptor.data_type is DataType.JSON
    assert descriptor.needs_form_content_type is True


def test_build_descriptor_custom_headers_suppress_form_content_type():
    descriptor = build_descriptor({"url": "http://x", "method": "put", "headers": {"X-Token": 1}})
    assert descriptor.headers == {"X-Token": "1"}
    assert descriptor.needs_form_content_type is False


def test_build_descriptor_ignores_unknown_keys_and_non_callable_handlers():
    descriptor = build_descriptor({"url": "http://x", "timeout": 3, "done": "not-callable", "dataType": "yaml"})
    assert descriptor.done is None
    assert descriptor.data_type is None
    assert not hasattr(descriptor, "timeout")


def test_build_descriptor_without_url_is_invalid_not_an_exception():
    assert build_descriptor(None).valid is False
    assert build_descriptor({"method": "delete"}).valid is False
    assert build_descriptor("").valid is False
