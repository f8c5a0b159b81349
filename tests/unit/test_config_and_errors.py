# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import socket
import ssl

import httpx

from xhrlite import config
from xhrlite.config import DEFAULT_USER_AGENT
from xhrlite.errors import ErrorCategory, categorize_exception, error_category_to_reason
from xhrlite.log import LOGGER_NAME, setup_logging


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("XHRLITE_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("XHRLITE_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("XHRLITE_HTTP_REDIRECTS", "false")
    monkeypatch.setenv("XHRLITE_HTTP_VERIFY_SSL", "0")

    settings = config.load_http_settings()

    assert settings.timeout == 5.5
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is False
    assert settings.verify_ssl is False


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("XHRLITE_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("XHRLITE_USER_AGENT", "")
    settings = config.load_http_settings()
    assert settings.timeout == config.HttpSettings.timeout
    assert settings.user_agent == DEFAULT_USER_AGENT

    monkeypatch.setenv("XHRLITE_HTTP_TIMEOUT", "-1")
    assert config.load_http_settings().timeout == config.HttpSettings.timeout


def test_http_settings_redirects_truthy_variants(monkeypatch):
    for value in ("1", "on", "YES"):
        monkeypatch.setenv("XHRLITE_HTTP_REDIRECTS", value)
        assert config.load_http_settings().allow_redirects is True


def test_categorize_exception_maps_common_failures():
    assert categorize_exception(httpx.ReadTimeout("slow")) is ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused")) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ssl.SSLError("bad cert")) is ErrorCategory.SSL_ERROR
    assert categorize_exception(socket.gaierror("no host")) is ErrorCategory.DNS_ERROR
    assert categorize_exception(ConnectionResetError()) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ValueError("?")) is ErrorCategory.UNKNOWN_ERROR


def test_categorize_exception_inspects_wrapped_cause():
    try:
        try:
            raise socket.gaierror("no host")
        except socket.gaierror as inner:
            raise httpx.ConnectError("wrapped") from inner
    except httpx.ConnectError as exc:
        assert categorize_exception(exc) is ErrorCategory.DNS_ERROR


def test_error_category_to_reason():
    assert error_category_to_reason(ErrorCategory.INVALID_REQUEST) == "Invalid request object."
    assert error_category_to_reason(None) == ""


def test_setup_logging_sets_package_level(monkeypatch):
    monkeypatch.setenv("XHRLITE_LOG_LEVEL", "debug")
    logger = setup_logging()
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert setup_logging("error").level == logging.ERROR
    logging.getLogger(LOGGER_NAME).setLevel(logging.NOTSET)
