"""Tests for the URL and header helpers used by HubClient."""

import pytest

from hatemp.exceptions import (
    BaseUrlRequiredError,
    ClientConstructionError,
    ErrorKind,
    InvalidTokenError,
    SchemeRequiredInBaseUrlError,
)
from hatemp.utils.url_utils import build_auth_headers, build_rest_url


@pytest.mark.parametrize(
    ("base_url", "expected"),
    [
        ("http://localhost:8123", "http://localhost:8123/api"),
        ("http://localhost:8123/", "http://localhost:8123/api"),
        ("http://localhost:8123///", "http://localhost:8123/api"),
        ("  https://hass.example.com  ", "https://hass.example.com/api"),
        ("https://example.com/homeassistant/", "https://example.com/homeassistant/api"),
        ("http://192.168.1.10:8123", "http://192.168.1.10:8123/api"),
    ],
)
def test_build_rest_url(base_url: str, expected: str):
    """Trailing slashes are stripped and the api segment appended."""
    assert str(build_rest_url(base_url)) == expected


@pytest.mark.parametrize(
    ("base_url", "expected_error"),
    [
        ("", BaseUrlRequiredError),
        ("   ", BaseUrlRequiredError),
        ("/", BaseUrlRequiredError),
        ("localhost:8123", SchemeRequiredInBaseUrlError),
        ("ftp://hass.local", SchemeRequiredInBaseUrlError),
        ("http://", BaseUrlRequiredError),
    ],
)
def test_build_rest_url_rejects_bad_urls(base_url: str, expected_error: type[Exception]):
    """Malformed base URLs are client construction errors."""
    with pytest.raises(expected_error) as exc_info:
        build_rest_url(base_url)

    assert isinstance(exc_info.value, ClientConstructionError)
    assert exc_info.value.kind is ErrorKind.CLIENT_CONSTRUCTION


def test_build_auth_headers():
    assert build_auth_headers("abc.def-ghi_123") == {"Authorization": "Bearer abc.def-ghi_123"}


def test_build_auth_headers_allows_tab():
    assert build_auth_headers("a\tb") == {"Authorization": "Bearer a\tb"}


@pytest.mark.parametrize("token", ["line\nbreak", "carriage\rreturn", "nul\x00", "bell\x07", "del\x7f"])
def test_build_auth_headers_rejects_control_characters(token: str):
    """Tokens that would break the header are rejected before any request."""
    with pytest.raises(InvalidTokenError) as exc_info:
        build_auth_headers(token)

    assert exc_info.value.kind is ErrorKind.CLIENT_CONSTRUCTION
