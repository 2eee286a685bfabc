"""Tests for routeview.http.Uri."""

from __future__ import annotations

from routeview.http import Uri


def test_from_string_components():
    uri = Uri.from_string("https://user:pw@Example.com:8443/blog/post?page=2#top")
    assert uri.get_scheme() == "https"
    assert uri.get_host() == "example.com"
    assert uri.get_port() == 8443
    assert uri.get_user_info() == "user:pw"
    assert uri.get_path() == "/blog/post"
    assert uri.get_query() == "page=2"
    assert uri.get_fragment() == "top"
    assert uri.get_authority() == "user:pw@example.com:8443"


def test_default_port_is_hidden():
    uri = Uri.from_string("https://example.com:443/")
    assert uri.get_port() is None
    assert uri.get_authority() == "example.com"
    assert str(uri) == "https://example.com/"


def test_bare_path():
    uri = Uri.from_string("/posts?page=1")
    assert uri.get_authority() == ""
    assert uri.get_path() == "/posts"
    assert str(uri) == "/posts?page=1"


def test_from_request(request_factory):
    request = request_factory(path="/posts", query_string="a=1&b=2", scheme="http", host="localhost:8000")
    uri = Uri.from_request(request)
    assert uri.get_host() == "localhost"
    assert uri.get_port() == 8000
    assert uri.get_query() == "a=1&b=2"
    assert str(uri) == "http://localhost:8000/posts?a=1&b=2"


def test_from_request_ipv6_host(request_factory):
    uri = Uri.from_request(request_factory(host="[::1]"))
    assert uri.get_host() == "[::1]"
    assert uri.get_port() is None


def test_with_path_and_query_return_copies():
    uri = Uri.from_string("https://example.com/a?x=1")
    other = uri.with_path("/b").with_query("")
    assert str(other) == "https://example.com/b"
    assert str(uri) == "https://example.com/a?x=1"


def test_equality():
    assert Uri.from_string("HTTPS://Example.com/a") == Uri.from_string("https://example.com/a")
    assert Uri.from_string("/a") != Uri.from_string("/b")
