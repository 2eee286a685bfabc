"""Tests for routeview.http.UrlHelper."""

from __future__ import annotations

import pytest

from routeview.http import Uri, UrlHelper

from tests.conftest import RouteNotFound


def make_helper(route_parser, url="https://example.com/posts/hello", base_path=""):
    return UrlHelper(route_parser, Uri.from_string(url), base_path)


def test_url_for_delegates_to_route_parser(route_parser):
    helper = make_helper(route_parser)
    assert helper.url_for("post", {"slug": "hello"}) == "/posts/hello"
    assert route_parser.calls[-1] == ("url_for", "post", {"slug": "hello"}, {})


def test_url_for_with_query_params(route_parser):
    helper = make_helper(route_parser)
    assert helper.url_for("posts", {}, {"page": 2}) == "/posts?page=2"


def test_unknown_route_error_propagates_unchanged(route_parser):
    helper = make_helper(route_parser)
    with pytest.raises(RouteNotFound, match="missing"):
        helper.url_for("missing")


def test_missing_placeholder_error_propagates_unchanged(route_parser):
    helper = make_helper(route_parser)
    with pytest.raises(KeyError):
        helper.url_for("post")


def test_relative_url_for_sibling(route_parser):
    helper = make_helper(route_parser, "https://example.com/posts/hello")
    assert helper.relative_url_for("post", {"slug": "world"}) == "world"


def test_relative_url_for_goes_up(route_parser):
    helper = make_helper(route_parser, "https://example.com/posts/hello/comments")
    assert helper.relative_url_for("posts") == "../../posts"


def test_relative_url_for_keeps_query_string(route_parser):
    helper = make_helper(route_parser, "https://example.com/posts/hello/comments")
    result = helper.relative_url_for("post", {"slug": "world"}, {"page": 2, "q": "a b"})
    assert result == "../world?page=2&q=a+b"


def test_relative_url_for_current_page_is_empty(route_parser):
    helper = make_helper(route_parser, "https://example.com/posts/hello?page=3")
    assert helper.relative_url_for("post", {"slug": "hello"}) == ""
    assert helper.relative_url_for("post", {"slug": "hello"}, {"page": 4}) == "?page=4"


def test_relative_url_for_uses_base_path(route_parser):
    route_parser.base_path = "/blog"
    helper = make_helper(route_parser, "https://example.com/posts/hello", base_path="/blog")
    assert helper.relative_url_for("comments", {"slug": "hello"}) == "hello/comments"


def test_full_url_for_passes_current_uri(route_parser):
    helper = make_helper(route_parser, "https://example.com:8443/posts")
    assert helper.full_url_for("post", {"slug": "hi"}) == "https://example.com:8443/posts/hi"
    assert route_parser.calls[0] == ("full_url_for", "post", {"slug": "hi"}, {})


def test_is_current_url(route_parser):
    helper = make_helper(route_parser, "https://example.com/posts/hello?page=2")
    assert helper.is_current_url("post", {"slug": "hello"})
    assert not helper.is_current_url("post", {"slug": "other"})
    assert not helper.is_current_url("posts")


def test_is_current_url_is_exact_about_trailing_slash(route_parser):
    helper = make_helper(route_parser, "https://example.com/about")
    assert not helper.is_current_url("about")
    helper.set_uri(Uri.from_string("https://example.com/about/"))
    assert helper.is_current_url("about")


def test_is_current_url_with_base_path(route_parser):
    route_parser.base_path = "/blog"
    helper = make_helper(route_parser, "https://example.com/posts", base_path="/blog")
    assert helper.is_current_url("posts")
    assert route_parser.calls[-1] == ("url_for", "posts", {}, {})


def test_get_current_url(route_parser):
    helper = make_helper(route_parser, "https://example.com/posts?page=2", base_path="/blog")
    assert helper.get_current_url() == "/blog/posts"
    assert helper.get_current_url(True) == "/blog/posts?page=2"


def test_get_current_url_without_query(route_parser):
    helper = make_helper(route_parser, "https://example.com/posts")
    assert helper.get_current_url(True) == "/posts"


def test_base_path_is_not_normalized(route_parser):
    helper = make_helper(route_parser, "https://example.com/posts", base_path="/blog/")
    assert helper.get_current_url() == "/blog//posts"


def test_setters_chain(route_parser):
    helper = make_helper(route_parser)
    uri = Uri.from_string("http://localhost/about")
    assert helper.set_uri(uri).set_base_path("/app") is helper
    assert helper.get_uri() is uri
    assert helper.get_base_path() == "/app"
    assert helper.get_current_url() == "/app/about"


def test_relative_url_for_empty_path_keeps_query_unsplit(route_parser, monkeypatch):
    route_parser.routes["search"] = ""
    helper = make_helper(route_parser, "https://example.com/posts/hello")
    seen = []
    relative_path = UrlHelper.relative_path

    def recording_relative_path(to, from_):
        seen.append((to, from_))
        return relative_path(to, from_)

    monkeypatch.setattr(UrlHelper, "relative_path", staticmethod(recording_relative_path))

    assert helper.url_for("search", {}, {"q": "x"}) == "?q=x"
    assert helper.relative_url_for("search", {}, {"q": "x"}) == "../../?q=x"
    assert seen == [("?q=x", "/posts/hello")]
