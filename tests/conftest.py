"""Shared fakes for the routeview tests."""

from __future__ import annotations

import re
from types import SimpleNamespace
from urllib.parse import urlencode

import pytest

from routeview.support import Config


class RouteNotFound(Exception):
    pass


class FakeRouteParser:
    """Route parser resolving '{param}' patterns, recording every call."""

    def __init__(self, routes, base_path=""):
        self.routes = routes
        self.base_path = base_path
        self.calls = []

    def url_for(self, route_name, data, query_params):
        self.calls.append(("url_for", route_name, data, query_params))
        if route_name not in self.routes:
            raise RouteNotFound(f"Named route does not exist for name: {route_name}")

        def substitute(match):
            name = match.group(1)
            if name not in data:
                raise KeyError(f"Missing data for URL segment: {name}")
            return str(data[name])

        url = self.base_path + re.sub(r"\{(\w+)\}", substitute, self.routes[route_name])
        if query_params:
            url += "?" + urlencode(query_params)
        return url

    def full_url_for(self, uri, route_name, data, query_params):
        self.calls.append(("full_url_for", route_name, data, query_params))
        path = self.url_for(route_name, data, query_params)
        return f"{uri.get_scheme()}://{uri.get_authority()}{path}"


ROUTES = {
    "home": "/",
    "posts": "/posts",
    "post": "/posts/{slug}",
    "comments": "/posts/{slug}/comments",
    "about": "/about/",
}


@pytest.fixture
def route_parser():
    return FakeRouteParser(dict(ROUTES))


def make_request(path="/", query_string="", scheme="https", host="example.com"):
    return SimpleNamespace(
        scheme=scheme,
        host=host,
        path=path,
        query_string=query_string,
        ctx=SimpleNamespace(),
    )


@pytest.fixture(autouse=True)
def clear_config():
    yield
    Config.clear_runtime_overrides()


@pytest.fixture
def request_factory():
    return make_request
