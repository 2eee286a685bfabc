"""Tests for the Jinja2 URL extension and runtime loader."""

from __future__ import annotations

import pytest
from jinja2 import Environment

from routeview.exceptions import RuntimeNotLoadedException
from routeview.http import Uri, UrlHelper
from routeview.view import UrlExtension, UrlRuntimeLoader


@pytest.fixture
def env():
    return Environment(extensions=[UrlExtension])


@pytest.fixture
def helper(route_parser):
    return UrlHelper(route_parser, Uri.from_string("https://example.com/posts/hello?page=2"))


def test_function_names_and_order(env):
    extension = env.extensions[UrlExtension.identifier]
    names = [name for name, _ in extension.get_functions()]
    assert names == ["url_for", "relative_url_for", "full_url_for", "is_current_url", "current_url", "get_uri"]
    assert extension.get_name() == "routeview"
    for name in names:
        assert name in env.globals


def test_functions_render_through_loaded_helper(env, helper):
    token = env.url_runtime_loader.set(helper)
    try:
        source = (
            "{{ url_for('post', {'slug': 'x'}) }}|"
            "{{ relative_url_for('post', {'slug': 'x'}, {'a': 1}) }}|"
            "{{ full_url_for('posts') }}|"
            "{{ is_current_url('post', {'slug': 'hello'}) }}|"
            "{{ current_url() }}|{{ current_url(true) }}|"
            "{{ get_uri().get_host() }}"
        )
        result = env.from_string(source).render()
    finally:
        env.url_runtime_loader.reset(token)

    assert result == "/posts/x|x?a=1|https://example.com/posts|True|/posts/hello|/posts/hello?page=2|example.com"


def test_template_function_without_helper_raises(env):
    with pytest.raises(RuntimeNotLoadedException):
        env.from_string("{{ url_for('home') }}").render()


def test_route_errors_reach_the_template_caller(env, helper):
    from tests.conftest import RouteNotFound

    token = env.url_runtime_loader.set(helper)
    try:
        with pytest.raises(RouteNotFound):
            env.from_string("{{ url_for('nope') }}").render()
    finally:
        env.url_runtime_loader.reset(token)


def test_runtime_loader_reset_restores_previous(helper):
    loader = UrlRuntimeLoader()
    assert not loader.is_loaded()
    token = loader.set(helper)
    assert loader.load() is helper
    loader.reset(token)
    assert not loader.is_loaded()
