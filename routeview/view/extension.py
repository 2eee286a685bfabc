"""
URL Template Extension
Exposes the per-request URL helper to Jinja2 templates
"""
from contextvars import ContextVar, Token
from typing import Any, Callable, Dict, List, Optional, Tuple

from jinja2 import Environment
from jinja2.ext import Extension

from routeview.exceptions import RuntimeNotLoadedException
from routeview.http.url import UrlHelper


class UrlRuntimeLoader:
    """
    Holds the UrlHelper of the request being rendered

    The helper lives in a ContextVar, so concurrent requests served by the
    same event loop each see their own helper.

    Usage:
        loader = UrlRuntimeLoader()
        token = loader.set(UrlHelper(parser, uri))
        try:
            ...render...
        finally:
            loader.reset(token)
    """

    def __init__(self, name: str = 'url_helper'):
        self._current: ContextVar[Optional[UrlHelper]] = ContextVar(name, default=None)

    def set(self, helper: UrlHelper) -> Token:
        """
        Load a helper for the current context

        Returns:
            Token to pass to reset()
        """
        return self._current.set(helper)

    def reset(self, token: Token):
        """Restore the helper that was loaded before set() returned token"""
        self._current.reset(token)

    def load(self) -> UrlHelper:
        """
        Get the helper for the current context

        Raises:
            RuntimeNotLoadedException: If no helper is loaded
        """
        helper = self._current.get()
        if helper is None:
            raise RuntimeNotLoadedException()
        return helper

    def is_loaded(self) -> bool:
        return self._current.get() is not None


class UrlExtension(Extension):
    """
    Jinja2 extension registering the URL functions as template globals

    Usage:
        env = Environment(extensions=[UrlExtension])
        env.url_runtime_loader.set(helper)

        {{ url_for('posts.show', {'slug': post.slug}) }}
        <a href="{{ relative_url_for('home') }}">Home</a>
        {% if is_current_url('home') %}active{% endif %}
        {{ current_url(true) }}
    """

    name = 'routeview'

    def __init__(self, environment: Environment):
        super().__init__(environment)
        environment.extend(url_runtime_loader=UrlRuntimeLoader())
        environment.globals.update(dict(self.get_functions()))

    def get_name(self) -> str:
        return self.name

    def get_functions(self) -> List[Tuple[str, Callable]]:
        """Template function names and their callables, in registration order"""
        return [
            ('url_for', self.url_for),
            ('relative_url_for', self.relative_url_for),
            ('full_url_for', self.full_url_for),
            ('is_current_url', self.is_current_url),
            ('current_url', self.current_url),
            ('get_uri', self.get_uri),
        ]

    def runtime(self) -> UrlHelper:
        return self.environment.url_runtime_loader.load()

    def url_for(self, route_name: str, data: Optional[Dict[str, Any]] = None,
                query_params: Optional[Dict[str, Any]] = None) -> str:
        return self.runtime().url_for(route_name, data, query_params)

    def relative_url_for(self, route_name: str, data: Optional[Dict[str, Any]] = None,
                         query_params: Optional[Dict[str, Any]] = None) -> str:
        return self.runtime().relative_url_for(route_name, data, query_params)

    def full_url_for(self, route_name: str, data: Optional[Dict[str, Any]] = None,
                     query_params: Optional[Dict[str, Any]] = None) -> str:
        return self.runtime().full_url_for(route_name, data, query_params)

    def is_current_url(self, route_name: str, data: Optional[Dict[str, Any]] = None) -> bool:
        return self.runtime().is_current_url(route_name, data)

    def current_url(self, with_query_string: bool = False) -> str:
        return self.runtime().get_current_url(with_query_string)

    def get_uri(self):
        return self.runtime().get_uri()
