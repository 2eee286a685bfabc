"""
routeview
Route-aware URL helpers for Jinja2 templates on Sanic

Usage:
    from sanic import Sanic
    from routeview import TemplateEngine, ViewMiddleware

    app = Sanic('blog')
    view = TemplateEngine.create('templates')
    ViewMiddleware.create(app, view).register(app)

    {# in a template #}
    <a href="{{ url_for('post', {'slug': post.slug}) }}">{{ post.title }}</a>
"""
from routeview.http import Uri, UrlHelper
from routeview.routing import RouteParser, SanicRouteParser
from routeview.view import TemplateEngine, UrlExtension, UrlRuntimeLoader
from routeview.middleware import ViewMiddleware
from routeview.service_provider import ServiceProvider, bootstrap

__version__ = '1.0.0'

__all__ = [
    'Uri',
    'UrlHelper',
    'RouteParser',
    'SanicRouteParser',
    'TemplateEngine',
    'UrlExtension',
    'UrlRuntimeLoader',
    'ViewMiddleware',
    'ServiceProvider',
    'bootstrap',
]
