"""
View Package
Jinja2 rendering with route-aware URL functions
"""
from routeview.view.engine import TemplateEngine
from routeview.view.extension import UrlExtension, UrlRuntimeLoader

__all__ = [

    # Core
    'TemplateEngine',

    # Template functions
    'UrlExtension',
    'UrlRuntimeLoader',
]
