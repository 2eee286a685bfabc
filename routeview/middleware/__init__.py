"""
Middleware Package
Sanic middlewares for the view layer
"""
from routeview.middleware.base_middleware import Middleware
from routeview.middleware.view_middleware import ViewMiddleware

__all__ = [
    'Middleware',
    'ViewMiddleware',
]
