"""
Providers Package
Service providers bootstrapping the view layer
"""
from routeview.providers.logging_service_provider import LoggingServiceProvider
from routeview.providers.view_service_provider import ViewServiceProvider

DEFAULT_PROVIDERS = [
    LoggingServiceProvider,
    ViewServiceProvider,
]

__all__ = [
    'LoggingServiceProvider',
    'ViewServiceProvider',
    'DEFAULT_PROVIDERS',
]
