"""
HTTP Package
URI value object and the per-request URL helper
"""
from routeview.http.uri import Uri
from routeview.http.url import UrlHelper

__all__ = [
    'Uri',
    'UrlHelper',
]
