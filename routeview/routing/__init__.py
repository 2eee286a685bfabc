"""
Routing Package
Route parsers resolving named routes to URLs
"""
from routeview.routing.route_parser import RouteParser, SanicRouteParser

__all__ = [
    'RouteParser',
    'SanicRouteParser',
]
