"""
Route Parser
Resolves named routes to URLs through Sanic's router
"""
from typing import Dict, Any, Protocol, TYPE_CHECKING

from routeview.logging import getLogger

if TYPE_CHECKING:
    from sanic import Sanic
    from routeview.http.uri import Uri

logger = getLogger(__name__)


class RouteParser(Protocol):
    """
    Capability the URL helper needs from the routing layer

    Errors for unknown route names or missing placeholders are defined by
    the implementation and reach template code unchanged.
    """

    def url_for(self, route_name: str, data: Dict[str, Any], query_params: Dict[str, Any]) -> str:
        ...

    def full_url_for(
        self,
        uri: 'Uri',
        route_name: str,
        data: Dict[str, Any],
        query_params: Dict[str, Any]
    ) -> str:
        ...


class SanicRouteParser:
    """
    Route parser backed by a Sanic application

    Usage:
        parser = SanicRouteParser(app, base_path='/blog')
        parser.url_for('post', {'slug': 'hello'}, {'page': 2})  # /blog/post/hello?page=2

    Route names follow Sanic: the handler name (or name= given to the route
    decorator), optionally prefixed with the blueprint name ('bp.handler').
    Query parameter names starting with '_' are reserved by Sanic's url_for.
    """

    def __init__(self, app: 'Sanic', base_path: str = ''):
        """
        Initialize route parser

        Args:
            app: Sanic application owning the routes
            base_path: Prefix the application is mounted under
        """
        self.app = app
        self.base_path = base_path

    def url_for(self, route_name: str, data: Dict[str, Any], query_params: Dict[str, Any]) -> str:
        """
        Build the path (and query string) for a named route

        Args:
            route_name: Route name
            data: Route placeholders
            query_params: Query parameters

        Returns:
            Base path + route path, with '?query' when query_params is non-empty

        Raises:
            ValueError: If a key is both a placeholder and a query parameter
            sanic.exceptions.URLBuildError: Unknown route or missing placeholder
        """
        overlap = set(data) & set(query_params)
        if overlap:
            raise ValueError(
                f"Keys {sorted(overlap)} passed both as route placeholders and query parameters"
            )

        url = self.app.url_for(route_name, **data, **query_params)
        logger.debug("Resolved route %s to %s", route_name, url)
        return self.base_path + url

    def full_url_for(
        self,
        uri: 'Uri',
        route_name: str,
        data: Dict[str, Any],
        query_params: Dict[str, Any]
    ) -> str:
        """
        Build the absolute URL for a named route using the scheme and
        authority of the given uri

        Args:
            uri: Current request URI
            route_name: Route name
            data: Route placeholders
            query_params: Query parameters

        Returns:
            [scheme:][//authority] + url_for(...)
        """
        path = self.url_for(route_name, data, query_params)
        scheme = uri.get_scheme()
        authority = uri.get_authority()

        protocol = (f"{scheme}:" if scheme else '') + (f"//{authority}" if authority else '')
        return protocol + path

    def __repr__(self) -> str:
        return f"<SanicRouteParser app={getattr(self.app, 'name', None)!r} base={self.base_path!r}>"
