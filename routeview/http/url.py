"""
URL Helper
Generates URLs for named routes relative to the current request (template runtime)
"""
from typing import Dict, Optional, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from routeview.http.uri import Uri
    from routeview.routing.route_parser import RouteParser


class UrlHelper:
    """
    Per-request URL helper backing the template functions

    Usage:
        helper = UrlHelper(route_parser, Uri.from_request(request), '/blog')
        helper.url_for('posts.show', {'slug': 'hello'})           # /blog/posts/hello
        helper.relative_url_for('posts.show', {'slug': 'hello'})  # hello
        helper.is_current_url('posts.index')
    """

    @staticmethod
    def relative_path(to: str, from_: str) -> str:
        """
        Get the relative path of `to` from the `from_` path

        Args:
            to: Destination path
            from_: Current path

        Returns:
            Relative path ('' when both paths are equal, './' when the
            destination is the current directory)

        Usage:
            UrlHelper.relative_path('/a/b/c', '/a/x/y')  # ../b/c
        """
        if from_ == to:
            return ''

        # Remove common path (longest prefix of `to` ending in '/')
        index = to.rfind('/')
        while index >= 0:
            if from_.startswith(to[:index + 1]):
                to = to[index + 1:]
                from_ = from_[index + 1:]
                break
            index = to.rfind('/', 0, index)

        goback = '../' * from_.count('/')

        if goback or to:
            return goback + to
        return './'

    def __init__(self, route_parser: 'RouteParser', uri: 'Uri', base_path: str = ''):
        """
        Initialize URL helper

        Args:
            route_parser: Route parser resolving named routes
            uri: Current request URI
            base_path: Prefix the application is mounted under
        """
        self._route_parser = route_parser
        self._uri = uri
        self._base_path = base_path

    @property
    def route_parser(self) -> 'RouteParser':
        return self._route_parser

    def url_for(
        self,
        route_name: str,
        data: Optional[Dict[str, Any]] = None,
        query_params: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Get the url for a named route

        Args:
            route_name: Route name
            data: Route placeholders
            query_params: Query parameters

        Returns:
            URL path as built by the route parser

        Raises:
            Whatever the route parser raises for unknown routes or
            missing placeholders (propagated unchanged)
        """
        return self._route_parser.url_for(route_name, data or {}, query_params or {})

    def relative_url_for(
        self,
        route_name: str,
        data: Optional[Dict[str, Any]] = None,
        query_params: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Get the url for a named route relatively to current path

        The query string (if any) is kept verbatim; only the path is
        relativized against get_current_url().
        """
        path = self.url_for(route_name, data, query_params)
        query = ''

        head, sep, tail = path.partition('?')
        if sep and head:
            path = head
            query = sep + tail

        return self.relative_path(path, self.get_current_url()) + query

    def full_url_for(
        self,
        route_name: str,
        data: Optional[Dict[str, Any]] = None,
        query_params: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Get the full url (scheme and host included) for a named route
        """
        return self._route_parser.full_url_for(self._uri, route_name, data or {}, query_params or {})

    def is_current_url(self, route_name: str, data: Optional[Dict[str, Any]] = None) -> bool:
        """
        Check whether the named route points at the current URL

        Exact string comparison against base path + request path,
        so '/users' and '/users/' are different URLs.
        """
        current_url = self._base_path + self._uri.get_path()
        result = self._route_parser.url_for(route_name, data or {}, {})

        return result == current_url

    def get_current_url(self, with_query_string: bool = False) -> str:
        """
        Get current path on the request Uri

        Args:
            with_query_string: Append '?query' when the query is non-empty

        Returns:
            Base path + request path
        """
        current_url = self._base_path + self._uri.get_path()
        query = self._uri.get_query()

        if with_query_string and query:
            current_url += '?' + query

        return current_url

    def get_uri(self) -> 'Uri':
        """Get the uri"""
        return self._uri

    def set_uri(self, uri: 'Uri') -> 'UrlHelper':
        """
        Set the uri

        Returns:
            Self for method chaining
        """
        self._uri = uri
        return self

    def get_base_path(self) -> str:
        """Get the base path"""
        return self._base_path

    def set_base_path(self, base_path: str) -> 'UrlHelper':
        """
        Set the base path

        Returns:
            Self for method chaining
        """
        self._base_path = base_path
        return self

    def __repr__(self) -> str:
        return f"<UrlHelper {self.get_current_url(True)!r} (base: {self._base_path!r})>"
