"""
URI Value Object
Immutable view of the current request URI (scheme, authority, path, query)
"""
from typing import Optional
from urllib.parse import urlsplit

from routeview.defaults import DEFAULT_PORTS


class Uri:
    """
    Usage:
        uri = Uri.from_string('https://example.com:8443/blog/post?page=2')
        uri.get_path()       # /blog/post
        uri.get_query()      # page=2
        uri.get_authority()  # example.com:8443

        uri = Uri.from_request(request)  # Sanic request
    """

    def __init__(
        self,
        scheme: str = '',
        host: str = '',
        port: Optional[int] = None,
        path: str = '',
        query: str = '',
        fragment: str = '',
        user_info: str = ''
    ):
        self._scheme = scheme.lower()
        self._host = host.lower()
        self._port = port
        self._path = path
        self._query = query
        self._fragment = fragment
        self._user_info = user_info

    @classmethod
    def from_string(cls, url: str) -> 'Uri':
        """
        Build a Uri from a URL string

        Args:
            url: Absolute URL or bare path (e.g., '/users?page=2')

        Returns:
            Uri instance
        """
        parts = urlsplit(url)
        user_info = ''
        if '@' in parts.netloc:
            user_info = parts.netloc.rsplit('@', 1)[0]

        return cls(
            scheme=parts.scheme,
            host=parts.hostname or '',
            port=parts.port,
            path=parts.path,
            query=parts.query,
            fragment=parts.fragment,
            user_info=user_info,
        )

    @classmethod
    def from_request(cls, request) -> 'Uri':
        """
        Build a Uri from a Sanic request

        Args:
            request: Sanic request object

        Returns:
            Uri for the request's scheme, host, path and raw query string
        """
        host = request.host or ''
        port = None
        # request.host may carry the port, IPv6 hosts keep their brackets
        if host and not host.endswith(']') and ':' in host:
            host, _, port_str = host.rpartition(':')
            if port_str.isdigit():
                port = int(port_str)

        return cls(
            scheme=request.scheme or '',
            host=host,
            port=port,
            path=request.path,
            query=request.query_string or '',
        )

    def get_scheme(self) -> str:
        return self._scheme

    def get_host(self) -> str:
        return self._host

    def get_port(self) -> Optional[int]:
        """Get the port, None when absent or the default for the scheme"""
        if self._port is not None and DEFAULT_PORTS.get(self._scheme) == self._port:
            return None
        return self._port

    def get_user_info(self) -> str:
        return self._user_info

    def get_authority(self) -> str:
        """
        Get the authority component ([user-info@]host[:port])

        Returns:
            Authority string, '' when there is no host
        """
        if not self._host:
            return ''

        authority = self._host
        if self._user_info:
            authority = f"{self._user_info}@{authority}"

        port = self.get_port()
        if port is not None:
            authority = f"{authority}:{port}"

        return authority

    def get_path(self) -> str:
        return self._path

    def get_query(self) -> str:
        """Get the raw query string (without the leading '?')"""
        return self._query

    def get_fragment(self) -> str:
        return self._fragment

    def with_path(self, path: str) -> 'Uri':
        """Return a copy of this Uri with a different path"""
        return self._copy(path=path)

    def with_query(self, query: str) -> 'Uri':
        """Return a copy of this Uri with a different query string"""
        return self._copy(query=query)

    def _copy(self, **changes) -> 'Uri':
        values = {
            'scheme': self._scheme,
            'host': self._host,
            'port': self._port,
            'path': self._path,
            'query': self._query,
            'fragment': self._fragment,
            'user_info': self._user_info,
        }
        values.update(changes)
        return Uri(**values)

    def __str__(self) -> str:
        uri = ''
        if self._scheme:
            uri += f"{self._scheme}:"

        authority = self.get_authority()
        if authority:
            uri += f"//{authority}"

        path = self._path
        if authority and path and not path.startswith('/'):
            path = '/' + path
        uri += path

        if self._query:
            uri += f"?{self._query}"
        if self._fragment:
            uri += f"#{self._fragment}"
        return uri

    def __eq__(self, other) -> bool:
        if not isinstance(other, Uri):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def __repr__(self) -> str:
        return f"<Uri {self}>"
