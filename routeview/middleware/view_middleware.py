"""
View Middleware
Builds the per-request URL helper and attaches the template engine
"""
from typing import Optional, TYPE_CHECKING
from sanic import Request

from routeview.defaults import DEFAULT_ATTRIBUTE_NAME, DEFAULT_BASE_PATH
from routeview.http.uri import Uri
from routeview.http.url import UrlHelper
from routeview.logging import getLogger
from routeview.middleware.base_middleware import Middleware
from routeview.routing.route_parser import SanicRouteParser

if TYPE_CHECKING:
    from sanic import Sanic
    from routeview.routing.route_parser import RouteParser
    from routeview.view.engine import TemplateEngine

logger = getLogger(__name__)


class ViewMiddleware(Middleware):
    """
    Makes url_for() and friends work inside templates

    For every request:
    - builds a UrlHelper from the request URI and the configured base path
    - loads it into the engine's runtime loader (reset after the response)
    - stores the engine in request.ctx.<attribute_name> (skipped when empty)

    Usage:
        view = TemplateEngine.create('templates')
        ViewMiddleware.create(app, view, base_path='/blog').register(app)

        @app.get('/')
        async def home(request):
            return TemplateEngine.from_request(request).render('home.html')
    """

    ENABLED_CONFIG_KEY = 'view.ENABLED'
    CONFIG_MAPPING = {
        'base_path': ('view.BASE_PATH', None),
        'attribute_name': ('view.ATTRIBUTE_NAME', DEFAULT_ATTRIBUTE_NAME),
    }

    TOKEN_ATTRIBUTE = '_url_helper_token'

    def __init__(
        self,
        route_parser: 'RouteParser',
        engine: 'TemplateEngine',
        base_path: str = DEFAULT_BASE_PATH,
        attribute_name: Optional[str] = DEFAULT_ATTRIBUTE_NAME
    ):
        """
        Initialize view middleware

        Args:
            route_parser: Route parser resolving named routes
            engine: Template engine to expose URL functions to
            base_path: Prefix the application is mounted under
            attribute_name: request.ctx attribute for the engine ('' or None to skip)
        """
        self.route_parser = route_parser
        self.engine = engine
        self.base_path = base_path
        self.attribute_name = attribute_name

    @classmethod
    def create(
        cls,
        app: 'Sanic',
        engine: 'TemplateEngine',
        base_path: Optional[str] = None,
        attribute_name: Optional[str] = None
    ) -> 'ViewMiddleware':
        """
        Create the middleware for a Sanic app

        Unset arguments fall back to config/view.py, then to the
        VIEW_BASE_PATH environment variable (base path only).

        Args:
            app: Sanic application owning the named routes
            engine: Template engine
            base_path: Prefix the application is mounted under
            attribute_name: request.ctx attribute for the engine
        """
        from routeview.support import EnvHelper

        config = cls._config_params()
        if base_path is None:
            base_path = config['base_path']
        if base_path is None:
            base_path = EnvHelper.get('VIEW_BASE_PATH', DEFAULT_BASE_PATH)
        if attribute_name is None:
            attribute_name = config['attribute_name']

        route_parser = SanicRouteParser(app, base_path)
        return cls(route_parser, engine, base_path, attribute_name)

    async def before_request(self, request: Request):
        helper = UrlHelper(self.route_parser, Uri.from_request(request), self.base_path)

        self.engine.ensure_url_extension()
        token = self.engine.get_runtime_loader().set(helper)
        setattr(request.ctx, self.TOKEN_ATTRIBUTE, token)

        if self.attribute_name:
            setattr(request.ctx, self.attribute_name, self.engine)

        logger.debug("Loaded %r for %s", helper, request.path)
        return None

    async def after_response(self, request: Request, response):
        token = getattr(request.ctx, self.TOKEN_ATTRIBUTE, None)
        if token is not None:
            self.engine.get_runtime_loader().reset(token)
            setattr(request.ctx, self.TOKEN_ATTRIBUTE, None)
        return response
