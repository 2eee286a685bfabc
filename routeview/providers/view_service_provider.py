"""
View Service Provider
"""
from routeview.service_provider import ServiceProvider
from routeview.logging import getLogger
from routeview.middleware.view_middleware import ViewMiddleware
from routeview.view.engine import TemplateEngine

logger = getLogger(__name__)


class ViewServiceProvider(ServiceProvider):
    """Service provider for the Jinja2 view layer"""

    CONTEXT_KEY = 'view'

    def register(self):
        """Create the template engine from config and store it on app.ctx"""
        engine = getattr(self.app.ctx, self.CONTEXT_KEY, None)
        if engine is None:
            engine = TemplateEngine.from_config()
            setattr(self.app.ctx, self.CONTEXT_KEY, engine)

    def boot(self):
        """Register ViewMiddleware for the engine stored on app.ctx"""
        if not ViewMiddleware._is_enabled():
            logger.info("View middleware disabled by config")
            return

        engine = getattr(self.app.ctx, self.CONTEXT_KEY)
        middleware = ViewMiddleware.create(self.app, engine)
        middleware.register(self.app)
        logger.debug("View middleware registered (base path %r)", middleware.base_path)
