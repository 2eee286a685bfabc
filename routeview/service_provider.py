"""
Service Provider Base Class
Laravel-style service providers for bootstrapping the view layer on a Sanic app
"""
from abc import ABC
from typing import Iterable, List, Optional, Type, TYPE_CHECKING

if TYPE_CHECKING:
    from sanic import Sanic


class ServiceProvider(ABC):
    """
    Base Service Provider class

    register() runs for every provider before any boot(), so boot() can
    rely on services registered by other providers.
    """

    def __init__(self, app: 'Sanic'):
        self.app = app

    def register(self):
        """
        Register services on the application context

        Example:
            self.app.ctx.view = TemplateEngine.from_config()
        """
        pass

    def boot(self):
        """
        Bootstrap services (after all providers are registered)

        Example:
            ViewMiddleware.create(self.app, self.app.ctx.view).register(self.app)
        """
        pass


def bootstrap(
    app: 'Sanic',
    providers: Optional[Iterable[Type[ServiceProvider]]] = None
) -> List[ServiceProvider]:
    """
    Register then boot service providers on a Sanic app

    Args:
        app: Sanic application
        providers: Provider classes (default: logging and view providers)

    Returns:
        Provider instances in registration order
    """
    if providers is None:
        from routeview.providers import DEFAULT_PROVIDERS
        providers = DEFAULT_PROVIDERS

    instances = [provider(app) for provider in providers]
    for instance in instances:
        instance.register()
    for instance in instances:
        instance.boot()
    return instances
