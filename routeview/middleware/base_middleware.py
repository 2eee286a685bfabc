"""
Base Middleware Class
Abstract base class for all middlewares
"""
from abc import ABC, abstractmethod
from sanic import Request
from typing import Dict, Any


class Middleware(ABC):
    """
    Base middleware class

    Middlewares can:
    - Inspect/modify requests before they reach routes
    - Inspect/modify responses before they're sent
    - Short-circuit requests (return response early)

    Configuration:
    Subclasses can set these class variables for automatic configuration:
    - ENABLED_CONFIG_KEY: Config key to check if middleware is enabled
    - CONFIG_MAPPING: Dict mapping constructor params to (config key, default)
    - DEFAULT_ENABLED: Default enabled state if config key not found
    """

    ENABLED_CONFIG_KEY: str = None
    CONFIG_MAPPING: Dict[str, tuple] = {}
    DEFAULT_ENABLED: bool = True

    @classmethod
    def _is_enabled(cls) -> bool:
        """
        Hook for custom enabled check logic

        Returns:
            True if middleware should be enabled
        """
        from routeview.support import Config

        if cls.ENABLED_CONFIG_KEY:
            return Config.get(cls.ENABLED_CONFIG_KEY, cls.DEFAULT_ENABLED)

        return cls.DEFAULT_ENABLED

    @classmethod
    def _config_params(cls) -> Dict[str, Any]:
        """
        Load constructor parameters from CONFIG_MAPPING

        Returns:
            Dict of parameter name to configured value
        """
        from routeview.support import Config

        return {
            param_name: Config.get(config_key, default_value)
            for param_name, (config_key, default_value) in cls.CONFIG_MAPPING.items()
        }

    def register(self, app):
        """
        Attach before_request/after_response to a Sanic app

        Args:
            app: Sanic application
        """
        app.register_middleware(self.before_request, 'request')
        app.register_middleware(self.after_response, 'response')

    @abstractmethod
    async def before_request(self, request: Request):
        """
        Called before the request reaches the route handler

        Returns:
            None: Continue to next middleware/route
            HTTPResponse: Short-circuit and return response immediately
        """
        pass

    async def after_response(self, request: Request, response):
        """
        Called after the route handler, before sending response

        Returns:
            response: Modified or original response
        """
        return response
