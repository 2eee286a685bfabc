"""
View Engine
Jinja2 template engine wrapper with URL helpers and Sanic responses
"""
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Type, Union

from jinja2 import BaseLoader, Environment, FileSystemLoader, Template, TemplateNotFound, select_autoescape
from jinja2.ext import Extension
from sanic.response import HTTPResponse, html

from routeview.defaults import DEFAULT_ATTRIBUTE_NAME, DEFAULT_AUTOESCAPE_EXTENSIONS, DEFAULT_TEMPLATE_PATHS
from routeview.exceptions import ViewNotAttachedException, ViewNotFoundException
from routeview.logging import getLogger
from routeview.view.extension import UrlExtension, UrlRuntimeLoader

logger = getLogger(__name__)

PathsType = Union[str, Path, List[Union[str, Path]]]


class TemplateEngine:
    """
    Jinja2 template engine for the framework

    Default variables set on the engine are available in every template;
    per-call data wins over them.

    Usage:
        view = TemplateEngine.create('templates', auto_reload=True)
        view['site_name'] = 'My Blog'

        html = view.fetch('posts/show.html', {'post': post})
        return view.render('posts/show.html', {'post': post})  # HTTPResponse
    """

    def __init__(
        self,
        paths: Optional[PathsType] = None,
        settings: Optional[Dict[str, Any]] = None,
        loader: Optional[BaseLoader] = None
    ):
        """
        Initialize template engine

        Args:
            paths: Template directory or list of directories
            settings: Keyword arguments for jinja2.Environment
            loader: Custom Jinja2 loader (replaces the filesystem loader)
        """
        settings = dict(settings or {})
        settings.setdefault('autoescape', select_autoescape(DEFAULT_AUTOESCAPE_EXTENSIONS))

        if loader is None:
            if paths is None:
                paths = DEFAULT_TEMPLATE_PATHS
            if isinstance(paths, (str, Path)):
                paths = [paths]
            loader = FileSystemLoader([str(path) for path in paths])

        self.loader = loader
        self.environment = Environment(loader=loader, **settings)
        self.defaults: Dict[str, Any] = {}

        self.ensure_url_extension()

    @classmethod
    def create(cls, paths: PathsType, **settings) -> 'TemplateEngine':
        """
        Create an engine for the given template directories

        Example:
            view = TemplateEngine.create(['templates', 'vendor/templates'], trim_blocks=True)
        """
        return cls(paths, settings)

    @classmethod
    def from_config(cls) -> 'TemplateEngine':
        """
        Create an engine from config/view.py (TEMPLATE_PATHS, ENGINE_SETTINGS)
        """
        from routeview.support import Config

        paths = Config.get('view.TEMPLATE_PATHS', DEFAULT_TEMPLATE_PATHS)
        settings = Config.get('view.ENGINE_SETTINGS', {}) or {}
        return cls(paths, settings)

    @staticmethod
    def from_request(request, attribute_name: str = DEFAULT_ATTRIBUTE_NAME) -> 'TemplateEngine':
        """
        Get the engine ViewMiddleware attached to the request

        Args:
            request: Sanic request object
            attribute_name: request.ctx attribute holding the engine

        Raises:
            ViewNotAttachedException: If no engine is attached
        """
        engine = getattr(request.ctx, attribute_name, None)
        if not isinstance(engine, TemplateEngine):
            raise ViewNotAttachedException(
                f"Template engine could not be found in request.ctx.{attribute_name}"
            )
        return engine

    # =========================================================================
    # Extensions
    # =========================================================================

    def add_extension(self, extension: Union[str, Type[Extension]]):
        """Add a Jinja2 extension (class or import path)"""
        self.environment.add_extension(extension)

    def has_extension(self, extension: Type[Extension]) -> bool:
        return extension.identifier in self.environment.extensions

    def ensure_url_extension(self):
        """Install UrlExtension unless it is already registered"""
        if not self.has_extension(UrlExtension):
            self.add_extension(UrlExtension)

    def get_runtime_loader(self) -> UrlRuntimeLoader:
        return self.environment.url_runtime_loader

    def set_runtime_loader(self, runtime_loader: UrlRuntimeLoader):
        self.environment.url_runtime_loader = runtime_loader

    def get_environment(self) -> Environment:
        return self.environment

    def get_loader(self) -> BaseLoader:
        return self.loader

    # =========================================================================
    # Rendering
    # =========================================================================

    def _get_template(self, template: str) -> Template:
        try:
            return self.environment.get_template(template)
        except TemplateNotFound as err:
            raise ViewNotFoundException(f"Template [{template}] not found") from err

    def _context(self, data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        context = dict(self.defaults)
        context.update(data or {})
        return context

    def fetch(self, template: str, data: Optional[Dict[str, Any]] = None) -> str:
        """
        Render a template to a string

        Args:
            template: Template name relative to the template paths
            data: Template variables

        Raises:
            ViewNotFoundException: If the template does not exist
        """
        logger.debug("Rendering template %s", template)
        return self._get_template(template).render(self._context(data))

    def fetch_block(self, template: str, block: str, data: Optional[Dict[str, Any]] = None) -> str:
        """
        Render a single block of a template

        Raises:
            ViewNotFoundException: If the template or the block does not exist
        """
        tmpl = self._get_template(template)
        if block not in tmpl.blocks:
            raise ViewNotFoundException(f"Block [{block}] not found in template [{template}]")

        context = tmpl.new_context(self._context(data))
        return ''.join(tmpl.blocks[block](context))

    def fetch_from_string(self, source: str, data: Optional[Dict[str, Any]] = None) -> str:
        """Render a template given as a string"""
        return self.environment.from_string(source).render(self._context(data))

    def render(
        self,
        template: str,
        data: Optional[Dict[str, Any]] = None,
        status: int = 200,
        headers: Optional[Dict[str, str]] = None
    ) -> HTTPResponse:
        """
        Render a template into a Sanic HTML response

        Example:
            @app.get('/')
            async def home(request):
                return TemplateEngine.from_request(request).render('home.html')
        """
        return html(self.fetch(template, data), status=status, headers=headers)

    # =========================================================================
    # Default variables (mapping access)
    # =========================================================================

    def __getitem__(self, key: str) -> Any:
        return self.defaults[key]

    def __setitem__(self, key: str, value: Any):
        self.defaults[key] = value

    def __delitem__(self, key: str):
        del self.defaults[key]

    def __contains__(self, key: str) -> bool:
        return key in self.defaults

    def __iter__(self) -> Iterator[str]:
        return iter(self.defaults)

    def __repr__(self) -> str:
        return f"<TemplateEngine loader={type(self.loader).__name__} defaults={len(self.defaults)}>"
