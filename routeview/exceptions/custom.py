"""
Custom Exception Classes
Package-specific exceptions with HTTP status codes
"""
from typing import Optional


class FrameworkException(Exception):
    """Base exception for all package exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class RuntimeNotLoadedException(FrameworkException):
    """
    URL runtime not loaded exception

    Raised when a template URL function runs outside a request that went
    through ViewMiddleware (no UrlHelper is loaded for the current context)

    Example:
        raise RuntimeNotLoadedException()
    """
    message = (
        "No URL helper is loaded for the current context. "
        "Make sure ViewMiddleware is registered on the Sanic app."
    )


class ViewNotFoundException(FrameworkException):
    """
    View not found exception

    Raised when a template (or a block inside it) cannot be found

    Example:
        raise ViewNotFoundException("Template [pages/home.html] not found")
    """
    status_code = 404
    message = "View not found"


class ViewNotAttachedException(FrameworkException):
    """
    View not attached exception

    Raised when no template engine is attached to the request context

    Example:
        raise ViewNotAttachedException("Template engine could not be found in request.ctx.view")
    """
    message = "Template engine is not attached to the request"
