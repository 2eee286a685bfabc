"""
Exceptions Package
Package exceptions for integration misuse

Route resolution errors (unknown route name, missing placeholder) come from
the route parser and are never wrapped here.
"""
from routeview.exceptions.custom import (
    FrameworkException,
    RuntimeNotLoadedException,
    ViewNotFoundException,
    ViewNotAttachedException,
)

__all__ = [
    'FrameworkException',
    'RuntimeNotLoadedException',
    'ViewNotFoundException',
    'ViewNotAttachedException',
]
