"""
Support Package
Configuration and environment helpers
"""
from routeview.support.config import Config
from routeview.support.env_helper import EnvHelper

__all__ = [
    'Config',
    'EnvHelper',
]
