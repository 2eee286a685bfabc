"""
EnvHelper - Read .env files
Laravel-style environment variable access
"""

import os
import threading
from typing import Optional, Any
from dotenv import load_dotenv


class EnvHelper:
    """
    Environment variable reader with .env file support

    Usage:
        # Read
        base_path = EnvHelper.get('VIEW_BASE_PATH', '')

        # Check
        if EnvHelper.has('APP_ENV'):
            ...

        # Load a specific file
        EnvHelper.load('/path/to/.env')
    """

    _lock = threading.Lock()
    _loaded: bool = False

    @classmethod
    def load(cls, env_path=None, override: bool = False) -> bool:
        """
        Load .env file into environment

        Args:
            env_path: Path to .env file (None searches from the working directory)
            override: Whether to override existing environment variables

        Returns:
            bool: True if a .env file was found and loaded
        """
        with cls._lock:
            found = load_dotenv(env_path, override=override)
            cls._loaded = True
            return found

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """
        Get environment variable value

        Args:
            key: Environment variable name
            default: Default value if not found

        Returns:
            Variable value or default
        """
        if not cls._loaded:
            cls.load()

        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """Get boolean environment variable"""
        value = cls.get(key)
        if value is None:
            return default

        return value.lower() in ('true', '1', 'yes', 'on')

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if environment variable exists"""
        if not cls._loaded:
            cls.load()

        return key in os.environ
