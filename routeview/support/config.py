"""
Config Manager - Laravel-style configuration access
Access config files using dot notation
"""

import importlib
import threading
from typing import Any, Dict


class Config:
    """
    Configuration manager with dot notation access

    Usage:
        # Get config value
        paths = Config.get('view.template_paths')

        # With default
        base_path = Config.get('view.base_path', '')

        # Set runtime value
        Config.set('view.base_path', '/blog')

        # Check existence
        if Config.has('view.engine_settings'):
            ...

    Config files should be in the application's config/ directory:
        config/
        ├── app.py
        └── view.py
    """

    _lock = threading.Lock()
    _loaded: Dict[str, Any] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation (case-insensitive)

        Args:
            key: Config key in dot notation (e.g., 'view.base_path')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        key_lower = key.lower()

        # Check runtime overrides first
        if key_lower in cls._runtime_overrides:
            return cls._runtime_overrides[key_lower]

        # Parse dot notation
        parts = key_lower.split('.')
        file_name = parts[0]
        path = parts[1:]

        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        value = cls._loaded.get(file_name)

        if value is None:
            return default

        # Navigate nested attributes and dict keys (case-insensitive)
        for part in path:
            if isinstance(value, dict):
                candidates = value.keys()
                lookup = value.__getitem__
            elif hasattr(value, '__dict__'):
                candidates = dir(value)
                lookup = lambda name, obj=value: getattr(obj, name)
            else:
                return default

            for name in candidates:
                if isinstance(name, str) and name.lower() == part:
                    value = lookup(name)
                    break
            else:
                return default

        return value

    @classmethod
    def _load_config_file(cls, file_name: str):
        """
        Load a config file from config/ directory

        Args:
            file_name: Config file name (without .py extension)
        """
        with cls._lock:
            if file_name in cls._loaded:
                return

            try:
                module = importlib.import_module(f'config.{file_name}')
                cls._loaded[file_name] = module
            except ImportError:
                # Config file doesn't exist
                cls._loaded[file_name] = None

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set configuration value at runtime (does not persist to file)

        Args:
            key: Config key in dot notation (case-insensitive)
            value: Value to set

        Example:
            Config.set('view.base_path', '/blog')
        """
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if configuration key exists"""
        return cls.get(key) is not None

    @classmethod
    def clear_runtime_overrides(cls):
        """Clear all runtime configuration overrides"""
        cls._runtime_overrides.clear()
