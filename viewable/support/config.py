"""
Config Manager - dot notation access to package settings
Runtime overrides, application config modules and environment fallbacks
"""

import importlib
import threading
from typing import Any, Optional, Dict

from viewable.defaults import DEFAULT_CONFIG_PACKAGE, DEFAULT_ENV_PREFIX
from viewable.support.env_helper import EnvHelper, to_bool


_MISSING = object()


class Config:
    """
    Configuration manager with dot notation access

    Usage:
        # Get config value
        strict = Config.get('view.STRICT_NAMES', True)

        # Set runtime value
        Config.set('view.strict_names', False)

        # Check existence
        if Config.has('logging.format'):
            ...

    Values are resolved in order:
        1. runtime overrides set with Config.set()
        2. application config modules, e.g. config/view.py defining STRICT_NAMES
        3. environment variables, e.g. VIEWABLE_VIEW_STRICT_NAMES
           (.env values count only after an explicit EnvHelper.load())
        4. the default passed by the caller
    """

    _lock = threading.Lock()
    _package: str = DEFAULT_CONFIG_PACKAGE
    _loaded: Dict[str, Any] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation (case-insensitive)

        Args:
            key: Config key in dot notation (e.g., 'view.strict_names')
            default: Default value if key not found

        Returns:
            Configuration value or default

        Example:
            Config.get('view.STRICT_NAMES', True)
            Config.get('VIEW.strict_names', True)  # Same result
        """
        key_lower = key.lower()

        if key_lower in cls._runtime_overrides:
            return cls._runtime_overrides[key_lower]

        parts = key_lower.split('.')
        file_name = parts[0]
        path = parts[1:]

        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        value = cls._lookup(cls._loaded.get(file_name), path)
        if value is not _MISSING:
            return value

        env_key = '_'.join([DEFAULT_ENV_PREFIX] + [part.upper() for part in parts])
        return EnvHelper.get(env_key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """
        Get configuration value coerced to bool

        Environment values arrive as strings, so 'false' must not be truthy.
        """
        value = cls.get(key)
        if value is None:
            return default
        return to_bool(value)

    @staticmethod
    def _lookup(value: Any, path) -> Any:
        """Walk a module/dict structure case-insensitively"""
        if value is None:
            return _MISSING

        for part in path:
            if isinstance(value, dict):
                candidates = value.keys()
                getter = value.__getitem__
            else:
                candidates = [name for name in dir(value) if not name.startswith('__')]
                getter = lambda name, obj=value: getattr(obj, name)

            match = next((name for name in candidates if name.lower() == part), None)
            if match is None:
                return _MISSING
            value = getter(match)

        return value

    @classmethod
    def _load_config_file(cls, file_name: str):
        """
        Load a config module from the configured package

        Args:
            file_name: Config module name (without .py extension)
        """
        with cls._lock:
            if file_name in cls._loaded:
                return

            try:
                module = importlib.import_module(f'{cls._package}.{file_name}')
                cls._loaded[file_name] = module
            except ImportError:
                # Config module doesn't exist
                cls._loaded[file_name] = None

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set configuration value at runtime (does not persist anywhere)

        Example:
            Config.set('view.strict_names', False)
        """
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if configuration key resolves to a value"""
        return cls.get(key) is not None

    @classmethod
    def use_package(cls, package: str):
        """
        Change the package config modules are imported from

        Example:
            Config.use_package('myapp.settings')  # loads myapp.settings.view
        """
        with cls._lock:
            cls._package = package
            cls._loaded.clear()

    @classmethod
    def reload(cls, file_name: Optional[str] = None):
        """
        Reload configuration module(s)

        Args:
            file_name: Specific module to reload, or None to reload all
        """
        with cls._lock:
            if file_name:
                cls._loaded.pop(file_name, None)
            else:
                cls._loaded.clear()

    @classmethod
    def clear_runtime_overrides(cls):
        """Clear all runtime configuration overrides"""
        cls._runtime_overrides.clear()
