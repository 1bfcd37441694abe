"""
EnvHelper - Read environment variables with .env support
Reads os.environ only; .env files are loaded on an explicit load() call, never written
"""

import os
import threading
from typing import Optional, Any, Dict
from dotenv import load_dotenv, find_dotenv


class EnvHelper:
    """
    Environment variable reader with opt-in .env loading

    Usage:
        # Read
        value = EnvHelper.get('VIEWABLE_VIEW_STRICT_NAMES', 'true')

        # Check
        if EnvHelper.has('VIEWABLE_LOGGING_FORMAT'):
            ...

        # Load the nearest .env (or a specific file) before reading
        EnvHelper.load()
        EnvHelper.load('/path/to/.env')
    """

    _lock = threading.Lock()
    _env_path: Optional[str] = None
    _loaded: bool = False

    @classmethod
    def load(cls, env_path=None, override: bool = False) -> bool:
        """
        Load .env file into environment

        Args:
            env_path: Path to .env file (defaults to the nearest one from cwd)
            override: Whether to override existing environment variables

        Returns:
            bool: True if a .env file was found and loaded
        """
        with cls._lock:
            if env_path:
                cls._env_path = str(env_path)
            elif cls._env_path is None:
                cls._env_path = find_dotenv(usecwd=True)

            cls._loaded = True
            if not cls._env_path or not os.path.exists(cls._env_path):
                return False

            return load_dotenv(cls._env_path, override=override)

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """
        Get environment variable value

        Example:
            fmt = EnvHelper.get('VIEWABLE_LOGGING_FORMAT', 'text')
        """
        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """
        Get boolean environment variable

        Example:
            strict = EnvHelper.get_bool('VIEWABLE_VIEW_STRICT_NAMES', True)
        """
        value = cls.get(key)
        if value is None:
            return default

        return to_bool(value)

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if environment variable exists"""
        return key in os.environ

    @classmethod
    def all(cls) -> Dict[str, str]:
        """Get all environment variables"""
        return dict(os.environ)

    @classmethod
    def is_loaded(cls) -> bool:
        """Whether load() has been called since the last reset"""
        return cls._loaded

    @classmethod
    def reset(cls):
        """Forget the loaded .env path so the next load() searches again"""
        with cls._lock:
            cls._env_path = None
            cls._loaded = False


def to_bool(value: Any) -> bool:
    """Coerce an environment-style value ('true', '1', 'yes', 'on') to bool"""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ('true', '1', 'yes', 'on')
