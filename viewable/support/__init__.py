"""
Support Classes
"""

from viewable.support.env_helper import EnvHelper
from viewable.support.config import Config

__all__ = [
    'EnvHelper',
    'Config',
]
