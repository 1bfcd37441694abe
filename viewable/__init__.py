"""
viewable
Render one piece of data through a default display and any number of named displays
"""

from viewable.view import View, Display, Viewable, ViewableStatic, is_viewable
from viewable.helpers import view, display
from viewable.exceptions import (
    ViewException,
    MissingDefaultDisplayException,
    UnknownDisplayException,
    InvalidRendererException,
    NonStringResultException,
)

__version__ = '1.0.0'

__all__ = [
    'View',
    'Display',
    'Viewable',
    'ViewableStatic',
    'is_viewable',
    'view',
    'display',
    'ViewException',
    'MissingDefaultDisplayException',
    'UnknownDisplayException',
    'InvalidRendererException',
    'NonStringResultException',
]
