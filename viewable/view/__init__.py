"""
View Package
Callable views with named displays, and the conventions for exposing them
"""
from viewable.view.display import Display
from viewable.view.view import View
from viewable.view.contracts import Viewable, ViewableStatic, is_viewable

__all__ = [

    # Core
    'View',
    'Display',

    # Conventions
    'Viewable',
    'ViewableStatic',
    'is_viewable',
]
